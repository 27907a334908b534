import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from docverify.extraction.models import Document, ExtractionResult
from docverify.plagiarism.models import PlagiarismJob, PlagiarismReport
from docverify.processor.models import PipelineStage

ProgressCallback = Callable[[PipelineStage], None]


@dataclass(slots=True)
class PipelineContext:
    document: Document
    cancel_event: threading.Event = field(default_factory=threading.Event)
    on_progress: ProgressCallback | None = None
    extraction: ExtractionResult | None = None
    job: PlagiarismJob | None = None
    report: PlagiarismReport | None = None

    def emit(self, stage: PipelineStage) -> None:
        if self.on_progress is not None:
            self.on_progress(stage)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
