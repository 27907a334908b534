import threading

from docverify.config.settings import Settings
from docverify.exceptions import ValidationError
from docverify.extraction.extractor import DocumentTextExtractor
from docverify.extraction.factory import TextExtractorFactory
from docverify.extraction.models import Document
from docverify.logging.logger import Log
from docverify.plagiarism.factory import PlagiarismVerifierFactory
from docverify.plagiarism.verifier import PlagiarismVerifier
from docverify.processor.errors import translate_error
from docverify.processor.models import PipelineResponse, VerificationResult
from docverify.processor.pipeline import PipelineContext, PipelineStep, ProgressCallback
from docverify.processor.steps import (
    AwaitCheckStep,
    ExtractTextStep,
    FetchReportStep,
    SubmitTextStep,
)
from docverify.summarization.factory import SummarizerFactory
from docverify.summarization.summarizer import Summarizer


class Processor:
    """Orchestrates verification and summarization.

    Verify: extract -> submit -> await check -> fetch report.
    Summarize is a separate call on text the caller already holds; no score
    threshold is enforced here.
    """

    def __init__(
        self,
        extractor: DocumentTextExtractor,
        verifier: PlagiarismVerifier,
        summarizer: Summarizer,
    ) -> None:
        self._verifier = verifier
        self._summarizer = summarizer
        self._steps: list[PipelineStep] = [
            ExtractTextStep(extractor),
            SubmitTextStep(verifier),
            AwaitCheckStep(verifier),
            FetchReportStep(verifier),
        ]

    def run_verification(
        self,
        document: Document | None,
        cancel_event: threading.Event | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> VerificationResult:
        """Run all verification steps, raising on the first failure."""
        if document is None or not document.name:
            raise ValidationError("No file provided")

        Log.info(f"Verifying {document.name} ({len(document.data)} bytes)")
        context = PipelineContext(
            document=document,
            cancel_event=cancel_event or threading.Event(),
            on_progress=on_progress,
        )
        for step in self._steps:
            context = step.run(context)

        if context.extraction is None or context.job is None or context.report is None:
            raise ValueError("Verification pipeline finished without a report")
        return VerificationResult(
            percent=context.report.percent,
            source_count=context.report.source_count,
            remote_id=context.job.remote_id,
            extracted_text=context.extraction.text,
        )

    def verify(
        self,
        document: Document | None,
        cancel_event: threading.Event | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> PipelineResponse:
        try:
            result = self.run_verification(document, cancel_event, on_progress)
        except Exception as exc:
            return translate_error(exc)
        return PipelineResponse(status_code=200, body=result.to_payload())

    def close(self) -> None:
        self._verifier.close()

    def summarize(self, text: str | None) -> PipelineResponse:
        try:
            result = self._summarizer.summarize(text or "")
        except Exception as exc:
            return translate_error(exc, fallback_message="Failed to generate summary")
        return PipelineResponse(
            status_code=200,
            body={"summary": result.as_text(), "bullets": list(result.bullets)},
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all adapters resolved from settings."""
    return Processor(
        extractor=TextExtractorFactory.create(settings),
        verifier=PlagiarismVerifierFactory.create(settings),
        summarizer=SummarizerFactory.create(settings),
    )
