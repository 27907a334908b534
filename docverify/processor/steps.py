from docverify.extraction.extractor import DocumentTextExtractor
from docverify.logging.logger import Log
from docverify.plagiarism.models import JobState, PlagiarismJob
from docverify.plagiarism.verifier import PlagiarismVerifier
from docverify.processor.models import PipelineStage
from docverify.processor.pipeline import PipelineContext, PipelineStep

_STAGE_FOR_STATE = {
    JobState.SUBMITTED: PipelineStage.SUBMITTED,
    JobState.CHECKING: PipelineStage.CHECKING,
    JobState.CHECKED: PipelineStage.CHECKED,
}


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentTextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extraction = self._extractor.extract(context.document)
        context.emit(PipelineStage.EXTRACTED)
        return context


class SubmitTextStep(PipelineStep):
    def __init__(self, verifier: PlagiarismVerifier) -> None:
        self._verifier = verifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before submission")
        context.job = self._verifier.submit(context.extraction.text, context.document.name)
        Log.info(f"{context.document.name} submitted as text {context.job.remote_id}")
        context.emit(PipelineStage.SUBMITTED)
        return context


class AwaitCheckStep(PipelineStep):
    def __init__(self, verifier: PlagiarismVerifier) -> None:
        self._verifier = verifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.job is None:
            raise ValueError("PipelineContext.job must be set before polling")

        def on_state(job: PlagiarismJob) -> None:
            stage = _STAGE_FOR_STATE.get(job.state)
            if stage is not None:
                context.emit(stage)

        self._verifier.wait_until_checked(context.job, context.cancel_event, on_state)
        return context


class FetchReportStep(PipelineStep):
    def __init__(self, verifier: PlagiarismVerifier) -> None:
        self._verifier = verifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.job is None:
            raise ValueError("PipelineContext.job must be set before fetching the report")
        context.report = self._verifier.fetch_report(context.job)
        context.emit(PipelineStage.REPORTED)
        return context
