"""Maps internal errors to caller-facing status/message pairs.

Only the message in this table crosses the boundary; exception detail is
logged and dropped.
"""

from docverify.exceptions import ConfigurationError, UpstreamError, ValidationError
from docverify.extraction.exceptions import ExtractionError, InsufficientContentError
from docverify.logging.logger import Log
from docverify.plagiarism.exceptions import (
    CheckCancelledError,
    CheckFailedError,
    CheckTimeoutError,
    ReportUnavailableError,
    SubmissionError,
)
from docverify.processor.models import PipelineResponse
from docverify.summarization.exceptions import EmptyCompletionError

INSUFFICIENT_CONTENT_MESSAGE = (
    "Extracted text is too short (<80 chars). Document may be scanned image-based PDF."
)

# first matching entry wins, so subclasses go before their bases
ERROR_RESPONSES: list[tuple[type[Exception], int, str]] = [
    (InsufficientContentError, 400, INSUFFICIENT_CONTENT_MESSAGE),
    (ExtractionError, 400, "Could not extract text from document"),
    (ConfigurationError, 500, "Missing API key"),
    (SubmissionError, 500, "Failed to submit text"),
    (CheckFailedError, 500, "Checking failed"),
    (CheckTimeoutError, 504, "Checking timed out"),
    (CheckCancelledError, 499, "Checking cancelled"),
    (ReportUnavailableError, 500, "Plagiarism report unavailable"),
    (EmptyCompletionError, 500, "No summary generated"),
    (UpstreamError, 502, "Upstream service error"),
]


def translate_error(exc: Exception, fallback_message: str = "Server error") -> PipelineResponse:
    """Build the error response for ``exc`` and log the diagnostic."""
    if isinstance(exc, ValidationError):
        Log.warning(f"Rejected request: {exc}")
        return PipelineResponse.error(400, str(exc))

    for error_type, status_code, message in ERROR_RESPONSES:
        if isinstance(exc, error_type):
            log = Log.warning if status_code < 500 else Log.error
            log(f"{type(exc).__name__}: {exc}")
            return PipelineResponse.error(status_code, message)

    Log.exception(f"Unexpected {type(exc).__name__}: {exc}")
    return PipelineResponse.error(500, fallback_message)
