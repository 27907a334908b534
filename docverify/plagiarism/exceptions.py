from docverify.exceptions import DocverifyError


class VerificationError(DocverifyError):
    """Base exception for the plagiarism verification stage."""


class SubmissionError(VerificationError):
    """Raised when the detection service does not return a record id."""


class CheckFailedError(VerificationError):
    """Raised when the remote check ends in the FAILED state."""


class CheckTimeoutError(VerificationError, TimeoutError):
    """Raised when the poll bound or overall deadline is exceeded."""


class CheckCancelledError(VerificationError):
    """Raised when the caller cancels a running verification."""


class ReportUnavailableError(VerificationError):
    """Raised when the report body is missing or malformed."""


class InvalidStateTransitionError(VerificationError):
    """Raised when a job would move backwards or leave a terminal state."""
