from docverify.exceptions import DocverifyError


class SummarizationError(DocverifyError):
    """Base exception for the summarization stage."""


class EmptyCompletionError(SummarizationError):
    """Raised when the completion service returns no usable content."""


class PromptLoadError(SummarizationError):
    """Raised when a bundled prompt template cannot be read."""
