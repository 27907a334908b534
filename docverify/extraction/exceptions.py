from docverify.exceptions import DocverifyError


class ExtractionError(DocverifyError):
    """Raised when a document cannot be parsed as its detected format."""


class InsufficientContentError(DocverifyError):
    """Raised when extracted text is too short to check.

    Usually means the document is a scanned image or empty.
    """
