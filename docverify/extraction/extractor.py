from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.exceptions import InsufficientContentError
from docverify.extraction.format_detection import detect_format
from docverify.extraction.models import Document, DocumentFormat, ExtractionResult
from docverify.logging.logger import Log

MIN_EXTRACTED_CHARS = 80


class DocumentTextExtractor:
    """Turns a Document into an ExtractionResult, whatever its container format."""

    def __init__(
        self,
        adapters: dict[DocumentFormat, BaseTextExtractor],
        min_chars: int = MIN_EXTRACTED_CHARS,
    ) -> None:
        missing = set(DocumentFormat) - set(adapters)
        if missing:
            raise ValueError(
                f"No extractor registered for: {sorted(f.value for f in missing)}"
            )
        self._adapters = adapters
        self._min_chars = min_chars

    def extract(self, document: Document) -> ExtractionResult:
        """Extract and validate text.

        Raises:
            ExtractionError: if the bytes are malformed for the detected format.
            InsufficientContentError: if fewer than ``min_chars`` remain after trimming.
        """
        detected = detect_format(document.declared_format, document.data)
        if detected is not document.declared_format:
            Log.warning(
                f"{document.name}: content looks like {detected.value}, "
                f"name suggests {document.declared_format.value}"
            )

        text = self._adapters[detected].extract(document.data)
        Log.info(f"Extracted {len(text)} chars from {document.name} ({detected.value})")

        if len(text.strip()) < self._min_chars:
            raise InsufficientContentError(
                f"Extracted text is {len(text.strip())} chars, "
                f"minimum is {self._min_chars}"
            )
        return ExtractionResult(text=text, detected_format=detected)
