from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single stripped string.

        Raises:
            ExtractionError: if the bytes are not valid for this format.
        """


class BasePdfExtractor(BaseTextExtractor):
    """Marker base for PDF adapters, selectable via ``settings.pdf_engine``."""
