from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.exceptions import ExtractionError


class PlainTextAdapter(BaseTextExtractor):
    """Decodes bytes as UTF-8 text."""

    def extract(self, data: bytes) -> str:
        try:
            # utf-8-sig drops a leading BOM if present
            return data.decode("utf-8-sig").strip()
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"File is not valid UTF-8 text: {exc}") from exc
