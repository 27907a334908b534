import io

import pdfplumber

from docverify.extraction.base import BasePdfExtractor
from docverify.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber could not parse PDF: {exc}") from exc
        return "\n".join(pages).strip()
