import pymupdf

from docverify.extraction.base import BasePdfExtractor
from docverify.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf could not parse PDF: {exc}") from exc
        return "\n".join(pages).strip()
