"""Content sniffing for uploaded documents.

Magic bytes win over the file name. The declared (suffix-based) format is only
used when the content carries no recognisable signature.
"""

import io
import zipfile

from docverify.extraction.docx_adapter import OLE2_MAGIC
from docverify.extraction.models import DocumentFormat

PDF_MAGIC = b"%PDF-"
ZIP_MAGIC = b"PK\x03\x04"
_DOCX_MAIN_PART = "word/document.xml"


def sniff_format(data: bytes) -> DocumentFormat | None:
    """Return the format implied by the content, or None if unknown."""
    if data[:1024].lstrip(b"\x00\t\n\r\x0c ").startswith(PDF_MAGIC):
        return DocumentFormat.PDF
    if data.startswith(OLE2_MAGIC):
        return DocumentFormat.DOC_DOCX
    if data.startswith(ZIP_MAGIC) and _is_word_package(data):
        return DocumentFormat.DOC_DOCX
    return None


def detect_format(declared: DocumentFormat, data: bytes) -> DocumentFormat:
    sniffed = sniff_format(data)
    return sniffed if sniffed is not None else declared


def _is_word_package(data: bytes) -> bool:
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            return _DOCX_MAIN_PART in archive.namelist()
    except zipfile.BadZipFile:
        return False
