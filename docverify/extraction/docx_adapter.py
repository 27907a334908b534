import io

import docx

from docverify.extraction.base import BaseTextExtractor
from docverify.extraction.exceptions import ExtractionError

OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


class DocxAdapter(BaseTextExtractor):
    """Extracts raw text from Word documents using python-docx.

    Paragraphs come first, then table cells in document order. Formatting is
    discarded. Legacy binary ``.doc`` files (OLE2 compound documents) are not
    readable by python-docx and are rejected.
    """

    def extract(self, data: bytes) -> str:
        if data.startswith(OLE2_MAGIC):
            raise ExtractionError(
                "Legacy binary .doc files are not supported, save the file as .docx"
            )
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            raise ExtractionError(f"python-docx could not parse document: {exc}") from exc

        lines = [p.text for p in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append("\t".join(cells))
        return "\n".join(line for line in lines if line.strip()).strip()
