from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOC_DOCX = "doc_docx"
    PLAIN = "plain"


_SUFFIX_FORMATS: dict[str, DocumentFormat] = {
    ".pdf": DocumentFormat.PDF,
    ".doc": DocumentFormat.DOC_DOCX,
    ".docx": DocumentFormat.DOC_DOCX,
}


def format_from_name(name: str) -> DocumentFormat:
    """Infer a format from the file extension, defaulting to PLAIN."""
    suffix = PurePath(name.lower()).suffix
    return _SUFFIX_FORMATS.get(suffix, DocumentFormat.PLAIN)


@dataclass(frozen=True)
class Document:
    """An uploaded document as received from the caller."""

    name: str
    data: bytes
    declared_format: DocumentFormat

    @classmethod
    def from_upload(cls, name: str, data: bytes) -> "Document":
        return cls(name=name, data=data, declared_format=format_from_name(name))


@dataclass(frozen=True)
class ExtractionResult:
    """Plain text pulled out of a document."""

    text: str
    detected_format: DocumentFormat = DocumentFormat.PLAIN
