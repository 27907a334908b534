from docverify.extraction.extractor import DocumentTextExtractor
from docverify.extraction.factory import TextExtractorFactory
from docverify.extraction.models import Document, DocumentFormat, ExtractionResult

__all__ = [
    "Document",
    "DocumentFormat",
    "DocumentTextExtractor",
    "ExtractionResult",
    "TextExtractorFactory",
]
