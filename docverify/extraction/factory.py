from docverify.config.settings import Settings
from docverify.extraction.base import BasePdfExtractor
from docverify.extraction.docx_adapter import DocxAdapter
from docverify.extraction.extractor import DocumentTextExtractor
from docverify.extraction.models import DocumentFormat
from docverify.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docverify.extraction.plain_text_adapter import PlainTextAdapter
from docverify.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Creates the document extractor with the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> DocumentTextExtractor:
        return DocumentTextExtractor(
            adapters={
                DocumentFormat.PDF: cls.create_pdf_extractor(settings),
                DocumentFormat.DOC_DOCX: DocxAdapter(),
                DocumentFormat.PLAIN: PlainTextAdapter(),
            }
        )

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
