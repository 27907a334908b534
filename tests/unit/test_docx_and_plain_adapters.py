import pytest

from docverify.extraction.docx_adapter import OLE2_MAGIC, DocxAdapter
from docverify.extraction.exceptions import ExtractionError
from docverify.extraction.plain_text_adapter import PlainTextAdapter
from tests.helpers import make_docx


class TestDocxAdapter:
    def test_extracts_paragraphs_and_tables(self, essay_docx_bytes: bytes) -> None:
        text = DocxAdapter().extract(essay_docx_bytes)
        assert "Academic integrity depends on citing every source." in text
        assert "Plagiarism checks compare" in text
        assert "Smith\t2019" in text

    def test_skips_blank_paragraphs(self) -> None:
        text = DocxAdapter().extract(make_docx(["first", "", "   ", "second"]))
        assert text == "first\nsecond"

    def test_rejects_legacy_doc(self) -> None:
        with pytest.raises(ExtractionError, match="Legacy binary .doc"):
            DocxAdapter().extract(OLE2_MAGIC + b"\x00" * 512)

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(ExtractionError, match="python-docx"):
            DocxAdapter().extract(b"definitely not a zip")


class TestPlainTextAdapter:
    def test_decodes_utf8(self) -> None:
        assert PlainTextAdapter().extract("  café résumé \n".encode()) == "café résumé"

    def test_drops_bom(self) -> None:
        assert PlainTextAdapter().extract(b"\xef\xbb\xbfhello") == "hello"

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(ExtractionError, match="not valid UTF-8"):
            PlainTextAdapter().extract(b"\xff\xfe\xfa")
