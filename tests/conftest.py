import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from tests.helpers import make_docx, make_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return make_pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def essay_pdf_bytes() -> bytes:
    """A PDF with well over the minimum amount of text."""
    return make_pdf(
        [
            "Academic integrity depends on citing every source.",
            "Plagiarism checks compare submitted text against published work.",
            "This essay discusses how citation practice evolved.",
        ]
    )


@pytest.fixture()
def essay_docx_bytes() -> bytes:
    return make_docx(
        [
            "Academic integrity depends on citing every source.",
            "Plagiarism checks compare submitted text against published work.",
        ],
        table=[["Source", "Year"], ["Smith", "2019"]],
    )
