"""Shared builders for test documents and a scripted detection service."""

import io
import json
from collections.abc import Iterable

import docx
import httpx
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

SAMPLE_SENTENCE = "Academic integrity depends on citing every source that shaped the argument. "


def long_text(min_chars: int = 500) -> str:
    text = ""
    while len(text) < min_chars:
        text += SAMPLE_SENTENCE
    return text.strip()


def make_pdf(lines: Iterable[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in lines:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


def make_docx(paragraphs: Iterable[str], table: list[list[str]] | None = None) -> bytes:
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


class FakeDetectionService:
    """Scripted stand-in for the detection service, served via httpx.MockTransport."""

    def __init__(
        self,
        states: list[int] | None = None,
        report: dict[str, object] | None = None,
        submit_payload: object = None,
        text_id: int = 4242,
    ) -> None:
        self.states = list(states or [5])
        self.report = report if report is not None else {"percent": 12, "source_count": 3}
        self.submit_payload = (
            submit_payload if submit_payload is not None else {"data": {"text": {"id": text_id}}}
        )
        self.text_id = text_id
        self.requests: list[httpx.Request] = []

    @property
    def poll_count(self) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith(f"/text/{self.text_id}"))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.method == "POST" and path.endswith("/text"):
            return httpx.Response(200, json=self.submit_payload)
        if path.endswith(f"/text/report/{self.text_id}"):
            return httpx.Response(200, json={"data": {"report": self.report}})
        if path.endswith(f"/text/{self.text_id}"):
            state = self.states.pop(0) if len(self.states) > 1 else self.states[0]
            return httpx.Response(200, json={"data": {"state": state}})
        return httpx.Response(404, content=json.dumps({"message": "not found"}))


