from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from docverify.extraction.models import Document
from docverify.logging.logger import Log
from docverify.processor.models import PipelineResponse
from docverify.processor.processor import Processor

INVALID_BODY_MESSAGE = "Invalid request body"


class SummaryPayload(BaseModel):
    text: str | None = None


def _to_json(response: PipelineResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)


def create_app(processor: Processor) -> FastAPI:
    """Build the HTTP app around an already-wired Processor."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        processor.close()

    app = FastAPI(title="docverify", lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        Log.warning(f"Rejected request to {request.url.path}: {len(exc.errors())} validation errors")
        return _to_json(PipelineResponse.error(400, INVALID_BODY_MESSAGE))

    @app.get("/")
    def health_check() -> dict[str, str]:
        return {"status": "docverify running"}

    # sync handlers: FastAPI runs them in its threadpool, the pipeline blocks
    @app.post("/api/plag-check")
    def plag_check(file: UploadFile | None = File(None)) -> JSONResponse:
        document = None
        if file is not None and file.filename:
            document = Document.from_upload(file.filename, file.file.read())
        return _to_json(processor.verify(document))

    @app.post("/api/generate-summary")
    def generate_summary(payload: SummaryPayload) -> JSONResponse:
        return _to_json(processor.summarize(payload.text))

    return app
