"""FastAPI application entrypoint for ngcomp service mode."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, load_config
from ..errors import ExtractionInProgressError, MissingMetadataError
from ..logging import get_logger
from ..orchestrator import ExtractionOrchestrator, InFlightGuard
from ..ports.base import EditorPort
from ..ports.editors import RequestEditor


class ExtractRequest(BaseModel):
    document_path: Optional[str] = None
    selection: str = ""
    name: Optional[str] = None
    document_text: str = ""


class ExtractResponse(BaseModel):
    status: str
    directory: Optional[str] = None
    class_source: Optional[str] = None
    template: Optional[str] = None
    stylesheet: Optional[str] = None
    missing_fields: List[str] = []


class HealthResponse(BaseModel):
    status: str


OrchestratorFactory = Callable[[EditorPort, InFlightGuard], ExtractionOrchestrator]


def _default_orchestrator(editor: EditorPort, guard: InFlightGuard) -> ExtractionOrchestrator:
    document = editor.active_document()
    root = document.path.parent if document is not None and document.path is not None else Path.cwd()
    return ExtractionOrchestrator(editor, config=load_config(root), guard=guard)


def create_app(
    orchestrator_factory: OrchestratorFactory = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing the extract command."""

    app = FastAPI(title="ngcomp Service", version="1.0.0")
    # One guard per app so concurrent requests for the same target are rejected.
    guard = InFlightGuard()
    logger = get_logger("service")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/extract", response_model=ExtractResponse)
    async def extract(payload: ExtractRequest) -> ExtractResponse:
        editor = RequestEditor(
            payload.document_path,
            payload.selection,
            payload.name,
            document_text=payload.document_text,
        )
        orchestrator = orchestrator_factory(editor, guard)
        result = await orchestrator.run()

        if editor.errors:
            logger.debug("Extraction rejected: %s", "; ".join(editor.errors))
            raise HTTPException(status_code=400, detail=editor.errors[0])
        if result is None:
            return ExtractResponse(status="skipped")

        return ExtractResponse(
            status="ok",
            directory=str(result.directory),
            class_source=str(result.paths.class_source),
            template=str(result.paths.template),
            stylesheet=str(result.paths.stylesheet),
            missing_fields=result.missing_fields,
        )

    @app.exception_handler(ExtractionInProgressError)
    async def in_progress_handler(
        _: Any, exc: ExtractionInProgressError
    ) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(MissingMetadataError)
    async def missing_metadata_handler(
        _: Any, exc: MissingMetadataError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "missing_fields": exc.missing},
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
