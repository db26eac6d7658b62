"""FastAPI application for the wireframe engine."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from server.routers import documents, patterns, wireframe
from server.server_config import APP_DESCRIPTION, APP_TITLE
from wireframe2svg.exceptions import DocumentNotFoundError, FetchError, StorageError, Wireframe2svgError
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION)
app.include_router(wireframe.router)
app.include_router(documents.router)
app.include_router(patterns.router)


def _status_for(exc: Wireframe2svgError) -> int:
    if isinstance(exc, DocumentNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, FetchError):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(Wireframe2svgError)
async def handle_wireframe_error(request: Request, exc: Wireframe2svgError) -> JSONResponse:
    status_code = _status_for(exc)
    log = logger.warning if isinstance(exc, (DocumentNotFoundError, StorageError)) else logger.error
    log("Request failed", extra={"path": request.url.path, "status": status_code, "error": str(exc)})
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
