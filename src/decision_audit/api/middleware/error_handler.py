"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from decision_audit.exceptions import (
    DecisionAuditError,
    TextExtractionError,
    UnsupportedFormatError,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(UnsupportedFormatError)
    async def handle_unsupported(request: Request, exc: UnsupportedFormatError) -> JSONResponse:
        return JSONResponse(
            status_code=415,
            content={"error": str(exc), "type": "unsupported_format", "suffix": exc.suffix},
        )

    @app.exception_handler(TextExtractionError)
    async def handle_extraction_error(request: Request, exc: TextExtractionError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": str(exc), "type": "text_extraction_error"})

    @app.exception_handler(DecisionAuditError)
    async def handle_generic_error(request: Request, exc: DecisionAuditError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "decision_audit_error"})
