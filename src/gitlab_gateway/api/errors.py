"""
gitlab_gateway.api.errors

HTTP rendering of named gateway errors.

Responsibilities:
- Render every `GatewayError` as a uniform JSON error body.
- Log each rendered error with its code.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gitlab_gateway.errors import GatewayError
from gitlab_gateway.observability.logging import get_logger
from gitlab_gateway.settings import Settings

log = get_logger(__name__)


class ErrorResponse(BaseModel):
    failed: bool = True
    code: str
    message: str


def register_error_handlers(app: FastAPI, *, settings: Settings) -> None:
    @app.exception_handler(GatewayError)
    async def _gateway_error(_: Request, exc: GatewayError) -> JSONResponse:
        status_code = exc.status_code or settings.error_status_code
        log.error("gateway_error", code=exc.code, message=exc.message, status_code=status_code)
        body = ErrorResponse(code=exc.code, message=exc.message)
        return JSONResponse(status_code=status_code, content=body.model_dump())
