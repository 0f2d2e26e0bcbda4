"""
gitlab_gateway.errors

Named gateway errors.

Responsibilities:
- Define `GatewayError`, the single error type raised by the service layer.
- Carry a stable error code (e.g. `error.branch.create`) plus the upstream message.
"""

from __future__ import annotations


class GatewayError(Exception):
    """
    A failed GitLab operation, identified by a stable code.

    Every client exception and every absent result for an operation maps to the
    same code; the upstream message (when there is one) travels in `message`.
    """

    def __init__(
        self,
        code: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message or code)
        self.code = code
        self.message = message or code
        # None means "use the configured default" (see `api.errors`).
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"GatewayError(code={self.code!r}, message={self.message!r})"


# --- Module Notes -----------------------------------------------------------
# HTTP rendering lives in `api.errors`; services never import FastAPI.
