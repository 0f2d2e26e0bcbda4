"""
gitlab_gateway.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that checks GitLab is reachable with the admin token.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from gitlab_gateway.api.deps import client_factory
from gitlab_gateway.errors import GatewayError
from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.services.calls import gitlab_call

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(clients: GitlabClientFactory = Depends(client_factory)) -> dict[str, Any]:
    def _version() -> str:
        with gitlab_call("error.gitlab.unreachable"):
            version, _revision = clients.admin().version()
        return version

    try:
        version = await run_in_threadpool(_version)
    except GatewayError as e:
        e.status_code = HTTP_503_SERVICE_UNAVAILABLE
        raise
    # python-gitlab reports "unknown" instead of raising when /version is not reachable.
    if version == "unknown":
        raise GatewayError("error.gitlab.unreachable", status_code=HTTP_503_SERVICE_UNAVAILABLE)
    return {"status": "ready", "gitlab": version}
