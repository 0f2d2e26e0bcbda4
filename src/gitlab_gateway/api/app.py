"""
gitlab_gateway.api.app

FastAPI app factory for the GitLab Gateway service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Create the GitLab client factory shared by all requests.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gitlab_gateway import __version__
from gitlab_gateway.api.errors import register_error_handlers
from gitlab_gateway.api.routers.health import router as health_router
from gitlab_gateway.api.routers.members import router as members_router
from gitlab_gateway.api.routers.projects import router as projects_router
from gitlab_gateway.api.routers.repository import router as repository_router
from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.observability.logging import configure_logging, get_logger
from gitlab_gateway.observability.middleware import RequestContextMiddleware
from gitlab_gateway.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, gitlab_url=settings.gitlab_url)
        yield
        log.info("shutdown")

    app = FastAPI(
        title="GitLab Gateway",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Stateless: builds a fresh python-gitlab client per call.
    app.state.clients = GitlabClientFactory(settings=settings)

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app, settings=settings)
    app.include_router(health_router, tags=["health"])
    app.include_router(repository_router)
    app.include_router(projects_router)
    app.include_router(members_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; GitLab calls stay in the services layer.
