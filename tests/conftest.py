"""
tests.conftest

Shared fixtures: an app wired to a mocked GitLab client factory.

Responsibilities:
- Build the FastAPI app in test mode.
- Replace the client factory with `MagicMock`s so no request leaves the process.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from gitlab_gateway.api.app import create_app
from gitlab_gateway.api.deps import client_factory
from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.settings import Settings


def rest(**attrs: Any) -> MagicMock:
    """A stand-in for a python-gitlab RESTObject whose `asdict()` returns `attrs`."""
    obj = MagicMock()
    obj.asdict.return_value = dict(attrs)
    return obj


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", gitlab_url="https://gitlab.example.com", gitlab_admin_token="t0k")


@pytest.fixture
def gl() -> MagicMock:
    return MagicMock(name="gitlab")


@pytest.fixture
def project(gl: MagicMock) -> MagicMock:
    proj = MagicMock(name="project")
    gl.projects.get.return_value = proj
    return proj


@pytest.fixture
def clients(gl: MagicMock) -> MagicMock:
    factory = MagicMock(spec=GitlabClientFactory)
    factory.for_user.return_value = gl
    factory.admin.return_value = gl
    return factory


@pytest.fixture
def app(settings: Settings, clients: MagicMock) -> FastAPI:
    app = create_app(settings=settings)
    app.dependency_overrides[client_factory] = lambda: clients
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


# --- Module Notes -----------------------------------------------------------
# `gl` is returned for both admin and impersonated lookups; assert on `clients`
# to check which identity an endpoint used.
