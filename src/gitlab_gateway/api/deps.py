"""
gitlab_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, the GitLab client factory and services.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Depends, Request

from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.services.member_service import MemberService
from gitlab_gateway.services.project_service import ProjectService
from gitlab_gateway.services.repository_service import RepositoryService
from gitlab_gateway.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Settings and the client factory are stashed on app.state by `api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def client_factory(request: Request) -> GitlabClientFactory:
    return request.app.state.clients  # type: ignore[attr-defined]


def repository_service(
    clients: GitlabClientFactory = Depends(client_factory),
    settings: Settings = Depends(settings_dep),
) -> RepositoryService:
    return RepositoryService(clients=clients, settings=settings)


def project_service(
    clients: GitlabClientFactory = Depends(client_factory),
    settings: Settings = Depends(settings_dep),
) -> ProjectService:
    return ProjectService(clients=clients, settings=settings)


def member_service(clients: GitlabClientFactory = Depends(client_factory)) -> MemberService:
    return MemberService(clients=clients)


# --- Module Notes -----------------------------------------------------------
# Tests swap `client_factory` through `app.dependency_overrides` to inject fake clients.
