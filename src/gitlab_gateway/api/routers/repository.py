"""
gitlab_gateway.api.routers.repository

Repository endpoints under `/v1/projects/{projectId}/repository`.

Responsibilities:
- Bind path/query parameters (camelCase query names: `userId`, `perPage`, `branchName`).
- Delegate each call to `RepositoryService` in a worker thread.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_204_NO_CONTENT

from gitlab_gateway.api.deps import repository_service
from gitlab_gateway.services.repository_service import RepositoryService

router = APIRouter(prefix="/v1/projects/{project_id}/repository", tags=["repository"])


@router.post("/branches")
async def create_branch(
    project_id: int,
    name: str = Query(),
    source: str = Query(),
    user_id: int = Query(alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.create_branch, project_id=project_id, name=name, source=source, user_id=user_id
    )


@router.get("/tags")
async def list_tags(
    project_id: int,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> list[dict[str, Any]]:
    return await run_in_threadpool(svc.list_tags, project_id=project_id, user_id=user_id)


@router.get("/tags/page")
async def list_tags_by_page(
    project_id: int,
    page: int = Query(),
    per_page: int = Query(alias="perPage"),
    user_id: int | None = Query(default=None, alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> list[dict[str, Any]]:
    # Pagination is forwarded verbatim; GitLab owns its bounds.
    return await run_in_threadpool(
        svc.list_tags_by_page,
        project_id=project_id,
        page=page,
        per_page=per_page,
        user_id=user_id,
    )


@router.post("/tags")
async def create_tag(
    project_id: int,
    name: str = Query(),
    ref: str = Query(),
    user_id: int | None = Query(default=None, alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.create_tag, project_id=project_id, name=name, ref=ref, user_id=user_id
    )


@router.delete("/branches", status_code=HTTP_204_NO_CONTENT)
async def delete_branch(
    project_id: int,
    branch_name: str = Query(alias="branchName"),
    user_id: int | None = Query(default=None, alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> Response:
    await run_in_threadpool(
        svc.delete_branch, project_id=project_id, branch_name=branch_name, user_id=user_id
    )
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.get("/branches")
async def list_branches(
    project_id: int,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> list[dict[str, Any]]:
    return await run_in_threadpool(svc.list_branches, project_id=project_id, user_id=user_id)


@router.get("/branches/{branch_name:path}")
async def query_branch_by_name(
    project_id: int,
    branch_name: str,
    svc: RepositoryService = Depends(repository_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.query_branch_by_name, project_id=project_id, branch_name=branch_name
    )


@router.post("/file")
async def create_readme(
    project_id: int,
    user_id: int = Query(alias="userId"),
    svc: RepositoryService = Depends(repository_service),
) -> bool:
    return await run_in_threadpool(svc.create_readme, project_id=project_id, user_id=user_id)


@router.get("/file/master/readme.md", response_class=PlainTextResponse)
async def get_readme(
    project_id: int,
    svc: RepositoryService = Depends(repository_service),
) -> str:
    return await run_in_threadpool(svc.get_readme, project_id=project_id)


# --- Module Notes -----------------------------------------------------------
# `GatewayError`s raised by the service propagate to `api.errors` unchanged.
