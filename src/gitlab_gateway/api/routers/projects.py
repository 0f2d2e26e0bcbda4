"""
gitlab_gateway.api.routers.projects

Project endpoints under `/v1/projects`.

Responsibilities:
- Project creation/deletion and default-branch update.
- CI/CD variables and protected branches.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Response
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_204_NO_CONTENT

from gitlab_gateway.api.deps import project_service
from gitlab_gateway.services.project_service import ProjectService

router = APIRouter(prefix="/v1/projects", tags=["projects"])


@router.post("")
async def create_project(
    group_id: int = Query(alias="groupId"),
    project_name: str = Query(alias="projectName"),
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.create_project, group_id=group_id, project_name=project_name, user_id=user_id
    )


@router.delete("/{project_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> Response:
    await run_in_threadpool(svc.delete_project, project_id=project_id, user_id=user_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.put("/{project_id}")
async def update_project(
    project_id: int,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> dict[str, Any]:
    return await run_in_threadpool(svc.update_project, project_id=project_id, user_id=user_id)


@router.post("/{project_id}/variables")
async def create_variable(
    project_id: int,
    key: str = Query(),
    value: str = Query(),
    protecteds: bool = Query(default=False),
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.create_variable,
        project_id=project_id,
        key=key,
        value=value,
        protected=protecteds,
        user_id=user_id,
    )


@router.post("/{project_id}/protected_branches")
async def create_protected_branch(
    project_id: int,
    name: str = Query(),
    merge_access_level: int = Query(alias="mergeAccessLevel"),
    push_access_level: int = Query(alias="pushAccessLevel"),
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.create_protected_branch,
        project_id=project_id,
        name=name,
        merge_access_level=merge_access_level,
        push_access_level=push_access_level,
        user_id=user_id,
    )


@router.get("/{project_id}/protected_branches")
async def list_protected_branches(
    project_id: int,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> list[dict[str, Any]]:
    return await run_in_threadpool(
        svc.list_protected_branches, project_id=project_id, user_id=user_id
    )


@router.get("/{project_id}/protected_branches/{name:path}")
async def get_protected_branch(
    project_id: int,
    name: str,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.get_protected_branch, project_id=project_id, name=name, user_id=user_id
    )


@router.delete("/{project_id}/protected_branches/{name:path}", status_code=HTTP_204_NO_CONTENT)
async def delete_protected_branch(
    project_id: int,
    name: str,
    user_id: int | None = Query(default=None, alias="userId"),
    svc: ProjectService = Depends(project_service),
) -> Response:
    await run_in_threadpool(
        svc.delete_protected_branch, project_id=project_id, name=name, user_id=user_id
    )
    return Response(status_code=HTTP_204_NO_CONTENT)
