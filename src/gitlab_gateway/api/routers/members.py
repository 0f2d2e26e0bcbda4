from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict, Field
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_204_NO_CONTENT

from gitlab_gateway.api.deps import member_service
from gitlab_gateway.services.member_service import MemberService

router = APIRouter(prefix="/v1/projects/{project_id}/members", tags=["members"])


class MemberRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    access_level: int = Field(alias="accessLevel")
    expires_at: str | None = Field(default=None, alias="expiresAt")


@router.post("")
async def add_member(
    project_id: int,
    body: MemberRequest,
    svc: MemberService = Depends(member_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.add_member,
        project_id=project_id,
        user_id=body.user_id,
        access_level=body.access_level,
        expires_at=body.expires_at,
    )


@router.put("")
async def update_member(
    project_id: int,
    body: MemberRequest,
    svc: MemberService = Depends(member_service),
) -> dict[str, Any]:
    return await run_in_threadpool(
        svc.update_member,
        project_id=project_id,
        user_id=body.user_id,
        access_level=body.access_level,
        expires_at=body.expires_at,
    )


@router.get("")
async def list_members(
    project_id: int,
    svc: MemberService = Depends(member_service),
) -> list[dict[str, Any]]:
    return await run_in_threadpool(svc.list_members, project_id=project_id)


@router.delete("/{member_user_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_member(
    project_id: int,
    member_user_id: int,
    svc: MemberService = Depends(member_service),
) -> Response:
    await run_in_threadpool(svc.delete_member, project_id=project_id, user_id=member_user_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
