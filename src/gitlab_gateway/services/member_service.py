"""
gitlab_gateway.services.member_service

Project membership operations, run with the administrator client.
"""

from __future__ import annotations

from typing import Any

from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.services.calls import as_dict, as_dicts, gitlab_call, require


class MemberService:
    def __init__(self, *, clients: GitlabClientFactory) -> None:
        self._clients = clients

    def _members(self, project_id: int):
        return self._clients.admin().projects.get(project_id, lazy=True).members

    def add_member(
        self,
        *,
        project_id: int,
        user_id: int,
        access_level: int,
        expires_at: str | None,
    ) -> dict[str, Any]:
        code = "error.member.create"
        data: dict[str, Any] = {"user_id": user_id, "access_level": access_level}
        if expires_at is not None:
            data["expires_at"] = expires_at
        with gitlab_call(code, project_id=project_id, member=user_id):
            member = self._members(project_id).create(data)
        return as_dict(member, code)

    def update_member(
        self,
        *,
        project_id: int,
        user_id: int,
        access_level: int,
        expires_at: str | None,
    ) -> dict[str, Any]:
        code = "error.member.update"
        with gitlab_call(code, project_id=project_id, member=user_id):
            member = require(self._members(project_id).get(user_id), code)
            # PUT replaces both fields; a null expiry clears the current one.
            member.access_level = access_level
            member.expires_at = expires_at
            member.save()
        return as_dict(member, code)

    def list_members(self, *, project_id: int) -> list[dict[str, Any]]:
        code = "error.member.list"
        with gitlab_call(code, project_id=project_id):
            return as_dicts(self._members(project_id).list(get_all=True), code)

    def delete_member(self, *, project_id: int, user_id: int) -> None:
        with gitlab_call("error.member.delete", project_id=project_id, member=user_id):
            self._members(project_id).delete(user_id)
