"""
tests.test_members_api

Contract tests for `/v1/projects/{projectId}/members`.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
from gitlab.exceptions import (
    GitlabCreateError,
    GitlabDeleteError,
    GitlabGetError,
    GitlabListError,
)

from tests.conftest import rest


@pytest.mark.asyncio
async def test_add_member_runs_as_admin(
    client: httpx.AsyncClient, clients: MagicMock, project: MagicMock
) -> None:
    project.members.create.return_value = rest(id=21, access_level=30)

    r = await client.post(
        "/v1/projects/5/members",
        json={"userId": 21, "accessLevel": 30, "expiresAt": "2027-01-31"},
    )

    assert r.status_code == 200
    assert r.json() == {"id": 21, "access_level": 30}
    clients.admin.assert_called_once_with()
    clients.for_user.assert_not_called()
    project.members.create.assert_called_once_with(
        {"user_id": 21, "access_level": 30, "expires_at": "2027-01-31"}
    )


@pytest.mark.asyncio
async def test_add_member_without_expiry(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.create.return_value = rest(id=21)

    await client.post("/v1/projects/5/members", json={"userId": 21, "accessLevel": 30})

    project.members.create.assert_called_once_with({"user_id": 21, "access_level": 30})


@pytest.mark.asyncio
async def test_add_member_validates_body(client: httpx.AsyncClient) -> None:
    r = await client.post("/v1/projects/5/members", json={"userId": 21})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_add_member_failure(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.create.side_effect = GitlabCreateError("Member already exists", 409)

    r = await client.post("/v1/projects/5/members", json={"userId": 21, "accessLevel": 30})

    assert r.json()["code"] == "error.member.create"


@pytest.mark.asyncio
async def test_update_member_saves_new_level(
    client: httpx.AsyncClient, project: MagicMock
) -> None:
    member = rest(id=21, access_level=40)
    project.members.get.return_value = member

    r = await client.put("/v1/projects/5/members", json={"userId": 21, "accessLevel": 40})

    assert r.status_code == 200
    project.members.get.assert_called_once_with(21)
    assert member.access_level == 40
    member.save.assert_called_once_with()


@pytest.mark.asyncio
async def test_update_member_not_found(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.get.side_effect = GitlabGetError("404 Not found", 404)

    r = await client.put("/v1/projects/5/members", json={"userId": 21, "accessLevel": 40})

    assert r.json()["code"] == "error.member.update"


@pytest.mark.asyncio
async def test_list_members(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.list.return_value = [rest(id=1), rest(id=2)]

    r = await client.get("/v1/projects/5/members")

    assert [m["id"] for m in r.json()] == [1, 2]
    project.members.list.assert_called_once_with(get_all=True)


@pytest.mark.asyncio
async def test_delete_member(client: httpx.AsyncClient, project: MagicMock) -> None:
    r = await client.delete("/v1/projects/5/members/21")

    assert r.status_code == 204
    project.members.delete.assert_called_once_with(21)


@pytest.mark.asyncio
async def test_update_member_null_expiry_clears_it(
    client: httpx.AsyncClient, project: MagicMock
) -> None:
    member = rest(id=21, access_level=30)
    member.expires_at = "2027-01-31"
    project.members.get.return_value = member

    r = await client.put(
        "/v1/projects/5/members", json={"userId": 21, "accessLevel": 30, "expiresAt": None}
    )

    assert r.status_code == 200
    assert member.expires_at is None
    member.save.assert_called_once_with()


@pytest.mark.asyncio
async def test_list_members_failure(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.list.side_effect = GitlabListError("403 Forbidden", 403)

    r = await client.get("/v1/projects/5/members")

    assert r.status_code == 500
    assert r.json()["code"] == "error.member.list"


@pytest.mark.asyncio
async def test_list_members_absent_result(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.list.return_value = None

    r = await client.get("/v1/projects/5/members")

    assert r.status_code == 500
    assert r.json()["code"] == "error.member.list"


@pytest.mark.asyncio
async def test_delete_member_failure(client: httpx.AsyncClient, project: MagicMock) -> None:
    project.members.delete.side_effect = GitlabDeleteError("404 Member Not Found", 404)

    r = await client.delete("/v1/projects/5/members/21")

    assert r.status_code == 500
    assert r.json()["code"] == "error.member.delete"
