"""
gitlab_gateway.services.repository_service

Repository operations: branches, tags and the project README.

Responsibilities:
- Forward each call to the GitLab client acting as the requesting user.
- Return plain dicts/lists so routers can serialize them verbatim.
"""

from __future__ import annotations

from typing import Any

from gitlab_gateway.errors import GatewayError
from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.services.calls import as_dict, as_dicts, gitlab_call, require
from gitlab_gateway.settings import Settings

README_PATH = "README.md"
README_CONTENT = "# README"
README_COMMIT_MESSAGE = "ADD README"


class RepositoryService:
    def __init__(self, *, clients: GitlabClientFactory, settings: Settings) -> None:
        self._clients = clients
        self._settings = settings

    def _project(self, project_id: int, user_id: int | None):
        # lazy=True: no extra GET, the sub-resource call is the only round trip.
        return self._clients.for_user(user_id).projects.get(project_id, lazy=True)

    def create_branch(
        self, *, project_id: int, name: str, source: str, user_id: int | None
    ) -> dict[str, Any]:
        code = "error.branch.create"
        with gitlab_call(code, project_id=project_id, branch=name, source=source):
            branch = self._project(project_id, user_id).branches.create(
                {"branch": name, "ref": source}
            )
        return as_dict(branch, code)

    def list_tags(self, *, project_id: int, user_id: int | None) -> list[dict[str, Any]]:
        code = "error.tag.get"
        with gitlab_call(code, project_id=project_id):
            tags = self._project(project_id, user_id).tags.list(get_all=True)
            return as_dicts(tags, code)

    def list_tags_by_page(
        self, *, project_id: int, page: int, per_page: int, user_id: int | None
    ) -> list[dict[str, Any]]:
        code = "error.tag.getPage"
        with gitlab_call(code, project_id=project_id, page=page, per_page=per_page):
            tags = self._project(project_id, user_id).tags.list(page=page, per_page=per_page)
            return as_dicts(tags, code)

    def create_tag(
        self, *, project_id: int, name: str, ref: str, user_id: int | None
    ) -> dict[str, Any]:
        code = "error.tag.create"
        with gitlab_call(code, project_id=project_id, tag=name, ref=ref):
            tag = self._project(project_id, user_id).tags.create({"tag_name": name, "ref": ref})
        return as_dict(tag, code)

    def delete_branch(self, *, project_id: int, branch_name: str, user_id: int | None) -> None:
        with gitlab_call("error.branch.delete", project_id=project_id, branch=branch_name):
            self._project(project_id, user_id).branches.delete(branch_name)

    def query_branch_by_name(self, *, project_id: int, branch_name: str) -> dict[str, Any]:
        # Branch lookup is a read with no acting user: administrator client.
        code = "error.branch.query"
        with gitlab_call(code, project_id=project_id, branch=branch_name):
            branch = self._project(project_id, None).branches.get(branch_name)
        return as_dict(branch, code)

    def list_branches(self, *, project_id: int, user_id: int | None) -> list[dict[str, Any]]:
        code = "error.branch.list"
        with gitlab_call(code, project_id=project_id):
            branches = self._project(project_id, user_id).branches.list(get_all=True)
            return as_dicts(branches, code)

    def create_readme(self, *, project_id: int, user_id: int | None) -> bool:
        code = "error.readme.create"
        with gitlab_call(code, project_id=project_id):
            created = self._project(project_id, user_id).files.create(
                {
                    "file_path": README_PATH,
                    "branch": self._settings.source_branch,
                    "content": README_CONTENT,
                    "commit_message": README_COMMIT_MESSAGE,
                }
            )
        require(created, code)
        return True

    def get_readme(self, *, project_id: int) -> str:
        code = "error.readme.get"
        with gitlab_call(code, project_id=project_id):
            readme = self._project(project_id, None).files.get(
                file_path=README_PATH, ref=self._settings.source_branch
            )
            content = require(readme, code).decode()
        if not isinstance(content, bytes):
            return content
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise GatewayError(code, f"README is not valid UTF-8: {e}") from e
