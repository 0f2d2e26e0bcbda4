"""
gitlab_gateway.services.project_service

Project-level operations.

Responsibilities:
- Create projects (with the conventional default branch) and delete/update them.
- Create CI/CD variables.
- Manage protected branches.
"""

from __future__ import annotations

from typing import Any

from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory
from gitlab_gateway.services.calls import as_dict, as_dicts, gitlab_call, require
from gitlab_gateway.settings import Settings


class ProjectService:
    def __init__(self, *, clients: GitlabClientFactory, settings: Settings) -> None:
        self._clients = clients
        self._settings = settings

    def _project(self, project_id: int, user_id: int | None):
        return self._clients.for_user(user_id).projects.get(project_id, lazy=True)

    def create_project(
        self, *, group_id: int, project_name: str, user_id: int | None
    ) -> dict[str, Any]:
        """
        Create a project in a group, cut the default branch from the source
        branch and make it the project's default.
        """
        code = "error.project.create"
        default_branch = self._settings.default_branch
        with gitlab_call(code, group_id=group_id, project_name=project_name):
            gl = self._clients.for_user(user_id)
            project = require(
                gl.projects.create({"name": project_name, "namespace_id": group_id}), code
            )
            project.branches.create({"branch": default_branch, "ref": self._settings.source_branch})
            project.default_branch = default_branch
            project.save()
        return as_dict(project, code)

    def delete_project(self, *, project_id: int, user_id: int | None) -> None:
        with gitlab_call("error.project.delete", project_id=project_id):
            self._clients.for_user(user_id).projects.delete(project_id)

    def update_project(self, *, project_id: int, user_id: int | None) -> dict[str, Any]:
        code = "error.project.update"
        with gitlab_call(code, project_id=project_id):
            # Existence is checked with the administrator client; the change is made as the user.
            require(self._clients.admin().projects.get(project_id), code)
            updated = self._clients.for_user(user_id).projects.update(
                project_id, {"default_branch": self._settings.default_branch}
            )
        return as_dict(updated, code)

    def create_variable(
        self,
        *,
        project_id: int,
        key: str,
        value: str,
        protected: bool,
        user_id: int | None,
    ) -> dict[str, Any]:
        code = "error.variable.create"
        with gitlab_call(code, project_id=project_id, key=key, protected=protected):
            variable = self._project(project_id, user_id).variables.create(
                {"key": key, "value": value, "protected": protected}
            )
        return as_dict(variable, code)

    def create_protected_branch(
        self,
        *,
        project_id: int,
        name: str,
        merge_access_level: int,
        push_access_level: int,
        user_id: int | None,
    ) -> dict[str, Any]:
        code = "error.branch.protect"
        with gitlab_call(code, project_id=project_id, branch=name):
            protected = self._project(project_id, user_id).protectedbranches.create(
                {
                    "name": name,
                    "merge_access_level": merge_access_level,
                    "push_access_level": push_access_level,
                }
            )
        return as_dict(protected, code)

    def get_protected_branch(
        self, *, project_id: int, name: str, user_id: int | None
    ) -> dict[str, Any]:
        code = "error.protected.branch.get"
        with gitlab_call(code, project_id=project_id, branch=name):
            protected = self._project(project_id, user_id).protectedbranches.get(name)
        return as_dict(protected, code)

    def list_protected_branches(
        self, *, project_id: int, user_id: int | None
    ) -> list[dict[str, Any]]:
        code = "error.protected.branch.list"
        with gitlab_call(code, project_id=project_id):
            protected = self._project(project_id, user_id).protectedbranches.list(get_all=True)
            return as_dicts(protected, code)

    def delete_protected_branch(self, *, project_id: int, name: str, user_id: int | None) -> None:
        with gitlab_call("error.protected.branch.delete", project_id=project_id, branch=name):
            self._project(project_id, user_id).protectedbranches.delete(name)


# --- Module Notes -----------------------------------------------------------
# Project creation is the only multi-call operation; a failure at any step
# reports `error.project.create` and leaves whatever GitLab already created.
