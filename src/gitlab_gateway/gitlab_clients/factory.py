"""
gitlab_gateway.gitlab_clients.factory

Per-call GitLab client lookup.

Responsibilities:
- Resolve a GitLab user id into a client that acts as that user.
- Provide the administrator client used when no user id is given.

Impersonation uses GitLab's `Sudo` header on top of the configured
administrator token, so the gateway holds a single credential.
"""

from __future__ import annotations

import gitlab

from gitlab_gateway.observability.logging import get_logger
from gitlab_gateway.settings import Settings

log = get_logger(__name__)

SUDO_HEADER = "Sudo"


class GitlabClientFactory:
    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings

    def admin(self) -> gitlab.Gitlab:
        return gitlab.Gitlab(
            url=self._settings.gitlab_url,
            private_token=self._settings.gitlab_admin_token,
            ssl_verify=self._settings.gitlab_ssl_verify,
            timeout=self._settings.gitlab_timeout,
        )

    def for_user(self, user_id: int | None) -> gitlab.Gitlab:
        gl = self.admin()
        if user_id is not None:
            gl.headers[SUDO_HEADER] = str(user_id)
        log.debug("gitlab_client", impersonated=user_id)
        return gl


# --- Module Notes -----------------------------------------------------------
# A fresh client is built for every call; nothing is shared across requests, so
# concurrency is whatever the HTTP server and python-gitlab provide.
