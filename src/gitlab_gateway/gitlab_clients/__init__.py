"""
gitlab_gateway.gitlab_clients

GitLab client boundary.

Responsibilities:
- Build authenticated `python-gitlab` clients, impersonating a user per call.
"""

from gitlab_gateway.gitlab_clients.factory import GitlabClientFactory

__all__ = ["GitlabClientFactory"]
