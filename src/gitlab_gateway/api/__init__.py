"""
gitlab_gateway.api

API package for the GitLab Gateway service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and error rendering.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: parameter binding + delegation to services.
