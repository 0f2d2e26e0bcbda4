"""
gitlab_gateway.services

Service-layer package.

Responsibilities:
- One method per gateway operation, each delegating to the GitLab client.
- Translate client failures and absent results into named `GatewayError`s.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are synchronous (python-gitlab is blocking); routers run them in a threadpool.
