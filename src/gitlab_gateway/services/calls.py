"""
gitlab_gateway.services.calls

Helpers shared by every service method.

Responsibilities:
- Wrap GitLab client exceptions into the operation's `GatewayError`.
- Reject absent results with the same error.
- Convert python-gitlab objects into plain JSON-ready dicts.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import requests
from gitlab.base import RESTObject
from gitlab.exceptions import GitlabError

from gitlab_gateway.errors import GatewayError
from gitlab_gateway.observability.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")


@contextmanager
def gitlab_call(code: str, **context: Any) -> Iterator[None]:
    """
    Run a block of GitLab client calls for the operation named by `code`.

    Any client-side failure (API error or transport error) surfaces as
    `GatewayError(code)` carrying the upstream message.
    """
    log.info("gitlab_call", code=code, **context)
    try:
        yield
    except GitlabError as e:
        log.warning(
            "gitlab_call_failed",
            code=code,
            response_code=e.response_code,
            error=str(e),
            **context,
        )
        raise GatewayError(code, str(e)) from e
    except requests.RequestException as e:
        log.warning("gitlab_call_failed", code=code, error=str(e), **context)
        raise GatewayError(code, str(e)) from e


def require(result: T | None, code: str) -> T:
    """Return `result`, or raise `GatewayError(code)` when the client returned None."""
    if result is None:
        raise GatewayError(code)
    return result


def as_dict(obj: RESTObject | dict[str, Any] | None, code: str) -> dict[str, Any]:
    """Attribute dict of a client object; None raises `GatewayError(code)`."""
    obj = require(obj, code)
    if isinstance(obj, dict):
        return obj
    return obj.asdict()


def as_dicts(objs: Iterable[RESTObject] | None, code: str) -> list[dict[str, Any]]:
    """Attribute dicts of a client listing; a None listing or item raises `GatewayError(code)`."""
    return [as_dict(o, code) for o in require(objs, code)]
