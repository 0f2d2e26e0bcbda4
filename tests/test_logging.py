from __future__ import annotations

import logging

from gitlab_gateway.observability.logging import (
    REDACTED,
    _redact_sensitive,
    configure_logging,
)


def test_sensitive_fields_are_redacted() -> None:
    event = {"event": "gitlab_call", "key": "DEPLOY_TOKEN", "value": "s3cr3t", "token": "abc"}

    out = _redact_sensitive(None, "info", event)

    assert out["value"] == REDACTED
    assert out["token"] == REDACTED
    assert out["key"] == "DEPLOY_TOKEN"


def test_http_client_debug_logging_is_suppressed() -> None:
    configure_logging(service_name="gitlab-gateway", level="DEBUG")

    assert logging.getLogger("urllib3").level == logging.INFO
    assert logging.getLogger("gitlab").level == logging.INFO
