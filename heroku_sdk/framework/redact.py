"""
heroku_sdk.framework.redact
────────────────────────────
Keeps credentials out of log output. The structlog processor below runs on
every event before it is rendered: values under credential-like keys are
replaced outright, and bearer tokens or ``api_key=...`` fragments inside
free-text values (error messages, transport errors) are scrubbed.
"""
from __future__ import annotations

import re
from typing import Any

REDACTED = "[REDACTED]"

_SENSITIVE_KEYS: frozenset[str] = frozenset({
    "authorization", "token", "api_key", "heroku_api_key", "secret", "password",
})

_BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/]+=*", re.I)
_ASSIGNMENT = re.compile(r"((?:api[_-]?key|token|secret|password)\s*[=:]\s*)[^\s&\"',]+", re.I)


def scrub_string(text: str) -> str:
    """Replace inline bearer tokens and key=value secrets in *text*."""
    text = _BEARER.sub(rf"\g<1>{REDACTED}", text)
    return _ASSIGNMENT.sub(rf"\g<1>{REDACTED}", text)


def _redact_value(value: Any) -> Any:
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, list):
        return [_redact_value(item) for item in value]
    if isinstance(value, str):
        return scrub_string(value)
    return value


def redact_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Return a redacted copy of *data*, recursing into dicts and lists."""
    return {
        key: REDACTED if isinstance(key, str) and key.lower() in _SENSITIVE_KEYS
        else _redact_value(value)
        for key, value in data.items()
    }


def structlog_redact_processor(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    return redact_dict(event_dict)


__all__ = [
    "REDACTED",
    "redact_dict",
    "scrub_string",
    "structlog_redact_processor",
]
