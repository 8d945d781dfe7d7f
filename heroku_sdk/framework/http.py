"""
heroku_sdk.framework.http
──────────────────────────
HTTP primitives shared by descriptors and the client: the request verbs the
Platform API uses and the status codes the error classifier cares about.
"""
from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """HTTP verbs used by Platform API endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# ── Status code constants ──────────────────────────────────────────────────

class HTTP:
    """HTTP status codes returned by the Platform API."""

    # 2xx
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    PARTIAL_CONTENT = 206

    # 4xx
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    TOO_MANY_REQUESTS = 429

    # 5xx
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


__all__ = ["Method", "HTTP", "is_success"]
