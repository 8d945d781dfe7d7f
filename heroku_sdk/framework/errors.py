"""
heroku_sdk.framework.errors
────────────────────────────
Error taxonomy for Platform API calls. Every failed call raises a
HerokuApiFailure, and there are exactly two kinds:

- InvalidResponseError: the body of a successful response (or the
  transport itself) could not produce the declared result type.
- ApiError: the API answered with a non-success status. Carries the status
  and the parsed HerokuApiError envelope, and is specialised by status
  (NotFoundError, RateLimitError, ...).

Creating a HerokuApiFailure reports it to the backend named in the
environment. A client whose HerokuConfig names a different backend reports
its own failures there as well (see report_failure).

Select via:    HEROKU_ERROR_BACKEND=sentry|none
"""
from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from heroku_sdk.framework.config import _reset_config
from heroku_sdk.framework.http import HTTP


# ── Error envelope ───────────────────────────────────────────────────────────

class HerokuApiError(BaseModel):
    """
    Error body returned by the Platform API, e.g.::

        {"id": "not_found", "message": "Couldn't find that app.", "url": null}

    Every field defaults to the empty string, so ``HerokuApiError()`` is the
    empty envelope used when an error body cannot be parsed.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    message: str = ""
    url: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_empty(self) -> bool:
        return not (self.id or self.message or self.url)


# ── Base failure ─────────────────────────────────────────────────────────────

class HerokuApiFailure(Exception):
    """
    Base class for every failed Platform API call. Every failure has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context
    - status_code: HTTP status when a response was received, else None
    """

    status_code: int | None = None
    code: str = "heroku_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "The Heroku API call failed.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)
        _capture(self)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
                "status": self.status_code,
            }
        }


# ── Kind (a): transport / deserialization ─────────────────────────────────────

class InvalidResponseError(HerokuApiFailure):
    """A success response whose body does not match the declared type."""
    code = "invalid_response"

    def __init__(
        self,
        user_message: str = "The Heroku API returned an unexpected response body.",
        *,
        status_code: int | None = None,
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.status_code = status_code
        super().__init__(None, user_message, detail, **metadata)


class TransportError(InvalidResponseError):
    """The request never produced a response (connect error, timeout)."""
    code = "transport_error"


# ── Kind (b): API-level failures ─────────────────────────────────────────────

class ApiError(HerokuApiFailure):
    """Non-success HTTP status with the best-effort parsed error envelope."""
    code = "api_error"

    def __init__(
        self,
        status: int,
        error: HerokuApiError | None = None,
        **metadata: Any,
    ) -> None:
        self.status_code = status
        self.error = error if error is not None else HerokuApiError()
        message = self.error.message or f"Heroku API returned HTTP {status}."
        super().__init__(
            self.error.id or None,
            message,
            f"HTTP {status}: {self.error.id or 'unknown'}: {message}",
            **metadata,
        )

    @property
    def status(self) -> int:
        return self.status_code  # type: ignore[return-value]

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.error.url:
            d["error"]["url"] = self.error.url
        return d


class BadRequestError(ApiError):
    code = "bad_request"


class UnauthorizedError(ApiError):
    """Missing, invalid or expired API token."""
    code = "unauthorized"


class ForbiddenError(ApiError):
    code = "forbidden"


class NotFoundError(ApiError):
    code = "not_found"


class ConflictError(ApiError):
    code = "conflict"


class UnprocessableEntityError(ApiError):
    code = "invalid_params"


class RateLimitError(ApiError):
    """Request quota exhausted. ``remaining`` mirrors the RateLimit-Remaining header."""
    code = "rate_limit"

    def __init__(
        self,
        status: int,
        error: HerokuApiError | None = None,
        remaining: int | None = None,
        **metadata: Any,
    ) -> None:
        self.remaining = remaining
        super().__init__(status, error, **metadata)


class ServerError(ApiError):
    code = "server_error"


class ConfigurationError(HerokuApiFailure):
    """Client misconfiguration detected before any request is sent."""
    code = "configuration_error"


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    HTTP.BAD_REQUEST: BadRequestError,
    HTTP.UNAUTHORIZED: UnauthorizedError,
    HTTP.FORBIDDEN: ForbiddenError,
    HTTP.NOT_FOUND: NotFoundError,
    HTTP.CONFLICT: ConflictError,
    HTTP.UNPROCESSABLE_ENTITY: UnprocessableEntityError,
}


def api_error_for(
    status: int,
    error: HerokuApiError,
    headers: Mapping[str, str] | None = None,
) -> ApiError:
    """Build the ApiError subclass that matches *status*."""
    if status == HTTP.TOO_MANY_REQUESTS:
        remaining = (headers or {}).get("RateLimit-Remaining")
        return RateLimitError(
            status,
            error,
            remaining=int(remaining) if remaining and remaining.isdigit() else None,
        )
    if status >= HTTP.INTERNAL_SERVER_ERROR:
        return ServerError(status, error)
    return _STATUS_ERRORS.get(status, ApiError)(status, error)


# ── Error capture backend ─────────────────────────────────────────────────────

def _env_backend() -> str:
    return os.getenv("HEROKU_ERROR_BACKEND", "none").lower()


def _capture(error: HerokuApiFailure, backend: str | None = None) -> None:
    """Send error to *backend*, or to the environment backend. Called by HerokuApiFailure.__init__."""
    backend = (backend or _env_backend()).lower()
    if backend == "sentry":
        _capture_sentry(error)


def report_failure(error: HerokuApiFailure, backend: str) -> None:
    """Report *error* to *backend* unless creating it already did."""
    if backend.lower() != _env_backend():
        _capture(error, backend)


def _capture_sentry(error: HerokuApiFailure) -> None:
    try:
        import sentry_sdk
    except ImportError:
        return
    if error.status_code is None or error.status_code >= HTTP.INTERNAL_SERVER_ERROR:
        sentry_sdk.capture_exception(error)
    else:
        sentry_sdk.capture_message(
            str(error),
            level="warning",
            extras={"code": error.code, "status": error.status_code, **error.metadata},
        )


def configure_sentry(dsn: str, **kwargs: Any) -> None:
    """Initialize Sentry and route client failures to it. Call once at startup."""
    import sentry_sdk

    sentry_sdk.init(dsn=dsn, **kwargs)
    os.environ["HEROKU_ERROR_BACKEND"] = "sentry"
    _reset_config()


__all__ = [
    "HerokuApiError",
    "HerokuApiFailure",
    "InvalidResponseError",
    "TransportError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "ServerError",
    "ConfigurationError",
    "api_error_for",
    "configure_sentry",
    "report_failure",
]
