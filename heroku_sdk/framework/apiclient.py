"""
heroku_sdk.framework.apiclient
───────────────────────────────
Blocking HTTP client for the Heroku Platform API. One call to request()
is one network round trip: build the request from the descriptor, attach
credentials and the fixed API headers, send, classify the response.

Backed by: httpx (sync client, connection pooling, timeouts).

Usage::

    with HttpApiClient.create("API_KEY") as client:
        app = client.request(AppDetails(app_id="my-app"))
"""
from __future__ import annotations

import time
from typing import Any

import httpx

from heroku_sdk.framework.auth import Credentials, CredentialsAuth, UserAuthToken
from heroku_sdk.framework.config import HerokuConfig, get_config
from heroku_sdk.framework.endpoint import HerokuEndpoint
from heroku_sdk.framework.errors import (
    ApiError,
    ConfigurationError,
    InvalidResponseError,
    TransportError,
    report_failure,
)
from heroku_sdk.framework.logging import get_logger
from heroku_sdk.framework.response import match_raw_response, match_response

log = get_logger(__name__)


class HttpApiClient:
    """
    Synchronous Platform API client.

    The credentials are fixed for the lifetime of the client and attached to
    every request. Pass *transport* to route requests somewhere other than
    the network (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        credentials: Credentials,
        config: HerokuConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or get_config()
        self._credentials = credentials
        self._http = httpx.Client(
            base_url=self._config.api_base_url,
            auth=CredentialsAuth(credentials),
            headers={
                "Accept": self._config.accept_header,
                "Content-Type": "application/json",
                "User-Agent": self._config.user_agent,
            },
            timeout=httpx.Timeout(self._config.timeout_seconds),
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def create(cls, token: str, config: HerokuConfig | None = None, **kwargs: Any) -> HttpApiClient:
        """Build a client authenticated with a bearer token."""
        return cls(UserAuthToken(token), config, **kwargs)

    @classmethod
    def from_env(cls, config: HerokuConfig | None = None, **kwargs: Any) -> HttpApiClient:
        """Build a client from HEROKU_API_KEY. Raises ConfigurationError if it is unset."""
        config = config or get_config()
        if config.api_key is None:
            raise ConfigurationError(
                "missing_api_key",
                "HEROKU_API_KEY is not set.",
            )
        return cls(UserAuthToken(config.api_key), config, **kwargs)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def config(self) -> HerokuConfig:
        return self._config

    # ── Request construction ───────────────────────────────────────────────

    def build_request(self, endpoint: HerokuEndpoint) -> httpx.Request:
        """Build the outgoing request for *endpoint*. Credentials are added on send."""
        return self._http.build_request(
            endpoint.method.value,
            endpoint.path(),
            params=endpoint.query(),
            json=endpoint.body(),
        )

    def _send(self, endpoint: HerokuEndpoint) -> httpx.Response:
        request = self.build_request(endpoint)
        log.debug("heroku.request", method=request.method, path=endpoint.path())
        started = time.monotonic()
        try:
            response = self._http.send(request)
        except httpx.DecodingError as exc:
            failure = InvalidResponseError(
                f"Response from {endpoint.path()} could not be decoded.",
                detail=str(exc),
            )
            self._log_invalid(endpoint, failure)
            raise failure from exc
        except httpx.RequestError as exc:
            log.warning(
                "heroku.transport_error",
                method=request.method,
                path=endpoint.path(),
                error=str(exc),
            )
            failure = TransportError(f"Request to {endpoint.path()} failed: {exc}")
            report_failure(failure, self._config.error_backend)
            raise failure from exc
        log.debug(
            "heroku.response",
            method=request.method,
            path=endpoint.path(),
            status=response.status_code,
            request_id=response.headers.get("Request-Id"),
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return response

    # ── Execution ──────────────────────────────────────────────────────────

    def request(self, endpoint: HerokuEndpoint) -> Any:
        """
        Send *endpoint* and return its parsed ``response_type``.
        Raises ApiError for non-success statuses and InvalidResponseError
        when a success body cannot be parsed.
        """
        response = self._send(endpoint)
        try:
            return match_response(response, endpoint.response_type)
        except ApiError as exc:
            self._log_failure(endpoint, exc)
            raise
        except InvalidResponseError as exc:
            self._log_invalid(endpoint, exc)
            raise

    def request_raw(self, endpoint: HerokuEndpoint) -> httpx.Response:
        """Send *endpoint* and return the unparsed response on success."""
        response = self._send(endpoint)
        try:
            return match_raw_response(response)
        except ApiError as exc:
            self._log_failure(endpoint, exc)
            raise

    def _log_failure(self, endpoint: HerokuEndpoint, exc: ApiError) -> None:
        log.warning(
            "heroku.api_error",
            path=endpoint.path(),
            status=exc.status_code,
            error_id=exc.error.id,
            message=exc.error.message,
        )
        report_failure(exc, self._config.error_backend)

    def _log_invalid(self, endpoint: HerokuEndpoint, exc: InvalidResponseError) -> None:
        log.warning(
            "heroku.invalid_response",
            path=endpoint.path(),
            status=exc.status_code,
            detail=exc.detail,
        )
        report_failure(exc, self._config.error_backend)

    # ── Lifecycle ──────────────────────────────────────────────────────────

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> HttpApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HttpApiClient(base_url={self._config.api_base_url!r})"


__all__ = ["HttpApiClient"]
