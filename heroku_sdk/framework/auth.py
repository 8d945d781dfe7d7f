"""
heroku_sdk.framework.auth
──────────────────────────
Credentials attached to every Platform API request.

Credentials are immutable and shared by reference across all requests made
by a client. Each credential kind knows the headers it contributes; the
client applies them through CredentialsAuth, an httpx auth flow, so the
credential itself is never mutated.

Supported kinds: UserAuthToken (bearer token)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generator, Protocol, runtime_checkable

import httpx
from pydantic import SecretStr


# ── Credential protocol ───────────────────────────────────────────────────────

@runtime_checkable
class Credentials(Protocol):
    """Implement this protocol to add a new credential kind."""

    def headers(self) -> list[tuple[str, str]]:
        """Return the (name, value) header pairs for one request."""
        ...


# ── Bearer token ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserAuthToken:
    """
    API token or OAuth access token, sent as ``Authorization: Bearer <token>``.
    The token is wrapped in SecretStr so it never shows up in repr or logs.
    """
    token: SecretStr

    def __init__(self, token: str | SecretStr) -> None:
        if not isinstance(token, SecretStr):
            token = SecretStr(token)
        object.__setattr__(self, "token", token)

    def headers(self) -> list[tuple[str, str]]:
        return [("Authorization", f"Bearer {self.token.get_secret_value()}")]


# ── Attachment ────────────────────────────────────────────────────────────────

def attach_auth(request: httpx.Request, credentials: Credentials) -> httpx.Request:
    """Set every header produced by *credentials* on *request* and return it."""
    for name, value in credentials.headers():
        request.headers[name] = value
    return request


class CredentialsAuth(httpx.Auth):
    """
    httpx auth flow that attaches one credential set to each outgoing request.

    Usage::

        auth = CredentialsAuth(UserAuthToken("token"))
        client = httpx.Client(auth=auth)
    """

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield attach_auth(request, self.credentials)


__all__ = ["Credentials", "UserAuthToken", "attach_auth", "CredentialsAuth"]
