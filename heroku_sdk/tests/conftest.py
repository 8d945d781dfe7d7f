"""
heroku_sdk test configuration.

No test touches the network: clients are built on httpx.MockTransport.
Override by setting environment variables before running pytest.
"""
from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

# ── Pin the environment ────────────────────────────────────────────────────
# These must be set before any heroku_sdk modules are imported.

os.environ.setdefault("HEROKU_API_URL", "https://api.heroku.com")
os.environ.setdefault("HEROKU_LOG_LEVEL", "WARNING")
os.environ.setdefault("HEROKU_LOG_FORMAT", "json")
os.environ["HEROKU_ERROR_BACKEND"] = "none"


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_config():
    """Each test sees configuration rebuilt from the current environment."""
    from heroku_sdk.framework.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def recorded() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(recorded):
    """
    Return a factory building an HttpApiClient whose transport answers with
    *handler*. Every request is appended to ``recorded``.
    """
    from heroku_sdk.framework.apiclient import HttpApiClient

    clients = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        token: str = "test-token",
        config=None,
    ) -> HttpApiClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return handler(request)

        client = HttpApiClient.create(token, config, transport=httpx.MockTransport(_record))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def addon_payload() -> dict:
    return {
        "id": "01234567-89ab-cdef-0123-456789abcdef",
        "name": "acme-inc-primary-database",
        "addon_service": {"id": "svc-1", "name": "heroku-postgresql"},
        "app": {"id": "app-1", "name": "example"},
        "config_vars": ["DATABASE_URL"],
        "plan": {"id": "plan-1", "name": "heroku-postgresql:dev"},
        "provider_id": "abcd1234",
        "state": "provisioned",
        "web_url": "https://postgres.heroku.com/databases/01234567",
        "created_at": "2012-01-01T12:00:00Z",
        "updated_at": "2012-01-01T12:00:00Z",
    }
