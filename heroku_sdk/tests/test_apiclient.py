"""Tests for HttpApiClient: request construction, dispatch and failure surfacing."""
from __future__ import annotations

import io
import json
import logging
from typing import Any

import httpx
import pytest

from heroku_sdk.endpoints.addons import Addon, AddonCreate, AppAddonList
from heroku_sdk.endpoints.apps import App, AppDetails, AppList
from heroku_sdk.endpoints.builds import BuildDeleteCache
from heroku_sdk.framework.apiclient import HttpApiClient
from heroku_sdk.framework.config import HerokuConfig, _reset_config
from heroku_sdk.framework.endpoint import Empty, HerokuEndpoint
from heroku_sdk.framework.errors import (
    ConfigurationError,
    HerokuApiError,
    InvalidResponseError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from heroku_sdk.framework.http import Method

APP = {"id": "app-1", "name": "example", "region": {"id": "r-1", "name": "us"}}


def _json(status: int, payload: Any, **headers: str):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload, headers=headers)
    return handler


class TestRequestConstruction:
    def test_sends_auth_and_api_headers(self, make_client, recorded):
        client = make_client(_json(200, APP), token="abc123")
        client.request(AppDetails(app_id="example"))

        (request,) = recorded
        assert request.method == "GET"
        assert str(request.url) == "https://api.heroku.com/apps/example"
        assert request.headers.get_list("Authorization") == ["Bearer abc123"]
        assert request.headers["Accept"] == "application/vnd.heroku+json; version=3"
        assert request.headers["User-Agent"].startswith("heroku-sdk/")

    def test_post_sends_json_body(self, make_client, recorded, addon_payload):
        client = make_client(_json(201, addon_payload))
        client.request(AddonCreate(app_id="APP_ID", plan="heroku-postgresql:dev"))

        (request,) = recorded
        assert request.method == "POST"
        assert request.url.path == "/apps/APP_ID/addons"
        assert json.loads(request.content) == {"plan": "heroku-postgresql:dev"}
        assert request.headers["Content-Type"] == "application/json"

    def test_get_sends_no_body(self, make_client, recorded):
        client = make_client(_json(200, [APP]))
        client.request(AppList())
        assert recorded[0].content == b""

    def test_query_is_attached(self, make_client, recorded):
        class AppSearch(HerokuEndpoint):
            method = Method.GET
            path_template = "apps"
            response_type = list[App]

            def query(self) -> dict[str, Any] | None:
                return {"owner": "me"}

        client = make_client(_json(200, []))
        assert client.request(AppSearch()) == []
        assert recorded[0].url.params["owner"] == "me"

    def test_custom_base_url(self, make_client, recorded):
        config = HerokuConfig(HEROKU_API_URL="https://api.example.test/")
        client = make_client(_json(200, APP), config=config)
        client.request(AppDetails(app_id="example"))
        assert str(recorded[0].url) == "https://api.example.test/apps/example"

    def test_build_request_leaves_out_credentials(self, make_client):
        client = make_client(_json(200, APP))
        request = client.build_request(AppDetails(app_id="example"))
        assert "Authorization" not in request.headers

    def test_one_credential_set_per_request(self, make_client, recorded):
        client = make_client(_json(200, APP), token="abc123")
        client.request(AppDetails(app_id="a"))
        client.request(AppDetails(app_id="b"))
        assert [r.headers.get_list("Authorization") for r in recorded] == [
            ["Bearer abc123"],
            ["Bearer abc123"],
        ]


class TestDispatch:
    def test_returns_parsed_model(self, make_client):
        client = make_client(_json(200, APP))
        app = client.request(AppDetails(app_id="example"))
        assert isinstance(app, App)
        assert app.name == "example"
        assert app.region.name == "us"

    def test_returns_parsed_list(self, make_client, addon_payload):
        client = make_client(_json(200, [addon_payload, addon_payload]))
        addons = client.request(AppAddonList(app_id="example"))
        assert len(addons) == 2
        assert all(isinstance(a, Addon) for a in addons)

    def test_empty_response(self, make_client):
        client = make_client(lambda request: httpx.Response(200, content=b""))
        assert client.request(BuildDeleteCache(app_id="example")) == Empty()

    def test_not_found(self, make_client):
        client = make_client(
            _json(404, {"id": "not_found", "message": "Couldn't find that app.", "url": None})
        )
        with pytest.raises(NotFoundError) as exc_info:
            client.request(AppDetails(app_id="missing"))
        assert exc_info.value.status == 404
        assert exc_info.value.error == HerokuApiError(
            id="not_found", message="Couldn't find that app."
        )

    def test_unauthorized_with_unparseable_body(self, make_client):
        client = make_client(lambda request: httpx.Response(401, content=b"Unauthorized"))
        with pytest.raises(UnauthorizedError) as exc_info:
            client.request(AppDetails(app_id="example"))
        assert exc_info.value.error == HerokuApiError()

    def test_invalid_success_body(self, make_client):
        client = make_client(lambda request: httpx.Response(200, content=b"<html></html>"))
        with pytest.raises(InvalidResponseError):
            client.request(AppDetails(app_id="example"))

    def test_transport_failure(self, make_client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(TransportError) as exc_info:
            client.request(AppDetails(app_id="example"))
        assert isinstance(exc_info.value, InvalidResponseError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_undecodable_body_is_invalid_response(self, make_client):
        client = make_client(
            lambda request: httpx.Response(
                200, content=b"not gzip", headers={"Content-Encoding": "gzip"}
            )
        )
        with pytest.raises(InvalidResponseError) as exc_info:
            client.request(AppDetails(app_id="example"))
        assert not isinstance(exc_info.value, TransportError)
        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)

    def test_follows_redirects_with_credentials(self, make_client, recorded):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/apps/old-name":
                return httpx.Response(
                    301, headers={"Location": "https://api.heroku.com/apps/new-name"}
                )
            return httpx.Response(200, json=APP)

        client = make_client(handler)
        app = client.request(AppDetails(app_id="old-name"))
        assert app.name == "example"
        assert [r.url.path for r in recorded] == ["/apps/old-name", "/apps/new-name"]
        assert recorded[1].headers["Authorization"] == "Bearer test-token"

    def test_redirect_loop_is_transport_error(self, make_client):
        client = make_client(
            lambda request: httpx.Response(302, headers={"Location": str(request.url)})
        )
        with pytest.raises(TransportError) as exc_info:
            client.request(AppDetails(app_id="example"))
        assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)

    def test_invalid_environment_does_not_mask_api_failure(self, make_client, monkeypatch):
        client = make_client(
            _json(404, {"id": "not_found", "message": "gone"}), config=HerokuConfig()
        )
        monkeypatch.setenv("HEROKU_TIMEOUT", "0")
        _reset_config()
        with pytest.raises(NotFoundError):
            client.request(AppDetails(app_id="missing"))

    def test_request_raw_returns_response(self, make_client):
        client = make_client(_json(200, APP, **{"Request-Id": "req-1"}))
        response = client.request_raw(AppDetails(app_id="example"))
        assert isinstance(response, httpx.Response)
        assert response.headers["Request-Id"] == "req-1"
        assert response.json()["name"] == "example"

    def test_request_raw_classifies_failure(self, make_client):
        client = make_client(_json(404, {"id": "not_found", "message": "gone"}))
        with pytest.raises(NotFoundError):
            client.request_raw(AppDetails(app_id="example"))


class TestConstruction:
    def test_from_env_requires_api_key(self):
        config = HerokuConfig(HEROKU_API_KEY=None)
        with pytest.raises(ConfigurationError):
            HttpApiClient.from_env(config)

    def test_from_env_uses_api_key(self, recorded):
        config = HerokuConfig(HEROKU_API_KEY="from-env")

        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return httpx.Response(200, json=APP)

        with HttpApiClient.from_env(config, transport=httpx.MockTransport(handler)) as client:
            client.request(AppDetails(app_id="example"))
        assert recorded[0].headers["Authorization"] == "Bearer from-env"

    def test_repr_hides_token(self):
        client = HttpApiClient.create("abc123")
        try:
            assert "abc123" not in repr(client)
            assert "abc123" not in repr(client.credentials)
        finally:
            client.close()


# ── logging and error reporting ────────────────────────────────────────────

@pytest.fixture
def log_output():
    """Rendered output of the SDK log handler, captured for one test."""
    sdk_logger = logging.getLogger("heroku_sdk")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(sdk_logger.handlers[0].formatter)
    sdk_logger.addHandler(handler)
    yield stream
    sdk_logger.removeHandler(handler)


class TestLogging:
    def test_api_failure_log_hides_token(self, make_client, log_output):
        secret = "s3cr3t-token-value"
        client = make_client(
            _json(401, {"id": "unauthorized", "message": f"Invalid credentials: Bearer {secret}"}),
            token=secret,
        )
        with pytest.raises(UnauthorizedError):
            client.request(AppDetails(app_id="example"))

        output = log_output.getvalue()
        assert "heroku.api_error" in output
        assert secret not in output
        assert "[REDACTED]" in output

    def test_transport_failure_log_hides_token(self, make_client, log_output):
        secret = "s3cr3t-token-value"

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(f"refused with api_key={secret}", request=request)

        client = make_client(handler, token=secret)
        with pytest.raises(TransportError):
            client.request(AppDetails(app_id="example"))

        output = log_output.getvalue()
        assert "heroku.transport_error" in output
        assert secret not in output

    def test_sdk_logger_does_not_propagate(self):
        assert logging.getLogger("heroku_sdk").propagate is False


class TestErrorReporting:
    @pytest.fixture
    def sentry_calls(self, monkeypatch):
        sentry_sdk = pytest.importorskip("sentry_sdk")
        calls: list[tuple[str, Any, dict]] = []
        monkeypatch.setattr(
            sentry_sdk, "capture_exception",
            lambda error, **kw: calls.append(("exception", error, kw)),
        )
        monkeypatch.setattr(
            sentry_sdk, "capture_message",
            lambda message, **kw: calls.append(("message", message, kw)),
        )
        return calls

    def test_server_errors_are_captured_as_exceptions(self, make_client, sentry_calls, monkeypatch):
        monkeypatch.setenv("HEROKU_ERROR_BACKEND", "sentry")
        client = make_client(_json(503, {"id": "unavailable", "message": "down"}))
        with pytest.raises(ServerError) as exc_info:
            client.request(AppDetails(app_id="example"))
        assert sentry_calls == [("exception", exc_info.value, {})]

    def test_client_errors_are_captured_as_warnings(self, make_client, sentry_calls, monkeypatch):
        monkeypatch.setenv("HEROKU_ERROR_BACKEND", "sentry")
        client = make_client(_json(404, {"id": "not_found", "message": "gone"}))
        with pytest.raises(NotFoundError):
            client.request(AppDetails(app_id="example"))
        ((kind, message, kwargs),) = sentry_calls
        assert kind == "message"
        assert "gone" in message
        assert kwargs["level"] == "warning"
        assert kwargs["extras"]["status"] == 404

    def test_client_config_backend_is_honored(self, make_client, sentry_calls):
        config = HerokuConfig(HEROKU_ERROR_BACKEND="sentry")
        client = make_client(_json(500, {"id": "boom", "message": "boom"}), config=config)
        with pytest.raises(ServerError):
            client.request(AppDetails(app_id="example"))
        assert [kind for kind, _, _ in sentry_calls] == ["exception"]

    def test_nothing_captured_without_backend(self, make_client, sentry_calls):
        client = make_client(_json(500, {"id": "boom", "message": "boom"}))
        with pytest.raises(ServerError):
            client.request(AppDetails(app_id="example"))
        assert sentry_calls == []
