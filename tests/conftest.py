"""Pytest configuration and shared fixtures."""

import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from finproxy.config import Settings, get_settings
from finproxy.dependencies import get_upstream_client
from finproxy.main import app
from finproxy.tools.http_client import UpstreamClient


class FakeUpstream:
    """Canned provider replies for httpx.MockTransport.

    Records every outgoing request. ``reply`` decides the response and may be
    swapped per test.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.reply: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(request)

    def respond_json(self, payload, status_code: int = 200) -> None:
        body = json.dumps(payload).encode()
        self.reply = lambda request: httpx.Response(
            status_code, content=body, headers={"Content-Type": "application/json"}
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]

    def last_json_body(self):
        return json.loads(self.last_request.content)


def make_settings(**overrides) -> Settings:
    values = {"sec_api_key": "sec-test-key", "finnhub_api_key": "fh-test-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def upstream_client(fake_upstream) -> UpstreamClient:
    """UpstreamClient backed by the fake provider instead of the network."""
    return UpstreamClient(httpx.AsyncClient(transport=httpx.MockTransport(fake_upstream)))


@pytest.fixture
def use_settings():
    """Install settings for the app under test; returns the installer."""

    def _use(**overrides) -> Settings:
        settings = make_settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return _use


@pytest.fixture
def settings(use_settings) -> Settings:
    """Both provider keys configured."""
    return use_settings()


@pytest.fixture
def client(settings, upstream_client):
    """Test client with both provider keys configured and no network."""
    app.dependency_overrides[get_upstream_client] = lambda: upstream_client
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
