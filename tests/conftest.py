"""Shared fixtures: credential env vars and a request-recording httpx transport."""

import json
from typing import Any, Callable, List

import httpx
import pytest

from apitoolbox.constants import CREDENTIAL_ENV_VARS
from apitoolbox.tools.registry import ToolRegistry


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def mock_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingTransport]:
    """Factory: ``transport = mock_transport(lambda request: httpx.Response(200, json={}))``."""
    return RecordingTransport


@pytest.fixture
def json_transport(mock_transport):
    """Factory for a transport that always answers with the same JSON body."""

    def _make(payload: Any, status_code: int = 200) -> RecordingTransport:
        return mock_transport(lambda request: httpx.Response(status_code, json=payload))

    return _make


@pytest.fixture
def api_keys(monkeypatch):
    """Set a fake credential for every provider."""
    values = {env_var: f"test-{name}-key" for name, env_var in CREDENTIAL_ENV_VARS.items()}
    for env_var, value in values.items():
        monkeypatch.setenv(env_var, value)
    return values


@pytest.fixture
def no_api_keys(monkeypatch):
    """Unset every provider credential."""
    for env_var in CREDENTIAL_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_registry():
    ToolRegistry.reset()
    yield
    ToolRegistry.reset()
