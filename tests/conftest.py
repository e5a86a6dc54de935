"""
Shared pytest fixtures for Life Interviewer tests.

The upstream realtime API is replaced by an ``httpx.MockTransport`` whose
handler each test can swap out; every outbound request is recorded.
"""

import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from life_interviewer.api import create_app
from life_interviewer.api.routers.realtime import get_realtime_service
from life_interviewer.config import Settings
from life_interviewer.services.realtime_service import RealtimeSessionService

UPSTREAM_SESSION = {
    "id": "sess_123",
    "object": "realtime.session",
    "model": "gpt-4o-realtime-preview",
    "client_secret": {"value": "ek_abc", "expires_at": 1234567890},
}


class MockUpstream:
    """Records outbound requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=UPSTREAM_SESSION)
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="test-key", _env_file=None)


@pytest.fixture
def upstream() -> MockUpstream:
    return MockUpstream()


@pytest.fixture
def client(settings, upstream):
    app = create_app(settings)
    app.dependency_overrides[get_realtime_service] = lambda: RealtimeSessionService(
        api_key=settings.openai_api_key,
        url=settings.openai_realtime_url,
        transport=httpx.MockTransport(upstream),
    )
    with TestClient(app) as test_client:
        yield test_client
