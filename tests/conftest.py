"""Shared fixtures: a fake clock, a scripted Unsplash upstream, and an app wired to both."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.cache import CacheStore
from services.unsplash import UnsplashClient


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUnsplash:
    """Scripted upstream. Each path maps to a queue of responses; the last one repeats."""

    def __init__(self):
        self.routes: dict[str, list] = {}
        self.calls: list[httpx.Request] = []

    def reply(self, path: str, *responses) -> None:
        self.routes[path] = list(responses)

    def calls_to(self, path: str) -> int:
        return sum(1 for r in self.calls if r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        queue = self.routes.get(request.url.path)
        if not queue:
            return httpx.Response(404, json={"errors": ["Couldn't find Collection"]})
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item
        return httpx.Response(200, json=item)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return FakeUnsplash()


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY_COLLECTION", "test-key")
    return Settings()


@pytest.fixture
def cache(clock):
    return CacheStore(ttl_seconds=600, clock=clock)


@pytest.fixture
def unsplash_client(upstream):
    return UnsplashClient(
        access_key="test-key",
        base_url="https://api.unsplash.test",
        transport=httpx.MockTransport(upstream.handler),
    )


@pytest.fixture
def app(settings, cache, unsplash_client):
    return create_app(settings, cache=cache, client=unsplash_client)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
