# tests/conftest.py
import pytest

from lighthtml.loading import strategies


class FakeResponse:
    def __init__(self, status):
        self.status = status

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; answers with a fixed status per HTTP method."""

    def __init__(self, statuses=None, error=None):
        self.statuses = statuses or {}
        self.error = error
        self.calls = []
        self.init_kwargs = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.statuses.get(method, 200))


@pytest.fixture
def fake_http(monkeypatch):
    """
    Vervangt aiohttp.ClientSession in de strategie-module door een FakeSession.
    Gebruik: session = fake_http(statuses={"HEAD": 404}) of fake_http(error=...).
    """
    def install(statuses=None, error=None):
        session = FakeSession(statuses=statuses, error=error)

        def factory(**kwargs):
            session.init_kwargs = kwargs
            return session

        monkeypatch.setattr(strategies.aiohttp, "ClientSession", factory)
        return session

    return install
