import asyncio

import httpx
import pytest

from app.core import config
from app.core.config import Settings
from app.core.http_client import HttpClientManager


@pytest.fixture
def settings():
    """Install default settings; tests may replace them with `install`."""
    def install(**overrides) -> Settings:
        config._settings = Settings(**overrides)
        return config._settings

    install()
    yield install
    config._settings = None


@pytest.fixture
def upstream(settings):
    """
    Route the shared HTTP client through an httpx.MockTransport.

    `upstream.serve(handler)` installs the request handler;
    `upstream.requests` records every outbound request.
    """
    class Upstream:
        def __init__(self):
            self.requests = []
            self._handler = lambda request: httpx.Response(404)

        def serve(self, handler):
            self._handler = handler

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self._handler(request)

    mock = Upstream()
    client = httpx.AsyncClient(transport=httpx.MockTransport(mock), follow_redirects=True)
    HttpClientManager.use_client(client)
    yield mock
    asyncio.run(HttpClientManager.close())
