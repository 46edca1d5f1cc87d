"""Shared test fixtures — app factory + in-process HTTP client.

Invariants:
    - Every test gets a freshly built app with explicit Settings
    - No .env file or environment variable leaks into test settings
"""

import pytest
from httpx import ASGITransport, AsyncClient

from luhn_server.config import Settings
from luhn_server.main import create_app


def make_settings(**overrides) -> Settings:
    values = {"log_format": "text", "log_level": "WARNING"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """HTTP client bound to the app without a network socket."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client():
    """Client for an app that sums non-digit characters unchecked."""
    app = create_app(make_settings(strict_digits=False))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
