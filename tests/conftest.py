"""
Shared test fixtures.

The API tests talk to the FastAPI app in-process:
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
- Environment-driven settings → an explicit Settings object injected
  through dependency_overrides, so a stray env var can't change results
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.dependencies import get_settings
from api.main import create_app
from config.settings import Settings


@pytest.fixture
def test_settings():
    return Settings(MAX_WAIT_TIME=30, READY_POOL="indexed")


@pytest_asyncio.fixture
async def client(test_settings):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
