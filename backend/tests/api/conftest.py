"""API test fixtures — FastAPI app served in-process over httpx.

Invariants:
    - Every test gets a fresh app from create_app()
    - Requests go through ASGITransport (no sockets, no lifespan)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
