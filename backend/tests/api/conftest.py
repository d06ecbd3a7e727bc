"""API test fixtures — FastAPI app over an in-process httpx client.

Invariants:
    - Every test gets its own AsyncClient; the app keeps no state between requests
    - raise_app_exceptions=False: the catch-all handler's 500 response is
      observable instead of the re-raised exception

Design Decisions:
    - ASGITransport over a live server: no sockets, redirects still followed
      through the same transport
"""

import pytest
from httpx import ASGITransport, AsyncClient

from statuslab.main import app

BASE_URL = "http://test"


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url=BASE_URL,
    ) as c:
        yield c
