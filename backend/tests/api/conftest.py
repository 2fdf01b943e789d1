"""API test fixtures: FastAPI app driven through httpx with the store overridden.

Invariants:
    - Every test gets a fresh InMemoryDocumentStore
    - get_store dependency overridden, so the lifespan (and MongoDB) is never needed
"""

import pytest
from httpx import ASGITransport, AsyncClient

from smart_transport.infrastructure.database import get_store
from smart_transport.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def trip_request():
    return {
        "studentId": "S1",
        "name": "A",
        "reason": "trip",
        "date": "2024-01-01",
        "time": "10:00",
        "destination": "Campus2",
    }


@pytest.fixture
def notice():
    return {
        "title": "Bus schedule change",
        "content": "Route 4 departs 15 minutes later.",
        "date": "2024-03-01",
        "time": "09:00",
        "author": "Transport Office",
        "category": "schedule",
    }
