"""Root conftest: shared test configuration and the in-memory store fixture."""

import os

# Ensure tests never reach a real MongoDB
os.environ.setdefault("USE_IN_MEMORY_STORE", "true")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest

from smart_transport.infrastructure.memory_store import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore()
