import pytest
from fastapi.testclient import TestClient

from splitbook.api.bridge import LedgerBridge
from splitbook.db.session import create_store
from splitbook.main import create_app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def store():
    store = await create_store(MEMORY_URL)
    yield store
    await store.dispose()


@pytest.fixture
def bridge(store):
    return LedgerBridge(store)


@pytest.fixture
def client():
    with TestClient(create_app(MEMORY_URL)) as client:
        yield client
