"""Shared fixtures: temp-file record store, cheap password hashing, ASGI client."""

import httpx
import pytest

from teambuilder.core.config import settings
from teambuilder.db.store import JsonFileRecordStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Lower the scrypt cost so tests don't spend their time hashing."""
    monkeypatch.setattr(settings, "SCRYPT_N", 2**4)


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "server" / "users.json"


@pytest.fixture
def store(users_file):
    return JsonFileRecordStore(users_file)


@pytest.fixture
async def client(store):
    """Async test client against the app, backed by a store under tmp_path."""
    from teambuilder.main import app

    # Set the store directly on app.state (mimics lifespan startup)
    app.state.store = store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    del app.state.store
