"""Pytest configuration and shared fixtures"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from portfolio.main import app
from portfolio.api.dependencies import get_project_store
from portfolio.schemas.project import ProjectCreate, ProjectImage
from portfolio.services.kv_project_store import KeyValueProjectStore
from portfolio.services.local_project_store import LocalProjectStore
from portfolio.services.local_storage import LocalStorage
from portfolio.services.redis_service import RedisService


class FakeRedisClient:
    """In-memory replacement for the redis.asyncio client used by RedisService"""

    def __init__(self):
        self.data = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value
        return True

    async def exists(self, *keys):
        return sum(1 for key in keys if key in self.data)

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed

    async def ping(self):
        return True

    async def aclose(self):
        pass


@pytest.fixture
def client():
    """FastAPI test client fixture"""
    return TestClient(app)


@pytest.fixture
def fake_redis_client():
    return FakeRedisClient()


@pytest.fixture
def redis_service(fake_redis_client):
    """Redis service wired to the in-memory client"""
    service = RedisService("redis://localhost:6379/15")
    service._client = fake_redis_client
    return service


@pytest.fixture
def kv_store(redis_service):
    return KeyValueProjectStore(redis_service, db_version="1.0.0")


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(str(tmp_path / "local_storage.json"))


@pytest.fixture
def local_store(local_storage):
    return LocalProjectStore(local_storage)


@pytest.fixture(params=["redis", "local"])
def project_store(request, kv_store, local_store):
    """Each store implementation in turn"""
    return kv_store if request.param == "redis" else local_store


@pytest.fixture
def make_project():
    """Factory for project creation payloads"""

    def _make(**overrides) -> ProjectCreate:
        data = {
            "title": "Brand Refresh",
            "category": "Promotional Graphics",
            "description": "Posters and flyers for a spring campaign",
            "image": ProjectImage(src="https://example.com/brand.jpg", alt="Brand"),
            "orientation": "landscape",
            "priority": 0,
        }
        data.update(overrides)
        return ProjectCreate(**data)

    return _make


@pytest.fixture
def project_payload():
    """Sample JSON body for POST /api/projects"""
    return {
        "title": "Landing Page",
        "category": "Website Projects",
        "description": "Marketing site for a bakery",
        "image": {"src": "https://example.com/landing.png", "alt": "Landing page"},
        "orientation": "portrait",
        "priority": 2,
    }


@pytest_asyncio.fixture
async def async_client(kv_store):
    """Async test client using the in-memory Redis store"""
    app.dependency_overrides[get_project_store] = lambda: kv_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
