"""Tests for the async projects API client"""

import random

import httpx
import pytest
from httpx import ASGITransport

from portfolio.main import app
from portfolio.api.dependencies import get_project_store
from portfolio.schemas.project import ProjectUpdate
from portfolio.services.project_client import ProjectApiClient, ProjectApiError


@pytest.fixture
def api_client(kv_store):
    """Client talking to the app in-process"""
    app.dependency_overrides[get_project_store] = lambda: kv_store
    yield ProjectApiClient("http://test", transport=ASGITransport(app=app))
    app.dependency_overrides.clear()


@pytest.mark.asyncio
class TestProjectApiClient:
    """Test client operations against the API"""

    async def test_initialize_and_fetch_all(self, api_client):
        message = await api_client.initialize_database()
        projects = await api_client.fetch_all_projects()

        assert message == "Database initialized successfully"
        assert [p.id for p in projects] == [1, 2, 3]

    async def test_add_and_fetch_project(self, api_client, make_project):
        next_id = await api_client.fetch_next_id()
        added = await api_client.add_project(make_project(id=next_id, priority=3))

        fetched = await api_client.fetch_project(next_id)

        assert added.id == 1
        assert fetched.model_dump() == added.model_dump()
        assert fetched.created_at is not None

    async def test_add_without_id(self, api_client, make_project):
        added = await api_client.add_project(make_project())

        assert added.id == 1

    async def test_update_project(self, api_client, make_project):
        added = await api_client.add_project(make_project())

        update = ProjectUpdate(**added.model_dump(exclude={"id", "created_at"}), id=added.id)
        update.title = "Updated title"
        updated = await api_client.update_project(update)

        assert updated.title == "Updated title"
        assert updated.created_at == added.created_at

    async def test_delete_project(self, api_client, make_project):
        added = await api_client.add_project(make_project())

        assert await api_client.delete_project(added.id) is True
        assert await api_client.fetch_all_projects() == []

    async def test_missing_project_raises(self, api_client):
        with pytest.raises(ProjectApiError) as exc_info:
            await api_client.fetch_project(404)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Project with ID 404 not found"

    async def test_duplicate_raises(self, api_client, make_project):
        await api_client.add_project(make_project(id=1))

        with pytest.raises(ProjectApiError) as exc_info:
            await api_client.add_project(make_project(id=1))

        assert exc_info.value.status_code == 400

    async def test_reset_and_stats(self, api_client, make_project):
        await api_client.add_project(make_project(id=9))

        assert await api_client.reset_database() is True
        stats = await api_client.fetch_stats()

        assert stats.total_projects == 3
        assert stats.db_version == "1.0.0"

    async def test_fetch_gallery_orders_locally(self, api_client, make_project):
        for project_id, priority in [(1, 0), (2, 2), (3, 0), (4, 1)]:
            await api_client.add_project(make_project(id=project_id, priority=priority))

        projects = await api_client.fetch_gallery(rng=random.Random(3))

        assert [p.id for p in projects[:2]] == [4, 2]
        assert {p.id for p in projects[2:]} == {1, 3}

    async def test_fetch_gallery_filters_category(self, api_client, make_project):
        await api_client.add_project(make_project(id=1, category="Website Projects"))
        await api_client.add_project(make_project(id=2, category="Other Designs"))

        projects = await api_client.fetch_gallery(category="Other Designs")

        assert [p.id for p in projects] == [2]


@pytest.mark.asyncio
async def test_transport_error_propagates():
    def refuse(request: httpx.Request):
        raise httpx.ConnectError("Connection refused", request=request)

    client = ProjectApiClient("http://test", transport=httpx.MockTransport(refuse))

    with pytest.raises(httpx.ConnectError):
        await client.fetch_all_projects()


@pytest.mark.asyncio
async def test_non_json_error_body():
    def fail(request: httpx.Request):
        return httpx.Response(502, text="Bad Gateway")

    client = ProjectApiClient("http://test", transport=httpx.MockTransport(fail))

    with pytest.raises(ProjectApiError) as exc_info:
        await client.fetch_stats()

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"
