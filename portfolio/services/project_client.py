"""Async HTTP client for the projects API"""

import logging
import random
from typing import Any, Dict, Optional

import httpx

from portfolio.schemas.project import (
    DatabaseStats,
    ProjectCreate,
    ProjectRecord,
    ProjectUpdate,
)
from portfolio.services.ordering import ALL_CATEGORIES, gallery

logger = logging.getLogger(__name__)


class ProjectApiError(Exception):
    """Non-success response from the projects API"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ProjectApiClient:
    """
    Client mirroring every projects API operation.

    Args:
        base_url: Server root, e.g. "http://localhost:8000"
        timeout_seconds: Request timeout
        transport: Optional httpx transport (e.g. ASGITransport in tests)
    """

    API_PREFIX = "/api/projects"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self.transport,
        ) as client:
            try:
                response = await client.request(method, path, json=json)
            except httpx.HTTPError as e:
                logger.error(f"{method} {path} failed: {e}")
                raise

        if response.is_error:
            try:
                message = response.json().get("error", response.reason_phrase)
            except ValueError:
                message = response.reason_phrase
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise ProjectApiError(response.status_code, message)

        return response.json()

    async def initialize_database(self) -> str:
        """Ask the server to seed defaults if its store is empty"""
        data = await self._request("GET", "/api/init")
        return data.get("message", "")

    async def fetch_all_projects(self) -> list[ProjectRecord]:
        data = await self._request("GET", self.API_PREFIX)
        return [ProjectRecord.model_validate(p) for p in data["projects"]]

    async def fetch_project(self, project_id: int) -> ProjectRecord:
        data = await self._request("GET", f"{self.API_PREFIX}/{project_id}")
        return ProjectRecord.model_validate(data["project"])

    async def add_project(self, project: ProjectCreate) -> ProjectRecord:
        data = await self._request(
            "POST",
            self.API_PREFIX,
            json=project.model_dump(mode="json", exclude_none=True),
        )
        return ProjectRecord.model_validate(data["project"])

    async def update_project(self, project: ProjectUpdate) -> ProjectRecord:
        data = await self._request(
            "PUT",
            f"{self.API_PREFIX}/{project.id}",
            json=project.model_dump(mode="json"),
        )
        return ProjectRecord.model_validate(data["project"])

    async def delete_project(self, project_id: int) -> bool:
        data = await self._request("DELETE", f"{self.API_PREFIX}/{project_id}")
        return bool(data.get("success"))

    async def reset_database(self) -> bool:
        data = await self._request("POST", f"{self.API_PREFIX}/reset")
        return bool(data.get("success"))

    async def fetch_stats(self) -> DatabaseStats:
        data = await self._request("GET", f"{self.API_PREFIX}/stats")
        return DatabaseStats.model_validate(data["stats"])

    async def fetch_next_id(self) -> int:
        data = await self._request("GET", f"{self.API_PREFIX}/next-id")
        return int(data["nextId"])

    async def fetch_gallery(
        self,
        category: str = ALL_CATEGORIES,
        rng: Optional[random.Random] = None,
    ) -> list[ProjectRecord]:
        """
        Fetch all projects and order them for display locally.

        A fresh shuffle is produced on every call unless rng is seeded.
        """
        return gallery(await self.fetch_all_projects(), category=category, rng=rng)
