"""Offline project store backed by local storage"""

import asyncio
import logging

from pydantic import ValidationError

from portfolio.schemas.project import (
    DatabaseStats,
    ProjectRecord,
    deserialize_projects,
    serialize_projects,
)
from portfolio.services.default_projects import default_projects
from portfolio.services.local_storage import LocalStorage, LocalStorageError
from portfolio.services.project_store import (
    ProjectStore,
    StoreError,
    StoreMode,
    build_stats,
    current_millis,
)

logger = logging.getLogger(__name__)


class LocalProjectStore(ProjectStore):
    """
    Standalone project store for offline and demo use.

    Never synchronized with the online store. Stats are computed from the
    stored collection on every read.
    """

    DB_KEY = "portfolio_database"
    DB_VERSION_KEY = "portfolio_database_version"
    CURRENT_DB_VERSION = 1

    mode = StoreMode.OFFLINE
    backend_name = "local"

    def __init__(self, storage: LocalStorage):
        super().__init__(db_version=str(self.CURRENT_DB_VERSION))
        self.storage = storage

    async def _run(self, func, *args):
        """Run a blocking storage call in the default thread pool"""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func, *args)

    async def _read(self, key: str):
        try:
            return await self._run(self.storage.get_item, key)
        except LocalStorageError as e:
            logger.error(f"Failed to read local storage: {e}")
            raise StoreError(str(e))

    async def _stored_version(self) -> int:
        raw = await self._read(self.DB_VERSION_KEY)
        try:
            return int(raw) if raw else 0
        except ValueError:
            logger.warning(f"Invalid local database version {raw!r}")
            return 0

    async def _load_projects(self) -> list[ProjectRecord]:
        raw = await self._read(self.DB_KEY)
        if raw is None:
            return []

        try:
            return deserialize_projects(raw)
        except ValidationError as e:
            logger.error(f"Local projects are corrupt: {e}")
            raise StoreError("Local projects could not be decoded")

    async def _save_projects(self, projects: list[ProjectRecord]):
        """Write the collection together with the current version marker"""
        try:
            await self._run(self.storage.set_item, self.DB_KEY, serialize_projects(projects))
            await self._run(self.storage.set_item, self.DB_VERSION_KEY, str(self.CURRENT_DB_VERSION))
        except LocalStorageError as e:
            logger.error(f"Failed to write local storage: {e}")
            raise StoreError(str(e))

    async def initialize(self) -> bool:
        """
        Seed defaults when the data or its version marker is missing, or when
        the stored version is older than CURRENT_DB_VERSION.
        """
        if await self._stored_version() >= self.CURRENT_DB_VERSION and await self._read(self.DB_KEY) is not None:
            return False

        await self._save_projects(default_projects(created_at=current_millis()))

        logger.info("Initialized local store with default projects")
        return True

    async def stats(self) -> DatabaseStats:
        with self._track("stats"):
            projects = await self._load_projects()
            return build_stats(projects, str(await self._stored_version()))

    async def ping(self) -> bool:
        await self._read(self.DB_VERSION_KEY)
        return True
