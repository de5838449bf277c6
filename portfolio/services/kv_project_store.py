"""Online project store backed by Redis"""

import logging

from pydantic import ValidationError
from redis.exceptions import RedisError

from portfolio.schemas.project import (
    DatabaseStats,
    ProjectRecord,
    deserialize_projects,
    serialize_projects,
)
from portfolio.services.default_projects import default_projects
from portfolio.services.project_store import (
    ProjectStore,
    StoreError,
    StoreMode,
    build_stats,
    current_millis,
)
from portfolio.services.redis_service import RedisService

logger = logging.getLogger(__name__)


class KeyValueProjectStore(ProjectStore):
    """
    Project store persisting the collection as JSON under a single Redis key.

    Stats are written to a second key after every mutation.
    """

    PROJECTS_KEY = "projects"
    STATS_KEY = "db_stats"

    mode = StoreMode.ONLINE
    backend_name = "redis"

    def __init__(self, redis_service: RedisService, db_version: str = "1.0.0"):
        """Initialize with Redis service"""
        super().__init__(db_version)
        self.redis = redis_service

    async def _load_projects(self) -> list[ProjectRecord]:
        try:
            raw = await self.redis.get_value(self.PROJECTS_KEY)
        except RedisError as e:
            logger.error(f"Failed to read projects from Redis: {e}", exc_info=True)
            raise StoreError(f"Failed to get projects: {e}")

        if raw is None:
            return []

        try:
            return deserialize_projects(raw)
        except ValidationError as e:
            logger.error(f"Stored projects are corrupt: {e}")
            raise StoreError("Stored projects could not be decoded")

    async def _save_projects(self, projects: list[ProjectRecord]):
        try:
            await self.redis.set_value(self.PROJECTS_KEY, serialize_projects(projects))
        except RedisError as e:
            logger.error(f"Failed to write projects to Redis: {e}", exc_info=True)
            raise StoreError(f"Failed to save projects: {e}")

    async def _refresh_stats(self, projects: list[ProjectRecord]):
        stats = build_stats(projects, self.db_version)
        try:
            await self.redis.set_value(self.STATS_KEY, stats.model_dump_json(by_alias=True))
        except RedisError as e:
            # Stats are derived, the collection write already succeeded
            logger.error(f"Failed to update database stats: {e}")

    async def initialize(self) -> bool:
        try:
            exists = await self.redis.key_exists(self.PROJECTS_KEY)
        except RedisError as e:
            logger.error(f"Failed to check Redis for projects: {e}", exc_info=True)
            raise StoreError(f"Failed to initialize database: {e}")

        if exists:
            return False

        defaults = default_projects(created_at=current_millis())
        await self._write(defaults)
        logger.info(f"Initialized Redis store with {len(defaults)} default projects")
        return True

    async def stats(self) -> DatabaseStats:
        with self._track("stats"):
            try:
                raw = await self.redis.get_value(self.STATS_KEY)
            except RedisError as e:
                logger.error(f"Failed to read database stats: {e}", exc_info=True)
                raise StoreError(f"Failed to get database stats: {e}")

            if raw is not None:
                try:
                    return DatabaseStats.model_validate_json(raw)
                except ValidationError:
                    logger.warning("Stored database stats are corrupt, recomputing")

            return build_stats(await self._load_projects(), self.db_version)

    async def ping(self) -> bool:
        try:
            return await self.redis.ping()
        except RedisError as e:
            raise StoreError(f"Redis unavailable: {e}")

    async def close(self):
        await self.redis.close()
