"""Project store interface shared by the online and offline backends"""

import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

from portfolio.monitoring.metrics import MetricsTimer, metrics_collector
from portfolio.schemas.project import (
    DatabaseStats,
    ProjectCreate,
    ProjectRecord,
    ProjectUpdate,
    serialize_projects,
)
from portfolio.services.default_projects import default_projects

logger = logging.getLogger(__name__)


class ProjectStoreError(Exception):
    """Base exception for project store errors"""
    pass


class ProjectValidationError(ProjectStoreError):
    """Invalid project data or identifier"""
    pass


class ProjectNotFoundError(ProjectStoreError):
    """Operation targets a project id that is not stored"""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project with ID {project_id} not found")


class DuplicateProjectError(ProjectStoreError):
    """Project id is already taken"""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project with ID {project_id} already exists")


class StoreError(ProjectStoreError):
    """Underlying persistence failure"""
    pass


class StoreMode(str, Enum):
    """Whether a store is the shared online backend or a standalone offline copy"""
    ONLINE = "online"
    OFFLINE = "offline"


def current_millis() -> int:
    """Current time as epoch milliseconds"""
    return int(time.time() * 1000)


def next_id_for(projects: list[ProjectRecord]) -> int:
    """Next free id: one past the highest stored id, 1 for an empty collection"""
    if not projects:
        return 1
    return max(p.id for p in projects) + 1


def build_stats(projects: list[ProjectRecord], db_version: str) -> DatabaseStats:
    """
    Derive collection statistics.

    Size is the serialized collection length in KB, last update the newest
    creation timestamp.
    """
    size_kb = len(serialize_projects(projects).encode("utf-8")) / 1024
    last_updated = max(
        (p.created_at for p in projects if p.created_at is not None),
        default=None,
    )

    return DatabaseStats(
        total_projects=len(projects),
        last_updated=last_updated,
        db_version=db_version,
        db_size=f"{size_kb:.2f} KB",
    )


class ProjectStore(ABC):
    """
    Record API over a persisted project list.

    Subclasses provide the persistence primitives; every operation is a single
    unlocked read-modify-write, so concurrent writers are last-writer-wins.
    """

    mode: StoreMode
    backend_name: str

    def __init__(self, db_version: str):
        self.db_version = db_version

    # Persistence primitives

    @abstractmethod
    async def _load_projects(self) -> list[ProjectRecord]:
        """Read the stored collection, empty when nothing is stored"""

    @abstractmethod
    async def _save_projects(self, projects: list[ProjectRecord]):
        """Overwrite the stored collection"""

    async def _refresh_stats(self, projects: list[ProjectRecord]):
        """Recompute stats after a mutation"""

    @abstractmethod
    async def initialize(self) -> bool:
        """
        Seed the default projects if the store is uninitialized.

        Returns:
            True if defaults were written, False if data was already present
        """

    @abstractmethod
    async def stats(self) -> DatabaseStats:
        """Current collection statistics"""

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the backend is reachable"""

    async def close(self):
        """Release backend resources"""

    # Record API

    def _track(self, operation: str) -> MetricsTimer:
        def record(duration: float, succeeded: bool):
            metrics_collector.record_store_operation(
                operation=operation,
                backend=self.backend_name,
                status="success" if succeeded else "error",
                duration_seconds=duration,
            )

        return MetricsTimer(record)

    async def _write(self, projects: list[ProjectRecord]):
        await self._save_projects(projects)
        await self._refresh_stats(projects)

    async def get_all(self) -> list[ProjectRecord]:
        """All stored projects in insertion order"""
        with self._track("get_all"):
            return await self._load_projects()

    async def get_by_id(self, project_id: int) -> Optional[ProjectRecord]:
        """Project with the given id, or None"""
        with self._track("get_by_id"):
            projects = await self._load_projects()
            return next((p for p in projects if p.id == project_id), None)

    async def add(self, project: Union[ProjectCreate, ProjectRecord]) -> ProjectRecord:
        """
        Append a new project.

        Args:
            project: Project data; the next free id is assigned when id is None

        Returns:
            Stored record with createdAt stamped

        Raises:
            DuplicateProjectError: If the id is already used
        """
        with self._track("add"):
            projects = await self._load_projects()
            project_id = project.id if project.id is not None else next_id_for(projects)

            if any(p.id == project_id for p in projects):
                raise DuplicateProjectError(project_id)

            record = ProjectRecord(
                **project.model_dump(exclude={"id", "created_at"}),
                id=project_id,
                created_at=current_millis(),
            )
            await self._write([*projects, record])

            logger.info(f"Added project {record.id} ({record.title})")
            return record

    async def update(self, project: Union[ProjectUpdate, ProjectRecord]) -> ProjectRecord:
        """
        Replace a stored project, keeping its original createdAt.

        Raises:
            ProjectNotFoundError: If no project has this id
        """
        with self._track("update"):
            projects = await self._load_projects()
            index = next((i for i, p in enumerate(projects) if p.id == project.id), None)

            if index is None:
                raise ProjectNotFoundError(project.id)

            record = ProjectRecord(
                **project.model_dump(exclude={"id", "created_at"}),
                id=project.id,
                created_at=projects[index].created_at,
            )
            projects[index] = record
            await self._write(projects)

            logger.info(f"Updated project {record.id}")
            return record

    async def delete(self, project_id: int):
        """
        Remove a stored project.

        Raises:
            ProjectNotFoundError: If no project has this id
        """
        with self._track("delete"):
            projects = await self._load_projects()
            remaining = [p for p in projects if p.id != project_id]

            if len(remaining) == len(projects):
                raise ProjectNotFoundError(project_id)

            await self._write(remaining)
            logger.info(f"Deleted project {project_id}")

    async def reset(self) -> list[ProjectRecord]:
        """Discard all projects and restore the default set"""
        with self._track("reset"):
            defaults = default_projects(created_at=current_millis())
            await self._write(defaults)

            logger.info(f"Reset {self.backend_name} store to {len(defaults)} default projects")
            return defaults

    async def next_id(self) -> int:
        with self._track("next_id"):
            return next_id_for(await self._load_projects())
