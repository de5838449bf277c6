"""Project management endpoints"""

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from portfolio.api.dependencies import get_project_store, simulate_network_latency
from portfolio.schemas.project import (
    MessageResponse,
    NextIdResponse,
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
    StatsResponse,
)
from portfolio.services.ordering import ALL_CATEGORIES, gallery
from portfolio.services.project_store import (
    ProjectNotFoundError,
    ProjectStore,
    ProjectValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["Projects"],
    dependencies=[Depends(simulate_network_latency)],
)

init_router = APIRouter(prefix="/api", tags=["Database"])


@router.get("", response_model=ProjectListResponse, status_code=status.HTTP_200_OK)
async def get_projects(store: ProjectStore = Depends(get_project_store)):
    """Get all projects in stored order"""
    projects = await store.get_all()
    return ProjectListResponse(projects=projects)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_200_OK)
async def create_project(
    project: ProjectCreate,
    store: ProjectStore = Depends(get_project_store),
):
    """
    Add a new project

    Title and category are required. The next free id is assigned when
    the body has no id; a taken id is rejected with 400.
    """
    record = await store.add(project)
    return ProjectResponse(message="Project added successfully", project=record)


@router.get("/next-id", response_model=NextIdResponse, status_code=status.HTTP_200_OK)
async def get_next_project_id(store: ProjectStore = Depends(get_project_store)):
    """Get the id the next new project should use"""
    return NextIdResponse(next_id=await store.next_id())


@router.get("/stats", response_model=StatsResponse, status_code=status.HTTP_200_OK)
async def get_database_stats(store: ProjectStore = Depends(get_project_store)):
    """Get the current collection statistics"""
    return StatsResponse(stats=await store.stats())


@router.post("/reset", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def reset_database(store: ProjectStore = Depends(get_project_store)):
    """Discard all projects and restore the default set"""
    await store.reset()
    return MessageResponse(message="Database reset successfully")


@router.get("/gallery", response_model=ProjectListResponse, status_code=status.HTTP_200_OK)
async def get_gallery(
    category: str = Query(ALL_CATEGORIES, description="Exact category, or 'all'"),
    seed: Optional[int] = Query(None, description="Seed for a reproducible shuffle"),
    store: ProjectStore = Depends(get_project_store),
):
    """
    Get projects in portfolio display order

    Prioritized projects come first in ascending priority, the rest are
    shuffled on every request unless a seed is given.
    """
    rng = random.Random(seed) if seed is not None else None
    projects = gallery(await store.get_all(), category=category, rng=rng)
    return ProjectListResponse(projects=projects)


@router.get("/{project_id}", response_model=ProjectResponse, status_code=status.HTTP_200_OK)
async def get_project(
    project_id: int,
    store: ProjectStore = Depends(get_project_store),
):
    """Get a single project"""
    project = await store.get_by_id(project_id)
    if project is None:
        raise ProjectNotFoundError(project_id)
    return ProjectResponse(project=project)


@router.put("/{project_id}", response_model=ProjectResponse, status_code=status.HTTP_200_OK)
async def update_project(
    project_id: int,
    project: ProjectUpdate,
    store: ProjectStore = Depends(get_project_store),
):
    """
    Replace a project

    The body id must match the path id. createdAt is kept from the stored
    record.
    """
    if project.id != project_id:
        raise ProjectValidationError("Project ID mismatch")

    record = await store.update(project)
    return ProjectResponse(message="Project updated successfully", project=record)


@router.delete("/{project_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def delete_project(
    project_id: int,
    store: ProjectStore = Depends(get_project_store),
):
    """Delete a project"""
    await store.delete(project_id)
    return MessageResponse(message="Project deleted successfully")


@init_router.get("/init", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def initialize_database(store: ProjectStore = Depends(get_project_store)):
    """Seed the default projects if the store is empty (idempotent)"""
    seeded = await store.initialize()
    if seeded:
        logger.info("Database initialized with default projects")
        return MessageResponse(message="Database initialized successfully")
    return MessageResponse(message="Database already initialized")
