"""API dependencies for store access and simulated latency"""

import asyncio
import random

from fastapi import Depends, Request

from portfolio.config import Settings
from portfolio.services.kv_project_store import KeyValueProjectStore
from portfolio.services.local_project_store import LocalProjectStore
from portfolio.services.local_storage import LocalStorage
from portfolio.services.project_store import ProjectStore
from portfolio.services.redis_service import RedisService


def create_project_store(app_settings: Settings) -> ProjectStore:
    """
    Build the authoritative project store for this process.

    Args:
        app_settings: Application settings; store_backend selects the
            Redis (online) or local file (offline) implementation

    Returns:
        Configured ProjectStore
    """
    if app_settings.store_backend == "local":
        return LocalProjectStore(LocalStorage(app_settings.local_store_path))

    return KeyValueProjectStore(
        RedisService(app_settings.redis_url),
        db_version=app_settings.db_version,
    )


def get_project_store(request: Request) -> ProjectStore:
    """
    FastAPI dependency that provides the store created at startup.

    Usage:
        @router.get("/items")
        async def get_items(store: ProjectStore = Depends(get_project_store)):
            return await store.get_all()
    """
    return request.app.state.project_store


def get_settings(request: Request) -> Settings:
    """FastAPI dependency that provides the settings the app was started with"""
    return request.app.state.settings


async def simulate_network_latency(app_settings: Settings = Depends(get_settings)):
    """Sleep a random 200-500ms (configurable) when latency simulation is on"""
    if not app_settings.simulate_latency:
        return

    delay_ms = random.uniform(app_settings.latency_min_ms, app_settings.latency_max_ms)
    await asyncio.sleep(delay_ms / 1000)
