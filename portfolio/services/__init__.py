"""Services package"""

from .project_store import ProjectStore, StoreMode
from .kv_project_store import KeyValueProjectStore
from .local_project_store import LocalProjectStore
from .redis_service import RedisService

__all__ = [
    "ProjectStore",
    "StoreMode",
    "KeyValueProjectStore",
    "LocalProjectStore",
    "RedisService",
]
