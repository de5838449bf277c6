"""API schemas package"""

from .project import (
    ProjectCategory,
    Orientation,
    ProjectImage,
    ProjectCreate,
    ProjectUpdate,
    ProjectRecord,
    DatabaseStats,
)

__all__ = [
    "ProjectCategory",
    "Orientation",
    "ProjectImage",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectRecord",
    "DatabaseStats",
]
