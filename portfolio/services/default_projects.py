"""Default portfolio content restored on initialize and reset"""

from typing import Optional

from portfolio.schemas.project import (
    Orientation,
    ProjectCategory,
    ProjectImage,
    ProjectRecord,
)


def default_projects(created_at: Optional[int] = None) -> list[ProjectRecord]:
    """
    Build a fresh copy of the default project set.

    Args:
        created_at: Creation timestamp (epoch ms) stamped on every record

    Returns:
        The three default projects, ids 1 to 3
    """
    return [
        ProjectRecord(
            id=1,
            title="Promotional Graphics",
            category=ProjectCategory.PROMOTIONAL_GRAPHICS,
            description="Marketing & Promotional Materials",
            image=ProjectImage(
                src="/placeholder.svg?height=600&width=800&text=Promotional+Graphics",
                alt="Promotional Graphics",
            ),
            orientation=Orientation.LANDSCAPE,
            priority=0,
            created_at=created_at,
        ),
        ProjectRecord(
            id=2,
            title="UI/UX Design",
            category=ProjectCategory.UX_UI_DESIGN,
            description="Website and Application Design",
            image=ProjectImage(
                src="/placeholder.svg?height=800&width=600&text=UI/UX+Design",
                alt="UI/UX Design",
            ),
            orientation=Orientation.PORTRAIT,
            priority=0,
            created_at=created_at,
        ),
        ProjectRecord(
            id=3,
            title="Social Media & Marketing Graphics",
            category=ProjectCategory.SOCIAL_MEDIA_ANNOUNCEMENTS,
            description="Social Media and Online Advertising Graphics",
            image=ProjectImage(
                src="/placeholder.svg?height=800&width=800&text=Social+Media",
                alt="Social Media & Marketing Graphics",
            ),
            orientation=Orientation.SQUARE,
            priority=0,
            created_at=created_at,
        ),
    ]
