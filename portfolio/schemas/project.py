"""Project schemas"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator


class ProjectCategory(str, Enum):
    """Portfolio categories offered by the admin form and the gallery filter"""
    PROMOTIONAL_GRAPHICS = "Promotional Graphics"
    SOCIAL_MEDIA_ANNOUNCEMENTS = "Social Media Announcements"
    NEWS_AND_UPDATES_GRAPHICS = "News & Updates Graphics"
    WEBSITE_PROJECTS = "Website Projects"
    UX_UI_DESIGN = "UX/UI Design"
    OTHER_DESIGNS = "Other Designs"


class Orientation(str, Enum):
    """Image orientation"""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"


# (width, height) used when the image size is not given explicitly
ORIENTATION_DIMENSIONS = {
    Orientation.LANDSCAPE: (800, 600),
    Orientation.PORTRAIT: (600, 800),
    Orientation.SQUARE: (800, 800),
}

MAX_PRIORITY = 5


class ProjectImage(BaseModel):
    """Gallery image of a project"""
    src: str = Field(..., min_length=1, description="Image URL")
    width: Optional[int] = Field(None, gt=0, description="Image width in pixels")
    height: Optional[int] = Field(None, gt=0, description="Image height in pixels")
    alt: Optional[str] = Field(None, description="Alternative text")


class ProjectBase(BaseModel):
    """Base project schema"""
    title: str = Field(..., min_length=1, description="Project title")
    category: ProjectCategory = Field(..., description="Project category")
    description: str = Field(default="", description="Project description")
    image: ProjectImage
    orientation: Orientation = Field(default=Orientation.LANDSCAPE, description="Image orientation")
    priority: int = Field(
        default=0,
        ge=0,
        le=MAX_PRIORITY,
        description="Display priority, 0 places the project randomly",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles"""
        if not v.strip():
            raise ValueError("Title must not be blank")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def apply_orientation_dimensions(self):
        """Fill missing image dimensions from the orientation"""
        width, height = ORIENTATION_DIMENSIONS[self.orientation]
        defaults = {}
        if self.image.width is None:
            defaults["width"] = width
        if self.image.height is None:
            defaults["height"] = height

        # Never mutate the caller's ProjectImage
        if defaults:
            self.image = self.image.model_copy(update=defaults)
        return self


class ProjectCreate(ProjectBase):
    """Project creation schema - id is assigned by the store when omitted"""
    id: Optional[int] = Field(None, gt=0, description="Project ID")


class ProjectUpdate(ProjectBase):
    """Project update schema - the full record replaces the stored one"""
    id: int = Field(..., gt=0, description="Project ID")


class ProjectRecord(ProjectBase):
    """Stored project record"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0, description="Project ID")
    created_at: Optional[int] = Field(
        None,
        alias="createdAt",
        description="Creation time in epoch milliseconds",
    )


class DatabaseStats(BaseModel):
    """Derived summary of the project collection"""
    model_config = ConfigDict(populate_by_name=True)

    total_projects: int = Field(0, alias="totalProjects")
    last_updated: Optional[int] = Field(None, alias="lastUpdated")
    db_version: str = Field(..., alias="dbVersion")
    db_size: str = Field("0.00 KB", alias="dbSize")


class ErrorResponse(BaseModel):
    """Uniform error body"""
    success: bool = False
    error: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ProjectListResponse(BaseModel):
    """List of projects response"""
    success: bool = True
    projects: list[ProjectRecord]


class ProjectResponse(BaseModel):
    """Single project response"""
    success: bool = True
    message: Optional[str] = None
    project: ProjectRecord


class NextIdResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    next_id: int = Field(..., alias="nextId")


class StatsResponse(BaseModel):
    success: bool = True
    stats: DatabaseStats


_project_list_adapter = TypeAdapter(list[ProjectRecord])


def serialize_projects(projects: list[ProjectRecord]) -> str:
    """Encode a project list in the persisted JSON format"""
    return _project_list_adapter.dump_json(projects, by_alias=True).decode("utf-8")


def deserialize_projects(raw: Union[str, bytes]) -> list[ProjectRecord]:
    """Decode a project list from the persisted JSON format"""
    return _project_list_adapter.validate_json(raw)
