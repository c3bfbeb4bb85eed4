"""
Pydantic schemas for page sections.
"""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from careerpages.db.models.section import SectionType, SectionLayout


class SectionData(BaseModel):
    """Editable fields of a section."""
    type: SectionType = SectionType.CUSTOM
    title: str = Field(..., max_length=255)
    content: str = Field("", description="Markup; TWO/THREE_COLUMN layouts split it on '|||'")
    layout: SectionLayout = SectionLayout.FULL_WIDTH
    order: int = 0
    column_group: int = 0
    column_index: int = 0
    is_visible: bool = True

    @field_validator("content", mode="before")
    @classmethod
    def unwrap_html(cls, v: Any) -> Any:
        # Older editors send {"html": "..."}
        if isinstance(v, dict):
            return v.get("html") or ""
        if v is None:
            return ""
        return v

    @field_validator("layout", mode="before")
    @classmethod
    def default_layout(cls, v: Any) -> Any:
        return v or SectionLayout.FULL_WIDTH

    @field_validator("column_group", "column_index", mode="before")
    @classmethod
    def default_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class SectionInput(SectionData):
    """A submitted section: without ``id`` it is new, with ``id`` it already exists."""
    id: Optional[int] = Field(None, description="Persisted section id; omit for new sections")


class SectionResponse(SectionData):
    id: int

    class Config:
        from_attributes = True


class SectionRecord(SectionResponse):
    """Section with timestamps, as returned in the editor bundle."""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
