"""
Pydantic schemas for the company theme (branding) payload.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator

from careerpages.db.models.theme import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_ROTATION_INTERVAL_MS,
)


class NavLink(BaseModel):
    label: str = Field(..., description="Link text")
    url: str = Field(..., description="Link target")


class ThemeData(BaseModel):
    """Theme as edited in the editor and captured in snapshots."""
    primary_color: str = Field(DEFAULT_PRIMARY_COLOR, max_length=32)
    secondary_color: str = Field(DEFAULT_SECONDARY_COLOR, max_length=32)
    background_color: str = Field(DEFAULT_BACKGROUND_COLOR, max_length=32)
    logo_url: Optional[str] = None
    banner_url: Optional[str] = Field(None, description="Legacy single banner")
    banner_urls: List[str] = Field(default_factory=list, description="Carousel banners in display order")
    auto_rotate: bool = True
    rotation_interval: int = Field(DEFAULT_ROTATION_INTERVAL_MS, ge=500, description="Carousel interval in milliseconds")
    video_url: Optional[str] = None
    header_links: List[NavLink] = Field(default_factory=list)
    footer_text: Optional[str] = None
    footer_links: List[NavLink] = Field(default_factory=list)
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: str = DEFAULT_FONT_SIZE

    @field_validator("banner_urls", "header_links", "footer_links", mode="before")
    @classmethod
    def none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("auto_rotate", mode="before")
    @classmethod
    def default_auto_rotate(cls, v: Any) -> Any:
        return True if v is None else v

    @field_validator("rotation_interval", mode="before")
    @classmethod
    def default_interval(cls, v: Any) -> Any:
        return v or DEFAULT_ROTATION_INTERVAL_MS

    class Config:
        from_attributes = True


class ThemeView(ThemeData):
    """Theme as rendered: carries the resolved carousel."""
    banners: List[str] = Field(default_factory=list, description="Effective carousel banners")


class MediaUploadResponse(BaseModel):
    kind: str
    content_type: str
    size_bytes: int
    data_url: str
