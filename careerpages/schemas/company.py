"""
Pydantic schemas for the editor bundle (company + theme + sections + jobs)
and the published snapshot.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from careerpages.schemas.theme import ThemeData
from careerpages.schemas.section import SectionInput, SectionResponse, SectionRecord
from careerpages.schemas.job import JobInput, JobResponse


class CompanyInfoUpdate(BaseModel):
    """Company fields editable from the company-info tab (admin only when changed)."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None


class DraftBundle(BaseModel):
    """
    What the editor submits on save or publish.

    Every part is optional: an omitted part is left untouched, a submitted
    list replaces the stored list (absent ids are deleted).
    """
    company: Optional[CompanyInfoUpdate] = None
    theme: Optional[ThemeData] = None
    sections: Optional[List[SectionInput]] = None
    jobs: Optional[List[JobInput]] = None
    draft_version: Optional[int] = Field(
        None,
        description="Version the editor loaded; when sent, a stale version is rejected with 409",
    )


class CompanyBundleResponse(BaseModel):
    """Full draft state returned to the editor."""
    id: int
    slug: str
    name: str
    description: Optional[str]
    is_published: bool
    last_saved_at: Optional[datetime]
    last_published_at: Optional[datetime]
    has_snapshot: bool
    draft_version: int
    theme: ThemeData
    sections: List[SectionRecord]
    jobs: List[JobResponse]


class PublishedSnapshot(BaseModel):
    """Point-in-time copy of the page captured by publish."""
    captured_at: datetime
    name: str
    description: Optional[str] = None
    theme: ThemeData
    sections: List[SectionResponse]
    jobs: List[JobResponse]


class PublishStatusResponse(BaseModel):
    slug: str
    is_published: bool
    last_published_at: Optional[datetime]
    has_snapshot: bool
    draft_version: int
    public_url: str
