"""
Render model of the careers page (public and preview).
"""
from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from careerpages.db.models.section import SectionLayout, SectionType
from careerpages.schemas.theme import ThemeView
from careerpages.schemas.job import JobResponse, JobFilter, JobFilterOptions


class RenderedSection(BaseModel):
    id: int
    type: SectionType
    title: str
    layout: SectionLayout
    columns: List[str] = Field(..., description="Markup per rendered column; one entry when full width")


class SectionGroupView(BaseModel):
    column_group: int
    arrangement: Literal["stacked", "two_columns", "three_columns"]
    sections: List[RenderedSection]


class CompanyHeader(BaseModel):
    slug: str
    name: str
    description: Optional[str]


class CareersPageView(BaseModel):
    mode: Literal["published", "preview"]
    company: CompanyHeader
    theme: ThemeView
    groups: List[SectionGroupView]
    jobs: List[JobResponse]
    total_jobs: int
    filter_options: JobFilterOptions
    applied_filter: JobFilter
    no_results: bool
    published_at: Optional[datetime] = None
