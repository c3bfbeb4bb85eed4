"""
Pydantic schemas for job postings.
"""
from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from careerpages.db.models.job import LocationType, JobType


class JobData(BaseModel):
    """Editable fields of a job posting."""
    title: str = Field(..., description="Job title", min_length=1, max_length=255)
    department: str = Field(..., description="Department", min_length=1, max_length=255)
    location: str = Field(..., description="Free-text location", min_length=1, max_length=255)
    location_type: LocationType = LocationType.ONSITE
    job_type: JobType = JobType.FULL_TIME
    description: str = ""
    requirements: str = ""
    salary: Optional[str] = Field(None, description="Free-text salary, e.g. 'USD 80K-120K / year'")
    is_active: bool = True

    @field_validator("description", "requirements", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("is_active", mode="before")
    @classmethod
    def default_active(cls, v: Any) -> Any:
        return True if v is None else v


class JobInput(JobData):
    """A submitted job: without ``id`` it is new, with ``id`` it already exists."""
    id: Optional[int] = Field(None, description="Persisted job id; omit for new jobs")


class JobResponse(JobData):
    id: int
    posted_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class JobFilterOptions(BaseModel):
    location_types: List[LocationType] = Field(default_factory=list)
    job_types: List[JobType] = Field(default_factory=list)


class JobFilter(BaseModel):
    """Public page job filter; 'all' disables a predicate."""
    q: str = Field("", description="Case-insensitive title substring")
    location_type: str = Field("all")
    job_type: str = Field("all")


class BulkUploadResponse(BaseModel):
    success: bool = True
    count: int = Field(..., description="Jobs created")
    skipped: int = Field(0, description="Duplicate rows skipped")
    message: str
