"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from careerpages.db.models.company import Company
from careerpages.db.models.theme import CompanyTheme
from careerpages.db.models.section import PageSection, SectionType, SectionLayout
from careerpages.db.models.job import Job, LocationType, JobType
from careerpages.db.models.user import User, UserRole
from careerpages.db.models.comment import SectionComment

__all__ = [
    "Company",
    "CompanyTheme",
    "PageSection",
    "SectionType",
    "SectionLayout",
    "Job",
    "LocationType",
    "JobType",
    "User",
    "UserRole",
    "SectionComment",
]
