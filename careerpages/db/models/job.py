"""
Job model for postings listed on a company's careers page.
"""
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from careerpages.db.base import Base


class LocationType(str, enum.Enum):
    REMOTE = "REMOTE"
    HYBRID = "HYBRID"
    ONSITE = "ONSITE"


class JobType(str, enum.Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERNSHIP = "INTERNSHIP"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String, nullable=False, index=True)
    department = Column(String, nullable=False)
    location = Column(String, nullable=False)
    location_type = Column(String, nullable=False, default=LocationType.ONSITE.value)
    job_type = Column(String, nullable=False, default=JobType.FULL_TIME.value)
    description = Column(Text, nullable=False, default="")
    requirements = Column(Text, nullable=False, default="")
    salary = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    posted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        Index('idx_job_company_posted', 'company_id', 'posted_at'),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, company_id={self.company_id}, title='{self.title}')>"
