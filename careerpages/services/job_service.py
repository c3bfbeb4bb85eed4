"""
Job listing persistence and the public page job filter.
"""
import enum
from typing import Iterable, List

from sqlalchemy.orm import Session

from careerpages.db.models.job import Job
from careerpages.schemas.job import JobInput, JobFilter, JobFilterOptions
from careerpages.services.reconcile import (
    ReconcileResult,
    plan_reconciliation,
    apply_reconciliation,
)

ALL = "all"


def list_jobs(db: Session, company_id: int, active_only: bool = False) -> List[Job]:
    query = db.query(Job).filter(Job.company_id == company_id)
    if active_only:
        query = query.filter(Job.is_active.is_(True))
    return query.order_by(Job.posted_at.desc(), Job.id.desc()).all()


def reconcile_jobs(db: Session, company_id: int, submitted: List[JobInput]) -> ReconcileResult:
    persisted_ids = {
        row_id for (row_id,) in db.query(Job.id).filter(Job.company_id == company_id)
    }
    plan = plan_reconciliation(submitted, persisted_ids, label="job")
    return apply_reconciliation(db, Job, company_id, plan)


def _value(v) -> str:
    return v.value if isinstance(v, enum.Enum) else v


def matches_filter(job, job_filter: JobFilter) -> bool:
    """Title substring (case-insensitive) AND location type AND job type."""
    matches_search = job_filter.q.lower() in job.title.lower()
    matches_location = job_filter.location_type == ALL or _value(job.location_type) == job_filter.location_type
    matches_job_type = job_filter.job_type == ALL or _value(job.job_type) == job_filter.job_type
    return matches_search and matches_location and matches_job_type


def filter_jobs(jobs: Iterable, job_filter: JobFilter) -> list:
    return [job for job in jobs if matches_filter(job, job_filter)]


def filter_options(jobs: Iterable) -> JobFilterOptions:
    """Distinct location/job types present in ``jobs``, in first-seen order."""
    location_types = []
    job_types = []
    for job in jobs:
        location_type = _value(job.location_type)
        job_type = _value(job.job_type)
        if location_type not in location_types:
            location_types.append(location_type)
        if job_type not in job_types:
            job_types.append(job_type)
    return JobFilterOptions(location_types=location_types, job_types=job_types)
