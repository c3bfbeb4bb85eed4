"""
Careers page render models: the public page and the editor preview.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from careerpages.core.access_policy import Action, authorize
from careerpages.core.auth_dependency import get_db, get_current_user_obj
from careerpages.db.models.user import User
from careerpages.schemas.job import JobFilter
from careerpages.schemas.page import CareersPageView
from careerpages.services.publish_service import get_company, render_preview, render_public_page

router = APIRouter(tags=["Careers"])


def job_filter_params(
    q: str = Query("", description="Title search"),
    location_type: str = Query("all"),
    job_type: str = Query("all"),
) -> JobFilter:
    return JobFilter(q=q, location_type=location_type, job_type=job_type)


@router.get("/{slug}/careers", response_model=CareersPageView)
def public_careers_page(
    slug: str,
    job_filter: JobFilter = Depends(job_filter_params),
    db: Session = Depends(get_db)
):
    """
    Published careers page, rendered from the last publish snapshot.

    Unknown and unpublished companies both answer 404.
    """
    company = get_company(db, slug)
    authorize(None, company, Action.VIEW_PUBLIC)
    return render_public_page(company, job_filter)


@router.get("/{slug}/preview", response_model=CareersPageView)
def preview_careers_page(
    slug: str,
    job_filter: JobFilter = Depends(job_filter_params),
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """Live draft as it would look once published."""
    company = get_company(db, slug)
    authorize(user, company, Action.PREVIEW)
    return render_preview(db, company, job_filter)
