"""
Draft / publish state of a company's careers page.

States:
    Draft                  is_published = False
    Published-Live         is_published = True, no snapshot captured yet
    Published-Snapshotted  is_published = True, snapshot from the last publish

``save_draft`` persists the editor bundle without touching publish state,
``publish`` saves (when given a bundle) and freezes a snapshot, and
``unpublish`` only clears the flag so the last snapshot can be republished.
The public page renders nothing but the snapshot; the preview renders the
live draft.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from careerpages.core.access_policy import Action, authorize
from careerpages.core.errors import DraftConflict
from careerpages.core.logging_config import sanitize_log_data
from careerpages.db.models.company import Company
from careerpages.db.models.theme import CompanyTheme
from careerpages.db.models.user import User
from careerpages.schemas.company import (
    CompanyBundleResponse,
    DraftBundle,
    PublishedSnapshot,
    PublishStatusResponse,
)
from careerpages.schemas.job import JobFilter, JobResponse
from careerpages.schemas.page import CareersPageView, CompanyHeader
from careerpages.schemas.section import SectionRecord, SectionResponse
from careerpages.schemas.theme import ThemeData
from careerpages.services.job_service import list_jobs, reconcile_jobs
from careerpages.services.page_renderer import build_page_view
from careerpages.services.section_service import list_sections, reconcile_sections

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def get_company(db: Session, slug: str) -> Optional[Company]:
    return db.query(Company).filter(Company.slug == slug).first()


def theme_data(company: Company) -> ThemeData:
    if company.theme is None:
        return ThemeData()
    return ThemeData.model_validate(company.theme)


def build_bundle(db: Session, company: Company) -> CompanyBundleResponse:
    """Full draft as the editor sees it: every section and every job."""
    return CompanyBundleResponse(
        id=company.id,
        slug=company.slug,
        name=company.name,
        description=company.description,
        is_published=company.is_published,
        last_saved_at=company.last_saved_at,
        last_published_at=company.last_published_at,
        has_snapshot=bool(company.published_snapshot),
        draft_version=company.draft_version,
        theme=theme_data(company),
        sections=[SectionRecord.model_validate(s) for s in list_sections(db, company.id)],
        jobs=[JobResponse.model_validate(j) for j in list_jobs(db, company.id)],
    )


def _admin_fields_changed(company: Company, bundle: DraftBundle) -> bool:
    if bundle.company is not None:
        if bundle.company.name is not None and bundle.company.name != company.name:
            return True
        if bundle.company.description is not None and bundle.company.description != company.description:
            return True
    if bundle.theme is not None:
        current_logo = company.theme.logo_url if company.theme else None
        if bundle.theme.logo_url != current_logo:
            return True
    return False


def check_draft_version(company: Company, bundle: DraftBundle) -> None:
    if bundle.draft_version is not None and bundle.draft_version != company.draft_version:
        logger.info(
            f"Draft conflict: company_id={company.id} current={company.draft_version} submitted={bundle.draft_version}"
        )
        raise DraftConflict(company.draft_version, bundle.draft_version)


def upsert_theme(db: Session, company: Company, theme: ThemeData) -> CompanyTheme:
    """Replace the theme wholesale, creating it if the company has none."""
    row = company.theme
    if row is None:
        row = CompanyTheme(company_id=company.id)
        db.add(row)
        company.theme = row
    for name, value in theme.model_dump(mode="json").items():
        setattr(row, name, value)
    return row


def _apply_bundle(db: Session, company: Company, bundle: DraftBundle, caller: User) -> None:
    check_draft_version(company, bundle)
    if _admin_fields_changed(company, bundle):
        authorize(caller, company, Action.EDIT_COMPANY_INFO)

    if bundle.company is not None:
        if bundle.company.name is not None:
            company.name = bundle.company.name
        if bundle.company.description is not None:
            company.description = bundle.company.description

    if bundle.theme is not None:
        logger.debug(f"Theme submitted: company_id={company.id} {sanitize_log_data(bundle.theme.model_dump(mode='json'))}")
        upsert_theme(db, company, bundle.theme)

    if bundle.sections is not None:
        reconcile_sections(db, company.id, bundle.sections)

    if bundle.jobs is not None:
        reconcile_jobs(db, company.id, bundle.jobs)

    company.last_saved_at = utcnow()
    company.draft_version = (company.draft_version or 1) + 1
    db.flush()


def save_draft(db: Session, company: Company, bundle: DraftBundle, caller: User) -> Company:
    """Persist the editor bundle as the new draft in one transaction."""
    try:
        _apply_bundle(db, company, bundle, caller)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(company)
    logger.info(f"Draft saved: company_id={company.id} user_id={caller.id} version={company.draft_version}")
    return company


def capture_snapshot(db: Session, company: Company, captured_at: datetime) -> dict:
    """Theme + visible sections + active jobs, as JSON-ready data."""
    snapshot = PublishedSnapshot(
        captured_at=captured_at,
        name=company.name,
        description=company.description,
        theme=theme_data(company),
        sections=[SectionResponse.model_validate(s) for s in list_sections(db, company.id, visible_only=True)],
        jobs=[JobResponse.model_validate(j) for j in list_jobs(db, company.id, active_only=True)],
    )
    return snapshot.model_dump(mode="json")


def publish(db: Session, company: Company, caller: User, bundle: Optional[DraftBundle] = None) -> Company:
    """
    Save the submitted draft (if any), then go live with a fresh snapshot.

    Without a bundle the stored draft is republished as is.
    """
    try:
        if bundle is not None:
            _apply_bundle(db, company, bundle, caller)
        now = utcnow()
        company.published_snapshot = capture_snapshot(db, company, now)
        company.is_published = True
        company.last_published_at = now
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(company)
    logger.info(f"Page published: company_id={company.id} user_id={caller.id} at={company.last_published_at}")
    return company


def unpublish(db: Session, company: Company, caller: User) -> Company:
    """Hide the page; the last snapshot and publish timestamp are kept."""
    try:
        company.is_published = False
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(company)
    logger.info(f"Page unpublished: company_id={company.id} user_id={caller.id}")
    return company


def publish_status(company: Company, base_url: str = "") -> PublishStatusResponse:
    return PublishStatusResponse(
        slug=company.slug,
        is_published=company.is_published,
        last_published_at=company.last_published_at,
        has_snapshot=bool(company.published_snapshot),
        draft_version=company.draft_version,
        public_url=f"{base_url.rstrip('/')}/{company.slug}/careers",
    )


def render_public_page(company: Company, job_filter: JobFilter) -> CareersPageView:
    """Render the published snapshot. Callers check visibility first."""
    snapshot = PublishedSnapshot.model_validate(company.published_snapshot)
    return build_page_view(
        mode="published",
        header=CompanyHeader(slug=company.slug, name=snapshot.name, description=snapshot.description),
        theme=snapshot.theme,
        sections=snapshot.sections,
        jobs=snapshot.jobs,
        job_filter=job_filter,
        published_at=company.last_published_at,
    )


def render_preview(db: Session, company: Company, job_filter: JobFilter) -> CareersPageView:
    """Render the live draft, restricted to visible sections and active jobs."""
    return build_page_view(
        mode="preview",
        header=CompanyHeader(slug=company.slug, name=company.name, description=company.description),
        theme=theme_data(company),
        sections=list_sections(db, company.id, visible_only=True),
        jobs=list_jobs(db, company.id, active_only=True),
        job_filter=job_filter,
        published_at=company.last_published_at,
    )
