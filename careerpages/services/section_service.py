"""
Section persistence: listing and reconciliation of a company's page sections.
"""
from typing import List

from sqlalchemy.orm import Session

from careerpages.db.models.section import PageSection
from careerpages.schemas.section import SectionInput
from careerpages.services.reconcile import (
    ReconcileResult,
    plan_reconciliation,
    apply_reconciliation,
)


def list_sections(db: Session, company_id: int, visible_only: bool = False) -> List[PageSection]:
    query = db.query(PageSection).filter(PageSection.company_id == company_id)
    if visible_only:
        query = query.filter(PageSection.is_visible.is_(True))
    return query.order_by(PageSection.order.asc(), PageSection.id.asc()).all()


def reconcile_sections(db: Session, company_id: int, submitted: List[SectionInput]) -> ReconcileResult:
    persisted_ids = {
        row_id for (row_id,) in db.query(PageSection.id).filter(PageSection.company_id == company_id)
    }
    plan = plan_reconciliation(submitted, persisted_ids, label="section")
    return apply_reconciliation(db, PageSection, company_id, plan)
