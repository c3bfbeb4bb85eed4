"""
Create/update/delete-by-absence reconciliation shared by sections and jobs.

The editor submits the complete desired list. Entries without an id are new,
entries with an id already exist; persisted rows whose id is not submitted
are deleted. Existing rows are updated unconditionally.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Set

from sqlalchemy.orm import Session

from careerpages.core.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewEntry:
    fields: Dict[str, Any]


@dataclass(frozen=True)
class ExistingEntry:
    id: int
    fields: Dict[str, Any]


@dataclass
class ReconcilePlan:
    new: List[NewEntry] = field(default_factory=list)
    existing: List[ExistingEntry] = field(default_factory=list)
    deleted_ids: Set[int] = field(default_factory=set)


@dataclass
class ReconcileResult:
    created_ids: List[int] = field(default_factory=list)
    updated_ids: List[int] = field(default_factory=list)
    deleted_ids: List[int] = field(default_factory=list)


def plan_reconciliation(submitted: Iterable, persisted_ids: Set[int], label: str) -> ReconcilePlan:
    """
    Split submitted pydantic entries into new/existing and compute deletions.

    Raises:
        ValidationError: an id is submitted twice or does not belong to the company
    """
    plan = ReconcilePlan()
    seen: Set[int] = set()

    for entry in submitted:
        fields = entry.model_dump(mode="json", exclude={"id"})
        if entry.id is None:
            plan.new.append(NewEntry(fields=fields))
            continue
        if entry.id in seen:
            raise ValidationError(f"Duplicate {label} id {entry.id} in request")
        if entry.id not in persisted_ids:
            raise ValidationError(f"Unknown {label} id {entry.id}")
        seen.add(entry.id)
        plan.existing.append(ExistingEntry(id=entry.id, fields=fields))

    plan.deleted_ids = set(persisted_ids) - seen
    return plan


def apply_reconciliation(db: Session, model, company_id: int, plan: ReconcilePlan) -> ReconcileResult:
    """Apply a plan to ``model`` rows of one company. Flushes, does not commit."""
    rows = {
        row.id: row
        for row in db.query(model).filter(model.company_id == company_id).all()
    }
    result = ReconcileResult()

    for row_id in sorted(plan.deleted_ids):
        db.delete(rows[row_id])
        result.deleted_ids.append(row_id)

    for entry in plan.existing:
        row = rows[entry.id]
        for name, value in entry.fields.items():
            setattr(row, name, value)
        result.updated_ids.append(entry.id)

    created = []
    for entry in plan.new:
        row = model(company_id=company_id, **entry.fields)
        db.add(row)
        created.append(row)

    db.flush()
    result.created_ids = [row.id for row in created]

    logger.debug(
        f"Reconciled {model.__tablename__}: company_id={company_id} "
        f"created={len(result.created_ids)} updated={len(result.updated_ids)} deleted={len(result.deleted_ids)}"
    )
    return result
