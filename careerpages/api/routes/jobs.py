"""
Bulk job import from CSV.
"""
import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from careerpages.core.access_policy import Action, authorize
from careerpages.core.auth_dependency import get_db, get_current_user_obj
from careerpages.core.errors import PersistenceFailure
from careerpages.db.models.user import User
from careerpages.schemas.job import BulkUploadResponse
from careerpages.services.bulk_import_service import import_jobs
from careerpages.services.publish_service import get_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["Jobs"])


@router.post("/bulk-upload", response_model=BulkUploadResponse)
async def bulk_upload(
    company_slug: str = Form(...),
    file: UploadFile = File(...),
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """
    Import jobs from a CSV file.

    Required columns: title, work_policy, location, department. Any row
    missing one rejects the whole file; rows duplicating an existing job
    are skipped.
    """
    company = get_company(db, company_slug)
    authorize(user, company, Action.EDIT_DRAFT)

    raw = await file.read()

    try:
        result = import_jobs(db, company, raw)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Bulk upload failed for company_id={company.id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure("Failed to upload jobs")

    message = f"Successfully uploaded {result.created} jobs"
    if result.skipped:
        message += f" ({result.skipped} duplicates skipped)"

    return BulkUploadResponse(
        success=True,
        count=result.created,
        skipped=result.skipped,
        message=message,
    )
