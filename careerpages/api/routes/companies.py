"""
Editor endpoints: draft bundle, save, publish, team roster and theme media.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from sqlalchemy.orm import Session

from careerpages.core.access_policy import Action, authorize
from careerpages.core.auth_dependency import get_db, get_current_user_obj
from careerpages.core.errors import PersistenceFailure
from careerpages.db.models.user import User
from careerpages.schemas.company import CompanyBundleResponse, DraftBundle, PublishStatusResponse
from careerpages.schemas.theme import MediaUploadResponse
from careerpages.schemas.user import TeamMember
from careerpages.services import publish_service
from careerpages.services.media_service import to_data_url
from careerpages.services.membership_service import list_members

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.get("/{slug}", response_model=CompanyBundleResponse)
def get_company_bundle(
    slug: str,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """Full draft: all sections (hidden too), all jobs (inactive too) and the draft version."""
    company = publish_service.get_company(db, slug)
    authorize(user, company, Action.EDIT_DRAFT)
    return publish_service.build_bundle(db, company)


@router.put("/{slug}", response_model=CompanyBundleResponse)
def save_company_bundle(
    slug: str,
    bundle: DraftBundle,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """
    Save the editor bundle as the new draft.

    Publish state and the published snapshot are left untouched.
    """
    company = publish_service.get_company(db, slug)
    authorize(user, company, Action.EDIT_DRAFT)

    try:
        publish_service.save_draft(db, company, bundle, user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Draft save failed for company_id={company.id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure()

    return publish_service.build_bundle(db, company)


@router.post("/{slug}/publish", response_model=PublishStatusResponse)
def publish_company(
    slug: str,
    request: Request,
    bundle: Optional[DraftBundle] = None,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """
    Publish the page. When a bundle is sent it is saved first, in the same
    transaction; without one the stored draft is republished.
    """
    company = publish_service.get_company(db, slug)
    authorize(user, company, Action.PUBLISH)

    try:
        publish_service.publish(db, company, user, bundle)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Publish failed for company_id={company.id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure()

    return publish_service.publish_status(company, str(request.base_url))


@router.post("/{slug}/unpublish", response_model=PublishStatusResponse)
def unpublish_company(
    slug: str,
    request: Request,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    company = publish_service.get_company(db, slug)
    authorize(user, company, Action.PUBLISH)

    try:
        publish_service.unpublish(db, company, user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unpublish failed for company_id={company.id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure()

    return publish_service.publish_status(company, str(request.base_url))


@router.get("/{slug}/team", response_model=List[TeamMember])
def get_team(
    slug: str,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """Roster used by the editor to suggest @mentions."""
    company = publish_service.get_company(db, slug)
    authorize(user, company, Action.VIEW_TEAM)
    return list_members(db, company)


@router.post("/{slug}/theme/media", response_model=MediaUploadResponse)
async def upload_theme_media(
    slug: str,
    kind: str = Form(..., description="logo, banner or video"),
    file: UploadFile = File(...),
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """
    Turn an uploaded image or video into a data URL for the theme.

    Nothing is stored; the editor puts the returned URL into the theme and
    saves it with the rest of the draft.
    """
    company = publish_service.get_company(db, slug)
    authorize(user, company, Action.EDIT_COMPANY_INFO if kind == "logo" else Action.EDIT_DRAFT)

    content = await file.read()
    data_url = to_data_url(content, file.content_type, kind)

    return MediaUploadResponse(
        kind=kind,
        content_type=file.content_type,
        size_bytes=len(content),
        data_url=data_url,
    )
