"""
Membership management for company admins.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from careerpages.core.access_policy import Action, authorize
from careerpages.core.auth_dependency import get_db, get_current_user_obj
from careerpages.core.errors import PersistenceFailure
from careerpages.db.models.user import User
from careerpages.schemas.user import MemberCreate, MemberListResponse, MemberResponse, RoleUpdate
from careerpages.services import membership_service
from careerpages.services.publish_service import get_company

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/companies", tags=["Users"])


@router.get("/{slug}/users", response_model=MemberListResponse)
def list_users(
    slug: str,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    company = get_company(db, slug)
    authorize(user, company, Action.MANAGE_MEMBERS)
    return MemberListResponse(users=membership_service.list_members(db, company))


@router.post("/{slug}/users", status_code=status.HTTP_201_CREATED, response_model=MemberResponse)
def add_user(
    slug: str,
    data: MemberCreate,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    company = get_company(db, slug)
    authorize(user, company, Action.MANAGE_MEMBERS)

    try:
        return membership_service.add_member(db, company, data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Adding member failed for company_id={company.id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure("Failed to create user")


@router.patch("/{slug}/users/{user_id}", response_model=MemberResponse)
def update_user_role(
    slug: str,
    user_id: int,
    data: RoleUpdate,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    company = get_company(db, slug)
    authorize(user, company, Action.MANAGE_MEMBERS)

    try:
        return membership_service.change_role(db, company, user_id, data.role)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Role change failed for user_id={user_id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure("Failed to update user")


@router.delete("/{slug}/users/{user_id}")
def delete_user(
    slug: str,
    user_id: int,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """Remove a member. Admins cannot remove themselves."""
    company = get_company(db, slug)
    authorize(user, company, Action.MANAGE_MEMBERS)

    try:
        membership_service.remove_member(db, company, user, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Removing member failed for user_id={user_id}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure("Failed to delete user")

    return {"success": True, "message": "User removed"}
