"""
Comment threads anchored to page sections or page regions.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from careerpages.core.auth_dependency import get_db, get_current_user_obj
from careerpages.core.errors import PersistenceFailure
from careerpages.db.models.user import User
from careerpages.schemas.comment import CommentCreate, CommentResponse
from careerpages.services import comment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sections", tags=["Comments"])


@router.get("/{section_id}/comments", response_model=List[CommentResponse])
def get_comments(
    section_id: str,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    """Thread for a section id or a region such as "header", oldest first."""
    company, key = comment_service.resolve_anchor(db, section_id, user)
    return comment_service.list_comments(db, company, key)


@router.post("/{section_id}/comments", status_code=status.HTTP_201_CREATED, response_model=CommentResponse)
def post_comment(
    section_id: str,
    data: CommentCreate,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db)
):
    company, key = comment_service.resolve_anchor(db, section_id, user)

    try:
        return comment_service.add_comment(db, company, key, user, data.content)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Comment failed on anchor={key}: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure("Failed to create comment")
