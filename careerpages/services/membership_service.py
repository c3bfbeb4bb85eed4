"""
Company membership management (admin only; access is checked by the caller).
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from careerpages.core.errors import NotFound, ValidationError
from careerpages.core.security import hash_password
from careerpages.db.models.company import Company
from careerpages.db.models.user import User, UserRole
from careerpages.schemas.user import MemberCreate

logger = logging.getLogger(__name__)


def list_members(db: Session, company: Company) -> List[User]:
    return (
        db.query(User)
        .filter(User.company_id == company.id)
        .order_by(User.created_at.asc(), User.id.asc())
        .all()
    )


def get_member(db: Session, company: Company, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id, User.company_id == company.id).first()
    if not user:
        raise NotFound("User not found")
    return user


def add_member(db: Session, company: Company, data: MemberCreate) -> User:
    email = data.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("User with this email already exists")

    user = User(
        company_id=company.id,
        email=email,
        name=data.name or email,
        password_hash=hash_password(data.password),
        role=data.role.value,
    )
    try:
        db.add(user)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info(f"Member added: company_id={company.id} user_id={user.id} role={user.role}")
    return user


def count_admins(db: Session, company: Company) -> int:
    return (
        db.query(User)
        .filter(User.company_id == company.id, User.role == UserRole.ADMIN.value)
        .count()
    )


def change_role(db: Session, company: Company, user_id: int, role: UserRole) -> User:
    """
    Raises:
        ValidationError: the change would leave the company without an admin
    """
    user = get_member(db, company, user_id)
    if user.is_admin and role != UserRole.ADMIN and count_admins(db, company) <= 1:
        raise ValidationError("A company needs at least one admin")

    try:
        user.role = role.value
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    logger.info(f"Member role changed: company_id={company.id} user_id={user.id} role={user.role}")
    return user


def remove_member(db: Session, company: Company, caller: User, user_id: int) -> None:
    """
    Raises:
        ValidationError: an admin tries to remove their own membership
    """
    user = get_member(db, company, user_id)
    if user.id == caller.id:
        raise ValidationError("You cannot remove yourself")

    try:
        db.delete(user)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Member removed: company_id={company.id} user_id={user_id} by={caller.id}")
