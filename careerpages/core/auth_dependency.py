from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from careerpages.core.errors import AuthenticationRequired
from careerpages.core.security import decode_access_token
from careerpages.db.session import SessionLocal
from careerpages.db.models.user import User

# auto_error=False so a missing token reaches our own AuthenticationRequired,
# which page routes turn into a login redirect.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """Get current user email from JWT token."""
    if not token:
        raise AuthenticationRequired()

    payload = decode_access_token(token)
    email = payload.get("sub") if payload else None
    if email is None:
        raise AuthenticationRequired("Invalid token")

    return email


def get_current_user_obj(
    email: str = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> User:
    """
    Get current User object from JWT token.

    The user is reloaded on every request so that role changes and removals
    take effect without waiting for the token to expire.
    """
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise AuthenticationRequired("Session is no longer valid")
    return user
