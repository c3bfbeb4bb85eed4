import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from careerpages.core.auth_dependency import get_db, get_current_user_obj
from careerpages.core.errors import PersistenceFailure
from careerpages.core.rate_limit import rate_limited
from careerpages.core.security import verify_password, create_session_token
from careerpages.db.models.user import User
from careerpages.schemas.auth import MeResponse, SignupRequest, SignupResponse, TokenResponse
from careerpages.services import signup_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=SignupResponse,
    dependencies=[Depends(rate_limited("signup"))],
)
def signup(request: SignupRequest, db: Session = Depends(get_db)):
    """
    Create a company with its first admin, default theme and default sections.
    """
    try:
        company = signup_service.signup(db, request)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Signup failed: {type(e).__name__}", exc_info=True)
        raise PersistenceFailure("Failed to create account. Please try again.")

    return SignupResponse(
        success=True,
        company_slug=company.slug,
        message="Account created successfully",
    )


# Swagger sends "username", we treat it as email
@router.post(
    "/login",
    response_model=TokenResponse,
    dependencies=[Depends(rate_limited("login"))],
)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    user = db.query(User).filter(User.email == form_data.username.strip().lower()).first()

    if not user or not verify_password(form_data.password, user.password_hash):
        logger.info("Login failed: invalid credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"Login: user_id={user.id} company_id={user.company_id}")
    return TokenResponse(
        access_token=create_session_token(user),
        token_type="bearer",
        company_slug=user.company.slug,
        role=user.role,
    )


@router.get("/me", response_model=MeResponse)
def me(user: User = Depends(get_current_user_obj)):
    return MeResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        company_slug=user.company.slug,
    )
