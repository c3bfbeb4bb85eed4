"""
Error taxonomy for the careers page builder.

Every error is an HTTPException so it can be raised from services and routes
alike and is rendered by FastAPI with the matching status code. Messages for
403/404 are deliberately generic so tenant existence is not leaked.
"""
from typing import Any, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from careerpages.core.config import LOGIN_URL


class ValidationError(HTTPException):
    """Missing or malformed input; the detail names the field or rows."""

    def __init__(self, detail: Any):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthenticationRequired(HTTPException):
    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationDenied(HTTPException):
    def __init__(self, detail: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DraftConflict(HTTPException):
    """The draft was saved by someone else since the caller loaded it."""

    def __init__(self, current_version: int, submitted_version: Optional[int]):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "error": "draft_conflict",
                "message": "This page was changed by someone else. Reload to get the latest version.",
                "current_version": current_version,
                "submitted_version": submitted_version,
            },
        )


class PersistenceFailure(HTTPException):
    def __init__(self, detail: str = "Something went wrong while saving. Please try again."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api")


async def authentication_required_handler(request: Request, exc: AuthenticationRequired):
    """
    API callers get a 401; page routes (preview) are sent to the login page.
    """
    if is_api_request(request):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )
    return RedirectResponse(
        url=f"{LOGIN_URL}?next={request.url.path}",
        status_code=status.HTTP_303_SEE_OTHER,
    )
