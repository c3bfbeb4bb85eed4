"""
Single access policy for every tenant-scoped operation.

Handlers call ``authorize(caller, company, action)`` instead of comparing
slugs and role strings themselves. The function returns ``None`` when the
action is allowed and raises one of the taxonomy errors otherwise.
"""
import enum
import logging
from typing import Optional

from careerpages.core.errors import AuthenticationRequired, AuthorizationDenied, NotFound
from careerpages.db.models.company import Company
from careerpages.db.models.user import User

logger = logging.getLogger(__name__)


class Action(str, enum.Enum):
    VIEW_PUBLIC = "view_public"
    EDIT_DRAFT = "edit_draft"
    PREVIEW = "preview"
    PUBLISH = "publish"
    COMMENT = "comment"
    VIEW_TEAM = "view_team"
    MANAGE_MEMBERS = "manage_members"
    EDIT_COMPANY_INFO = "edit_company_info"


EDITOR_ACTIONS = {
    Action.EDIT_DRAFT,
    Action.PREVIEW,
    Action.PUBLISH,
    Action.COMMENT,
    Action.VIEW_TEAM,
}

ADMIN_ACTIONS = {
    Action.MANAGE_MEMBERS,
    Action.EDIT_COMPANY_INFO,
}


def is_publicly_visible(company: Optional[Company]) -> bool:
    """
    A careers page is public only once it is published, has a publish
    timestamp and carries a snapshot to render.
    """
    return bool(
        company is not None
        and company.is_published
        and company.last_published_at is not None
        and company.published_snapshot
    )


def is_member(caller: Optional[User], company: Company) -> bool:
    return caller is not None and caller.company_id == company.id


def authorize(caller: Optional[User], company: Optional[Company], action: Action) -> None:
    """
    Decide whether ``caller`` may perform ``action`` on ``company``.

    Raises:
        NotFound: VIEW_PUBLIC of a missing or unpublished page
        AuthenticationRequired: editor/admin action without a session
        AuthorizationDenied: company missing or of another tenant, or role too low
    """
    if action == Action.VIEW_PUBLIC:
        if not is_publicly_visible(company):
            raise NotFound("Careers page not found")
        return

    if caller is None:
        raise AuthenticationRequired()

    # Same answer whether or not the company exists
    if company is None or not is_member(caller, company):
        logger.warning(
            f"Access denied: user_id={caller.id} company_id={company.id if company else None} action={action.value}"
        )
        raise AuthorizationDenied()

    if action not in EDITOR_ACTIONS and not caller.is_admin:
        logger.info(f"Admin action refused: user_id={caller.id} action={action.value}")
        raise AuthorizationDenied()
