"""
Comment threads attached to page anchors, with @mention extraction.

An anchor is either the id of a persisted section or the name of a page
region that is not a section row ("header", "footer", "jobs-list", ...).
Threads are visible to the owning company's collaborators only.
"""
import logging
import re
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from careerpages.core.access_policy import Action, authorize
from careerpages.core.errors import NotFound, ValidationError
from careerpages.db.models.comment import SectionComment
from careerpages.db.models.company import Company
from careerpages.db.models.section import PageSection
from careerpages.db.models.user import User

logger = logging.getLogger(__name__)

MENTION_TOKEN = re.compile(r"\w+")
WORD_CHAR = re.compile(r"\w")


def _roster_labels(roster: Iterable) -> List[Tuple[str, str]]:
    """(label, email) pairs for display names and emails, longest label first."""
    labels = []
    for member in roster:
        if member.name:
            labels.append((member.name, member.email))
        labels.append((member.email, member.email))
    labels.sort(key=lambda item: len(item[0]), reverse=True)
    return labels


def extract_mentions(content: str, roster: Iterable) -> List[str]:
    """
    Return the emails of teammates mentioned in ``content``.

    After each ``@`` the longest display name or email the text starts with
    wins, provided it ends on a word boundary, so multi-word names such as
    ``@Jane Doe`` resolve. Matching is exact. Anything else (``@ghost123``)
    stays literal text.
    """
    labels = _roster_labels(roster)
    mentions: List[str] = []

    position = content.find("@")
    while position != -1:
        rest = content[position + 1:]
        matched_length = 0
        for label, email in labels:
            if rest.startswith(label) and not WORD_CHAR.match(rest[len(label):len(label) + 1]):
                if email not in mentions:
                    mentions.append(email)
                matched_length = len(label)
                break
        if not matched_length:
            token = MENTION_TOKEN.match(rest)
            matched_length = len(token.group(0)) if token else 0
        position = content.find("@", position + 1 + matched_length)

    return mentions


def resolve_anchor(db: Session, section_id: str, caller: Optional[User]) -> Tuple[Company, str]:
    """
    Map a path anchor to (owning company, stored key) and check access.

    Raises:
        NotFound: numeric anchor without a section row
        AuthorizationDenied: section owned by another company
    """
    anchor = (section_id or "").strip()
    if not anchor:
        raise ValidationError("Section id is required")

    if anchor.isdigit():
        section = db.query(PageSection).filter(PageSection.id == int(anchor)).first()
        if not section:
            raise NotFound("Section not found")
        company = section.company
    else:
        company = caller.company if caller is not None else None

    authorize(caller, company, Action.COMMENT)
    return company, anchor


def list_comments(db: Session, company: Company, section_key: str) -> List[SectionComment]:
    return (
        db.query(SectionComment)
        .filter(SectionComment.company_id == company.id, SectionComment.section_key == section_key)
        .order_by(SectionComment.created_at.asc(), SectionComment.id.asc())
        .all()
    )


def add_comment(db: Session, company: Company, section_key: str, author: User, content: str) -> SectionComment:
    if not content or not content.strip():
        raise ValidationError("Comment cannot be empty")

    roster = db.query(User).filter(User.company_id == company.id).all()
    mentions = extract_mentions(content, roster)

    comment = SectionComment(
        company_id=company.id,
        section_key=section_key,
        user_email=author.email,
        user_name=author.display_name,
        content=content,
        mentions=mentions or None,
    )
    try:
        db.add(comment)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(comment)

    logger.info(
        f"Comment added: comment_id={comment.id} company_id={company.id} "
        f"section={section_key} mentions={len(mentions)}"
    )
    return comment
