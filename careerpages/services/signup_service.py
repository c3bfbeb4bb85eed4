"""
Account bootstrap: company + admin user + default theme + default sections.

All four are written in one transaction; a failure at any step rolls back
everything so no half-created company is ever visible.
"""
import logging

from sqlalchemy.orm import Session

from careerpages.core.errors import ValidationError
from careerpages.core.security import hash_password
from careerpages.db.models.company import Company
from careerpages.db.models.section import PageSection, SectionLayout, SectionType
from careerpages.db.models.theme import CompanyTheme
from careerpages.db.models.user import User, UserRole
from careerpages.schemas.auth import SignupRequest
from careerpages.utils.slug import create_slug, is_reserved

logger = logging.getLogger(__name__)


def create_default_theme(db: Session, company: Company) -> CompanyTheme:
    theme = CompanyTheme(company_id=company.id)
    db.add(theme)
    db.flush()
    return theme


def create_default_sections(db: Session, company: Company) -> None:
    defaults = [
        (SectionType.ABOUT, "About Us", f"<p>Welcome to {company.name}! Add your company story here.</p>"),
        (SectionType.CULTURE, "Our Culture", "<p>Describe your company culture and values here.</p>"),
        (SectionType.BENEFITS, "Benefits & Perks", "<p>List your company benefits and perks here.</p>"),
    ]
    for position, (section_type, title, content) in enumerate(defaults):
        db.add(PageSection(
            company_id=company.id,
            type=section_type.value,
            title=title,
            content=content,
            layout=SectionLayout.FULL_WIDTH.value,
            order=position + 1,
            column_group=position,
            column_index=0,
            is_visible=True,
        ))
    db.flush()


def signup(db: Session, request: SignupRequest) -> Company:
    """
    Create a tenant and its first admin.

    Raises:
        ValidationError: slug unusable or taken, email already registered
    """
    slug = create_slug(request.company_slug)
    if not slug or is_reserved(slug):
        raise ValidationError("Please choose a different company URL.")

    if db.query(Company).filter(Company.slug == slug).first():
        raise ValidationError("This company URL is already taken. Please choose another.")

    email = request.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("This email is already registered")

    try:
        company = Company(
            slug=slug,
            name=request.company_name,
            description=f"Welcome to {request.company_name}! We're excited to have you join our team.",
        )
        db.add(company)
        db.flush()

        db.add(User(
            company_id=company.id,
            email=email,
            password_hash=hash_password(request.password),
            name=request.name or request.company_name,
            role=UserRole.ADMIN.value,
        ))
        db.flush()

        create_default_theme(db, company)
        create_default_sections(db, company)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Signup rolled back for slug={slug}", exc_info=True)
        raise

    db.refresh(company)
    logger.info(f"Company created: company_id={company.id} slug={company.slug}")
    return company
