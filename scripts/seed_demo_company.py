"""
Create the "techcorp" demo company with a published careers page.
Run: python -m scripts.seed_demo_company
"""
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session

from careerpages.db.session import SessionLocal
from careerpages.db.init_db import init_db
from careerpages.db.models.company import Company
from careerpages.db.models.job import JobType, LocationType
from careerpages.db.models.section import SectionType
from careerpages.db.models.user import User
from careerpages.schemas.auth import SignupRequest
from careerpages.services import publish_service
from careerpages.services.draft import EditorDraft
from careerpages.services.signup_service import signup
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_SLUG = "techcorp"
DEMO_EMAIL = "recruiter@techcorp.com"
DEMO_PASSWORD = "password123"

SECTIONS = [
    ("ABOUT", "About Us", 0, 0, 0,
     "<p>TechCorp Solutions is a leading technology company dedicated to creating innovative solutions "
     "that transform businesses. With over 10 years of experience, we pride ourselves on our cutting-edge "
     "technology and exceptional team culture.</p>"),
    ("CULTURE", "Life at TechCorp", 1, 1, 0,
     "<p>At TechCorp, we believe in work-life balance, continuous learning, and innovation. Our team members "
     "enjoy flexible working hours, remote work options, and a collaborative environment where ideas flourish.</p>"),
    ("BENEFITS", "Benefits & Perks", 2, 2, 0,
     "<ul><li>Competitive salary and equity packages</li><li>Health, dental, and vision insurance</li>"
     "<li>Flexible PTO policy</li><li>401k matching</li></ul>"),
    ("CUSTOM", "Work Environment", 3, 2, 1,
     "<ul><li>Remote work options</li><li>Learning and development budget</li>"
     "<li>Modern office with free snacks and drinks</li><li>Team building events</li></ul>"),
]

# title, department, location, location_type, job_type, salary
JOBS = [
    ("Full Stack Engineer", "Product", "Berlin, Germany", "REMOTE", "FULL_TIME", "AED 8K–12K / month"),
    ("UX Researcher", "Engineering", "Boston, United States", "HYBRID", "FULL_TIME", "USD 4K–6K / month"),
    ("Frontend Engineer", "Engineering", "Athens, Greece", "HYBRID", "PART_TIME", "USD 80K–120K / year"),
    ("Product Designer", "Operations", "Boston, United States", "ONSITE", "PART_TIME", "AED 12K–18K / month"),
    ("DevOps Engineer", "Customer Success", "Dubai, United Arab Emirates", "HYBRID", "CONTRACT", "USD 80K–120K / year"),
    ("AI Product Manager", "Operations", "Athens, Greece", "ONSITE", "INTERNSHIP", "INR 8L–15L / year"),
    ("Data Analyst", "Customer Success", "Dubai, United Arab Emirates", "ONSITE", "FULL_TIME", "AED 8K–12K / month"),
    ("Backend Developer", "Product", "Bangalore, India", "HYBRID", "PART_TIME", "USD 80K–120K / year"),
    ("QA Engineer", "Marketing", "Berlin, Germany", "HYBRID", "CONTRACT", "INR 8L–15L / year"),
    ("Technical Writer", "Sales", "Berlin, Germany", "ONSITE", "FULL_TIME", "SAR 10K–18K / month"),
]


def build_demo_page(db: Session) -> Company:
    """Sign up the demo tenant, then edit and publish its page through the editor draft."""
    company = signup(db, SignupRequest(
        company_name="TechCorp Solutions",
        company_slug=DEMO_SLUG,
        email=DEMO_EMAIL,
        password=DEMO_PASSWORD,
        name="John Admin",
    ))
    admin = db.query(User).filter(User.email == DEMO_EMAIL).first()

    draft = EditorDraft.from_bundle(publish_service.build_bundle(db, company))
    draft.update_company(description="Building the future of technology, one innovation at a time.")
    draft.update_theme(
        logo_url="https://via.placeholder.com/200x60/3B82F6/ffffff?text=TechCorp",
        banner_url="https://images.unsplash.com/photo-1497366216548-37526070297c?w=1200",
    )

    for entry in list(draft.sections):
        draft.remove_section(entry.key)
    for section_type, title, order, group, index, content in SECTIONS:
        key = draft.add_section(title=title, content=content, type=SectionType(section_type))
        draft.update_section(key, order=order, column_group=group, column_index=index)

    for title, department, location, location_type, job_type, salary in JOBS:
        draft.add_job(
            title=title,
            department=department,
            location=location,
            description=f"Join our {department} team as a {title} in {location}.",
            location_type=LocationType(location_type),
            job_type=JobType(job_type),
            requirements="Requirements: relevant experience and excellent communication skills.",
            salary=salary,
        )

    publish_service.publish(db, company, admin, draft.to_bundle())
    draft.mark_saved(publish_service.build_bundle(db, company))
    logger.info(f"Seeded company_id={company.id} with {len(draft.jobs)} jobs")
    return company


def seed_demo_company() -> bool:
    """Create and publish the demo company unless it already exists."""
    init_db()
    db = SessionLocal()
    try:
        if publish_service.get_company(db, DEMO_SLUG):
            logger.info(f"Company '{DEMO_SLUG}' already exists, nothing to do")
            return True

        build_demo_page(db)
        return True
    except Exception as e:
        db.rollback()
        logger.error(f"Seed failed: {e}", exc_info=True)
        return False
    finally:
        db.close()


if __name__ == "__main__":
    if seed_demo_company():
        print("\n[SUCCESS] Demo company ready")
        print(f"   Email: {DEMO_EMAIL}")
        print(f"   Password: {DEMO_PASSWORD}")
        print(f"   Visit: http://localhost:8000/{DEMO_SLUG}/careers")
    else:
        print("\n[ERROR] Failed to seed demo company")
        sys.exit(1)
