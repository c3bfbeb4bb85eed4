"""
Shared fixtures: in-memory database, API client, two tenants with users.
"""
import os

# No log files during tests
os.environ.setdefault("LOG_DIR", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from careerpages.main import app
from careerpages.db.base import Base
from careerpages.db.models.user import User, UserRole
from careerpages.core.auth_dependency import get_db
from careerpages.core.rate_limit import reset_rate_limits
from careerpages.core.security import hash_password, create_session_token
from careerpages.schemas.auth import SignupRequest
from careerpages.services.signup_service import signup


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


# Override the database dependency
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test."""
    import careerpages.db.models  # noqa: F401
    Base.metadata.create_all(bind=test_engine)
    reset_rate_limits()
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    """Provide a database session for tests."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_session_token(user)}"}


def create_company(db, company_name: str, slug: str, email: str, name: str = None):
    company = signup(db, SignupRequest(
        company_name=company_name,
        company_slug=slug,
        email=email,
        password="testpass123",
        name=name,
    ))
    admin = db.query(User).filter(User.email == email).first()
    return company, admin


def create_member(db, company, email: str, name: str = None, role: UserRole = UserRole.EDITOR) -> User:
    user = User(
        company_id=company.id,
        email=email,
        name=name,
        password_hash=hash_password("testpass123"),
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def acme(db_session):
    """Company "acme" with admin Alice Admin."""
    company, _ = create_company(db_session, "Acme", "acme", "alice@acme.com", name="Alice Admin")
    return company


@pytest.fixture
def acme_admin(db_session, acme):
    return db_session.query(User).filter(User.email == "alice@acme.com").first()


@pytest.fixture
def acme_editor(db_session, acme):
    return create_member(db_session, acme, "eddie@acme.com", name="Eddie Editor")


@pytest.fixture
def globex(db_session):
    """A second, unrelated tenant."""
    company, _ = create_company(db_session, "Globex", "globex", "gina@globex.com", name="Gina")
    return company


@pytest.fixture
def globex_admin(db_session, globex):
    return db_session.query(User).filter(User.email == "gina@globex.com").first()


@pytest.fixture
def admin_headers(acme_admin):
    return auth_headers(acme_admin)


@pytest.fixture
def editor_headers(acme_editor):
    return auth_headers(acme_editor)


@pytest.fixture
def globex_headers(globex_admin):
    return auth_headers(globex_admin)


@pytest.fixture
def make_member(db_session):
    """Factory adding a user to a company."""
    def factory(company, email: str, name: str = None, role: UserRole = UserRole.EDITOR) -> User:
        return create_member(db_session, company, email, name=name, role=role)
    return factory
