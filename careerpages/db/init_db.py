import logging

from careerpages.db.session import engine
from careerpages.db.base import Base

logger = logging.getLogger(__name__)


def init_db(bind=None):
    """Create all tables that do not exist yet (development / tests)."""
    # Registers every model on Base.metadata
    import careerpages.db.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")
