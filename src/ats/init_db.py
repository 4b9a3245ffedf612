"""Database initialization script."""

import logging

from ats.config import settings
from ats.database import Base, engine
from ats.logging_config import setup_logging

import ats.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def init_database() -> None:
    """
    Initialize the database by creating all tables.

    This function creates all tables defined in the models if they don't exist.
    It's safe to run multiple times as it won't recreate existing tables.
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created: %s", ", ".join(Base.metadata.tables.keys()))


if __name__ == "__main__":
    setup_logging(settings.log_level, settings.log_format)
    init_database()
