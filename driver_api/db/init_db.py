"""
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m driver_api.db.init_db
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from driver_api.db.session import ConnectionProvider
from driver_api.models import Base

logger = logging.getLogger(__name__)


def create_tables(provider: ConnectionProvider) -> None:
    """
    Create all tables declared on the models.
    Safe to call multiple times (existing tables are left alone).
    """
    try:
        Base.metadata.create_all(provider.engine)
        logger.info("Database schema initialized successfully.")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from driver_api.core.config import settings
    from driver_api.core.logging_setup import setup_logging

    setup_logging(settings)
    create_tables(ConnectionProvider(settings.DATABASE_URL))
