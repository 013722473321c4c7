import argparse
import logging

from driver_api.core.config import Settings, settings as default_settings
from driver_api.core.exceptions import StorageError
from driver_api.core.logging_setup import setup_logging
from driver_api.data_access import DriverRepository
from driver_api.db.init_db import create_tables
from driver_api.db.session import ConnectionProvider
from driver_api.services import DriverService

logger = logging.getLogger(__name__)

def seed_database(count: int, settings: Settings = default_settings) -> int:
    """Create the schema if needed and insert `count` random drivers."""
    provider = ConnectionProvider(settings.DATABASE_URL)
    try:
        create_tables(provider)
        service = DriverService(DriverRepository(provider))
        inserted = service.insert_random(count)
        logger.info(f"Seeding complete: {inserted} drivers inserted.")
        return inserted
    finally:
        provider.dispose()

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Insert random drivers into the database.")
    parser.add_argument("count", nargs="?", type=int, default=default_settings.RANDOM_DRIVER_COUNT)
    args = parser.parse_args(argv)

    setup_logging(default_settings)
    try:
        seed_database(args.count)
    except StorageError as e:
        logger.error(f"An error occurred during seeding: {e.details}")
        return 1
    return 0

if __name__ == "__main__":
    # python -m driver_api.seeds.initial_data [count]
    raise SystemExit(main())
