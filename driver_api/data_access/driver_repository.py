import logging
from typing import Iterable

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from driver_api.data_access.base_repository import BaseRepository
from driver_api.db.session import ConnectionProvider
from driver_api.models import Driver

logger = logging.getLogger(__name__)


class DriverRepository(BaseRepository[Driver]):
    def __init__(self, provider: ConnectionProvider):
        super().__init__(Driver, provider)

    def insert_many(self, drivers: Iterable[Driver]) -> int:
        """
        Insert all drivers in one batched statement.
        The batch runs in a single transaction, so a failure leaves no rows behind.
        """
        rows = [self._values(driver) for driver in drivers]
        if not rows:
            return 0
        try:
            with self.provider.begin() as conn:
                conn.execute(insert(self.table), rows)
        except SQLAlchemyError as e:
            raise self._storage_error("inserting random drivers", e) from e
        logger.info(f"Inserted {len(rows)} drivers")
        return len(rows)

    def list_alphabetized(self) -> list[Driver]:
        """All drivers by first name, then last name; id breaks remaining ties."""
        c = self.table.c
        stmt = select(self.table).order_by(c.first_name, c.last_name, c.id)
        try:
            with self.provider.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            raise self._storage_error(
                "retrieving and alphabetizing the drivers", e
            ) from e
        return [self._to_entity(row) for row in rows]
