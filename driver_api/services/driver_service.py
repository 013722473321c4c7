"""
Business logic for drivers on top of the generic CRUD service:
random driver generation, alphabetized listing and name alphabetization.
"""

import logging
import random
import string
import threading
from typing import Optional

from driver_api.data_access.driver_repository import DriverRepository
from driver_api.models import Driver
from driver_api.schemas.driver_schemas import DriverCreate, DriverRead
from driver_api.services.base_service import BaseService
from driver_api.services.mapping import Mapper, driver_mapper

logger = logging.getLogger(__name__)

EMAIL_DOMAIN = "example.com"
PHONE_PREFIX = "555"


class LockedRandom:
    """A random.Random shared between threads; every draw holds the lock."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def choices(self, alphabet: str, length: int) -> str:
        with self._lock:
            return "".join(self._rng.choice(alphabet) for _ in range(length))


# One generator for the whole process, never reseeded per call
_shared_random = LockedRandom()


class DriverService(BaseService[DriverCreate, DriverRead, Driver]):
    def __init__(
        self,
        repository: DriverRepository,
        mapper: Optional[Mapper] = None,
        rng: Optional[LockedRandom] = None,
    ):
        super().__init__(repository, mapper or driver_mapper(), DriverRead)
        self.repository: DriverRepository = repository
        self.rng = rng or _shared_random

    def insert_random(self, count: int) -> int:
        """
        Generate `count` synthetic drivers and insert them as one batch.

        Returns:
            The number of drivers inserted.
        """
        drivers = [self._random_driver() for _ in range(count)]
        try:
            inserted = self.repository.insert_many(drivers)
        except Exception as e:
            logger.error(f"Service failed to insert {count} random drivers: {e}")
            raise
        logger.info(f"{inserted} random drivers inserted")
        return inserted

    def list_alphabetized(self) -> list[DriverRead]:
        try:
            drivers = self.repository.list_alphabetized()
        except Exception as e:
            logger.error(f"Service failed to list alphabetized drivers: {e}")
            raise
        return self.mapper.map_many(drivers, self.read_schema)

    @staticmethod
    def alphabetize_name(name: str) -> str:
        """Sort the characters of `name` by code point ("John" -> "Jhno")."""
        return "".join(sorted(name))

    def _random_driver(self) -> Driver:
        letters = string.ascii_uppercase
        return Driver(
            first_name=self.rng.choices(letters, 5),
            last_name=self.rng.choices(letters, 7),
            email=f"{self.rng.choices(letters, 5)}@{EMAIL_DOMAIN}",
            phone_number=f"{PHONE_PREFIX}-{self.rng.choices(string.digits, 4)}",
        )
