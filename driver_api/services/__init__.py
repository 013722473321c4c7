from .base_service import BaseService
from .driver_service import DriverService
from .mapping import Mapper, driver_mapper
