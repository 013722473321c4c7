from fastapi import Depends, Request

from driver_api.core.config import Settings
from driver_api.data_access import DriverRepository
from driver_api.db.session import ConnectionProvider
from driver_api.services import DriverService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_connection_provider(request: Request) -> ConnectionProvider:
    return request.app.state.provider


def get_driver_service(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> DriverService:
    """A fresh repository/service pair per request over the app's connection provider."""
    return DriverService(DriverRepository(provider))
