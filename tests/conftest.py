import pytest
from fastapi.testclient import TestClient

from driver_api.core.config import Settings
from driver_api.data_access import DriverRepository
from driver_api.db.init_db import create_tables
from driver_api.db.session import ConnectionProvider
from driver_api.main import create_app
from driver_api.services import DriverService


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'drivers.db'}"


@pytest.fixture
def provider(database_url):
    """Connection provider over a fresh database with the schema created."""
    provider = ConnectionProvider(database_url)
    create_tables(provider)
    yield provider
    provider.dispose()


@pytest.fixture
def empty_provider(tmp_path):
    """Connection provider over a database with no tables."""
    provider = ConnectionProvider(f"sqlite:///{tmp_path / 'empty.db'}")
    yield provider
    provider.dispose()


@pytest.fixture
def driver_repository(provider):
    return DriverRepository(provider)


@pytest.fixture
def driver_service(driver_repository):
    return DriverService(driver_repository)


@pytest.fixture
def test_settings(database_url):
    return Settings(DATABASE_URL=database_url, RANDOM_DRIVER_COUNT=10, DEFAULT_PAGE_SIZE=10)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def driver_payload():
    return {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "phone_number": "555-1234",
    }
