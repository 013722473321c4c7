import random
import re
import threading
from unittest.mock import Mock

import pytest

from driver_api.core.exceptions import StorageError
from driver_api.data_access import DriverRepository
from driver_api.models import Driver
from driver_api.schemas.driver_schemas import DriverCreate, DriverRead
from driver_api.services import DriverService
from driver_api.services.driver_service import LockedRandom
from driver_api.services.mapping import driver_mapper

FIRST_NAME = re.compile(r"^[A-Z]{5}$")
LAST_NAME = re.compile(r"^[A-Z]{7}$")
EMAIL = re.compile(r"^[A-Z]{5}@example\.com$")
PHONE = re.compile(r"^555-[0-9]{4}$")


@pytest.fixture
def mock_repository():
    repository = Mock(spec=DriverRepository)
    repository.model = Driver
    repository.identity_key = "id"
    return repository


@pytest.fixture
def service(mock_repository):
    return DriverService(mock_repository)


def assert_generated(driver):
    assert FIRST_NAME.match(driver.first_name)
    assert LAST_NAME.match(driver.last_name)
    assert EMAIL.match(driver.email)
    assert PHONE.match(driver.phone_number)


# --- alphabetize_name ---

@pytest.mark.parametrize(
    "name, expected",
    [
        ("John", "Jhno"),
        ("", ""),
        ("dcba", "abcd"),
        ("bBaA", "ABab"),
        ("Mary Ann", " AMannry"),
    ],
)
def test_alphabetize_name_sorts_by_code_point(name, expected):
    assert DriverService.alphabetize_name(name) == expected


# --- insert_random ---

def test_insert_random_sends_one_batch(service, mock_repository):
    mock_repository.insert_many.return_value = 10

    assert service.insert_random(10) == 10

    mock_repository.insert_many.assert_called_once()
    drivers = mock_repository.insert_many.call_args.args[0]
    assert len(drivers) == 10
    for driver in drivers:
        assert driver.id is None
        assert_generated(driver)


def test_insert_random_is_deterministic_for_a_seeded_generator(mock_repository):
    batches = []
    for _ in range(2):
        service = DriverService(mock_repository, rng=LockedRandom(random.Random(42)))
        service.insert_random(3)
        drivers = mock_repository.insert_many.call_args.args[0]
        batches.append([(d.first_name, d.last_name, d.email, d.phone_number) for d in drivers])
    assert batches[0] == batches[1]


def test_insert_random_propagates_storage_error(service, mock_repository):
    error = StorageError("An error occurred while inserting random drivers")
    mock_repository.insert_many.side_effect = error

    with pytest.raises(StorageError) as excinfo:
        service.insert_random(10)

    assert excinfo.value is error


def test_insert_random_adds_exactly_n_rows(driver_service, driver_repository):
    driver_service.insert_random(7)

    drivers = driver_repository.get_all(1, 100)
    assert len(drivers) == 7
    for driver in drivers:
        assert_generated(driver)


def test_insert_random_from_many_threads(driver_service, driver_repository):
    threads = [threading.Thread(target=driver_service.insert_random, args=(5,)) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(driver_repository.get_all(1, 100)) == 20


# --- list_alphabetized ---

def test_list_alphabetized_maps_to_read_schema(service, mock_repository):
    mock_repository.list_alphabetized.return_value = [
        Driver(id=1, first_name="John", last_name="Doe", email="john.doe@example.com", phone_number="555-1234")
    ]

    result = service.list_alphabetized()

    assert result == [
        DriverRead(id=1, first_name="John", last_name="Doe", email="john.doe@example.com", phone_number="555-1234")
    ]


def test_list_alphabetized_uses_configured_read_schema(mock_repository):
    class DriverSummary(DriverRead):
        pass

    mapper = driver_mapper()
    mapper.register(Driver, DriverSummary)
    service = DriverService(mock_repository, mapper)
    service.read_schema = DriverSummary
    mock_repository.list_alphabetized.return_value = [
        Driver(id=2, first_name="Amy", last_name="Baker", email="amy@example.com", phone_number="555-0000")
    ]

    result = service.list_alphabetized()

    assert [type(driver) for driver in result] == [DriverSummary]
    assert result[0].id == 2


# --- generic CRUD ---

def test_create_maps_and_returns_identity(service, mock_repository):
    mock_repository.create.return_value = 5
    dto = DriverCreate(first_name="John", last_name="Doe", email="john.doe@example.com", phone_number="555-1234")

    assert service.create(dto) == 5

    entity = mock_repository.create.call_args.args[0]
    assert isinstance(entity, Driver)
    assert entity.first_name == "John"


def test_get_by_id_missing_returns_none(service, mock_repository):
    mock_repository.get_by_id.return_value = None
    assert service.get_by_id(1) is None


def test_get_all_passes_paging_through(service, mock_repository):
    mock_repository.get_all.return_value = []
    assert service.get_all(3, 25) == []
    mock_repository.get_all.assert_called_once_with(3, 25)


def test_update_uses_path_identity(service, mock_repository):
    dto = DriverRead(id=999, first_name="Jane", last_name="Roe", email="jane@example.com", phone_number="555-4321")

    service.update(4, dto)

    entity = mock_repository.update.call_args.args[0]
    assert entity.id == 4
    assert entity.first_name == "Jane"


def test_delete_delegates(service, mock_repository):
    service.delete(8)
    mock_repository.delete.assert_called_once_with(8)


def test_repository_errors_propagate_unchanged(service, mock_repository):
    error = StorageError("An error occurred while deleting the Driver")
    mock_repository.delete.side_effect = error

    with pytest.raises(StorageError) as excinfo:
        service.delete(1)

    assert excinfo.value is error


# --- against a real store ---

def test_create_then_get_round_trip(driver_service):
    dto = DriverCreate(first_name="John", last_name="Doe", email="john.doe@example.com", phone_number="555-1234")

    new_id = driver_service.create(dto)
    found = driver_service.get_by_id(new_id)

    assert found.id == new_id
    assert found.model_dump(exclude={"id"}) == dto.model_dump()


def test_update_ignores_body_identity(driver_service):
    first = driver_service.create(
        DriverCreate(first_name="John", last_name="Doe", email="john.doe@example.com", phone_number="555-1234")
    )
    second = driver_service.create(
        DriverCreate(first_name="Mary", last_name="Major", email="mary@example.com", phone_number="555-2222")
    )

    driver_service.update(
        first,
        DriverRead(id=second, first_name="Jane", last_name="Roe", email="jane@example.com", phone_number="555-4321"),
    )

    assert driver_service.get_by_id(first).first_name == "Jane"
    assert driver_service.get_by_id(second).first_name == "Mary"


def test_delete_then_get_is_none(driver_service):
    new_id = driver_service.create(
        DriverCreate(first_name="John", last_name="Doe", email="john.doe@example.com", phone_number="555-1234")
    )
    driver_service.delete(new_id)
    assert driver_service.get_by_id(new_id) is None
