import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from driver_api import schemas
from driver_api.api import dependencies
from driver_api.core.config import Settings
from driver_api.services import DriverService

router = APIRouter(
    responses={
        400: {"model": schemas.response_schemas.ValidationErrorResponse, "description": "Invalid request"},
        500: {"model": schemas.response_schemas.ErrorResponse, "description": "Storage or unexpected error"},
    }
)
logger = logging.getLogger(__name__)


@router.post("/insert-random", response_model=schemas.response_schemas.MessageResponse)
def insert_random_drivers(
    service: DriverService = Depends(dependencies.get_driver_service),
    settings: Settings = Depends(dependencies.get_settings),
):
    """Insert a fixed number of randomly generated drivers."""
    count = service.insert_random(settings.RANDOM_DRIVER_COUNT)
    message = f"{count} random drivers inserted successfully"
    logger.info(message)
    return {"message": message}


@router.post(
    "",
    response_model=schemas.response_schemas.DriverCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_driver(
    driver_in: schemas.driver_schemas.DriverCreate,
    request: Request,
    response: Response,
    service: DriverService = Depends(dependencies.get_driver_service),
):
    """Create a new driver."""
    new_id = service.create(driver_in)
    response.headers["Location"] = request.app.url_path_for("get_driver", driver_id=new_id)
    logger.info(f"Driver created successfully with ID {new_id}")
    return {"message": "Driver created successfully", "id": new_id, "driver": driver_in}


@router.get("/alphabetized", response_model=schemas.response_schemas.DriverListResponse)
def get_drivers_alphabetized(
    service: DriverService = Depends(dependencies.get_driver_service),
):
    """List every driver ordered by first name, then last name."""
    drivers = service.list_alphabetized()
    logger.info("Drivers retrieved and alphabetized successfully")
    return {"message": "Drivers retrieved and alphabetized successfully", "drivers": drivers}


@router.get("/alphabetize-name", response_model=schemas.response_schemas.AlphabetizedNameResponse)
def alphabetize_name(
    name: str = Query(...),
    service: DriverService = Depends(dependencies.get_driver_service),
):
    """Sort the characters of a name by their code point."""
    alphabetized = service.alphabetize_name(name)
    logger.info("Name alphabetized successfully")
    return {"message": "Name alphabetized successfully", "alphabetized_name": alphabetized}


@router.get(
    "/{driver_id}",
    response_model=schemas.response_schemas.DriverResponse,
    responses={404: {"model": schemas.response_schemas.MessageResponse, "description": "Driver not found"}},
)
def get_driver(
    driver_id: int,
    service: DriverService = Depends(dependencies.get_driver_service),
):
    """Get driver by ID."""
    driver = service.get_by_id(driver_id)
    if driver is None:
        logger.warning(f"Driver not found with ID {driver_id}")
        return JSONResponse(status_code=404, content={"message": "Driver not found"})
    return {"message": "Driver retrieved successfully", "driver": driver}


@router.get("", response_model=schemas.response_schemas.DriverListResponse)
def get_drivers(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    service: DriverService = Depends(dependencies.get_driver_service),
    settings: Settings = Depends(dependencies.get_settings),
):
    """Get one page of drivers ordered by ID."""
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE
    drivers = service.get_all(page_number, page_size)
    return {"message": "Drivers retrieved successfully", "drivers": drivers}


@router.put("/{driver_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_driver(
    driver_id: int,
    driver_update: schemas.driver_schemas.DriverRead,
    service: DriverService = Depends(dependencies.get_driver_service),
):
    """Replace every field of a driver. The ID in the path wins over one in the body."""
    service.update(driver_id, driver_update)
    logger.info(f"Driver updated successfully with ID {driver_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{driver_id}", response_model=schemas.response_schemas.MessageResponse)
def delete_driver(
    driver_id: int,
    service: DriverService = Depends(dependencies.get_driver_service),
):
    """Delete driver."""
    service.delete(driver_id)
    logger.info(f"Driver deleted successfully with ID {driver_id}")
    return {"message": "Driver deleted successfully"}
