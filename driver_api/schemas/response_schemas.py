from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .driver_schemas import DriverCreate, DriverRead

class MessageResponse(BaseModel):
    """Envelope for requests that only report an outcome."""
    message: str

class ErrorResponse(MessageResponse):
    """Schema for 500 responses: the error message and the underlying cause."""
    details: Optional[str] = None

class ValidationErrorResponse(MessageResponse):
    errors: List[Any] = Field(default_factory=list)

class DriverCreatedResponse(MessageResponse):
    id: int
    driver: DriverCreate

class DriverResponse(MessageResponse):
    driver: DriverRead

class DriverListResponse(MessageResponse):
    drivers: List[DriverRead]

class AlphabetizedNameResponse(MessageResponse):
    alphabetized_name: str
