import re
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Digits with an optional leading '+', separated by spaces, dots, dashes or parentheses
PHONE_PATTERN = re.compile(r"\+?[0-9(). \-]{7,20}")
MIN_PHONE_DIGITS = 7

# --- Driver Schemas ---

class DriverBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=255)
    phone_number: str = Field(..., max_length=20)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        """Checks the address but stores it exactly as sent (no normalization)."""
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email address: {e}") from e
        return value

    @field_validator("phone_number")
    @classmethod
    def phone_shape(cls, value: str) -> str:
        digits = sum(ch.isdigit() for ch in value)
        if not PHONE_PATTERN.fullmatch(value) or digits < MIN_PHONE_DIGITS:
            raise ValueError("Invalid phone number")
        return value

class DriverCreate(DriverBase):
    """Schema for creating new Driver."""

class DriverRead(DriverBase):
    """Schema for reading Driver data. On update the id is ignored in favor of the path."""
    id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
