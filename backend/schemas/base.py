"""Shared pydantic bases for request and response bodies.

Bodies travel as camelCase JSON. Request models also accept the snake_case
field names and reject anything they do not declare.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72


class ResponseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


def strip_email(value):
    """Trims raw email input before ``EmailStr`` checks the address."""
    if not isinstance(value, str):
        return value
    normalized = value.strip()
    if not normalized:
        raise ValueError("Email is required.")
    return normalized


def validate_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be {MAX_PASSWORD_BYTES} bytes or fewer.")
    return value


def validate_required_text(value: str, label: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError(f"{label} is required.")
    return normalized
