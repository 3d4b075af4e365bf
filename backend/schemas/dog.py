from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from backend.models.dog import Dog
from backend.models.user import User
from backend.schemas.base import RequestModel, ResponseModel, validate_required_text

DogStatusFilter = Literal["all", "pending", "approved", "rejected"]
DogGender = Literal["Male", "Female"]

UNKNOWN_OWNER_NAME = "Unknown"
MAX_DOG_AGE = 40


class CreateDogRequest(RequestModel):
    name: str
    breed: str
    age: int = Field(ge=0, le=MAX_DOG_AGE)
    gender: DogGender
    images: list[str] = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return validate_required_text(value, "Name")

    @field_validator("breed")
    @classmethod
    def validate_breed(cls, value: str) -> str:
        return validate_required_text(value, "Breed")

    @field_validator("images")
    @classmethod
    def validate_images(cls, value: list[str]) -> list[str]:
        normalized = [image.strip() for image in value]
        if any(not image for image in normalized):
            raise ValueError("Image references cannot be blank.")
        return normalized


class DogView(ResponseModel):
    id: int
    owner_id: int
    name: str
    breed: str
    age: int
    gender: str
    images: list[str]
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OwnerSummary(ResponseModel):
    name: str
    email: str | None = None
    avatar: str | None = None

    @classmethod
    def from_user(cls, user: User | None) -> "OwnerSummary":
        if user is None:
            return cls(name=UNKNOWN_OWNER_NAME)
        return cls(name=user.name, email=user.email, avatar=user.avatar or user.profile_image)


class AdminDogView(DogView):
    owner: OwnerSummary

    @classmethod
    def from_row(cls, dog: Dog, owner: User | None) -> "AdminDogView":
        view = DogView.model_validate(dog)
        return cls(**view.model_dump(), owner=OwnerSummary.from_user(owner))


class ModerationResponse(ResponseModel):
    message: str
    dog: DogView
