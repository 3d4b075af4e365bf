from datetime import datetime
from typing import Literal

from pydantic import EmailStr, field_validator, model_validator

from backend.models.user import User
from backend.schemas.base import (
    RequestModel,
    ResponseModel,
    strip_email,
    validate_password,
    validate_required_text,
)

UserRole = Literal["user", "admin"]
UserStatus = Literal["active", "suspended", "pending"]


class RegisterRequest(RequestModel):
    name: str
    email: EmailStr
    password: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return validate_required_text(value, "Name")

    @field_validator("email", mode="before")
    @classmethod
    def strip_email_address(cls, value):
        return strip_email(value)

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, value: str) -> str:
        return validate_password(value)


class LoginRequest(RequestModel):
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def strip_email_address(cls, value):
        return strip_email(value)

    @field_validator("password")
    @classmethod
    def validate_password_present(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required.")
        return value


class ProfileUpdateRequest(RequestModel):
    """Partial profile update. Only fields present in the body are applied."""

    name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    password: str | None = None
    confirm_password: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return validate_required_text(value, "Name")

    @field_validator("email", mode="before")
    @classmethod
    def strip_email_address(cls, value):
        return strip_email(value)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip()

    @field_validator("password")
    @classmethod
    def validate_new_password(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return validate_password(value)

    @model_validator(mode="after")
    def check_passwords_match(self) -> "ProfileUpdateRequest":
        if self.confirm_password is not None and self.password != self.confirm_password:
            raise ValueError("Passwords do not match.")
        return self

    def changes(self) -> dict[str, str]:
        updates = self.model_dump(exclude_unset=True, exclude={"confirm_password"})
        return {field: value for field, value in updates.items() if value is not None}


class UserStatusUpdateRequest(RequestModel):
    status: UserStatus


class NotificationPreferences(ResponseModel):
    email: bool = True
    push: bool = True


class Subscription(ResponseModel):
    plan: str = "free"
    expires_at: datetime | None = None


class UserView(ResponseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    role: str
    status: str
    avatar: str | None = None
    profile_image: str | None = None
    dog_ids: list[int] = []
    notification_preferences: NotificationPreferences
    subscription: Subscription
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            status=user.status,
            avatar=user.avatar,
            profile_image=user.profile_image,
            dog_ids=[dog.id for dog in user.dogs],
            notification_preferences=NotificationPreferences(
                email=user.email_notifications,
                push=user.push_notifications,
            ),
            subscription=Subscription(
                plan=user.subscription_plan,
                expires_at=user.subscription_expires_at,
            ),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(ResponseModel):
    token: str
    user: UserView


class IdentityResponse(ResponseModel):
    id: int
    email: str
    role: str


class AdminProfileResponse(ResponseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    role: str
