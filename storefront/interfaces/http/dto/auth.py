# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator, validate_email
from pydantic_core import PydanticCustomError

from storefront.domain.users.entities import User


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class RegisterRequestDTO(BaseModel):
    username: str
    email: str
    password: str

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict) or any(
            _is_blank(data.get(field)) for field in ("username", "email", "password")
        ):
            raise PydanticCustomError(
                "missing",
                "Username, email, and password are required",
            )
        return data

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        value = value.strip()
        if not 3 <= len(value) <= 30:
            raise PydanticCustomError(
                "username_length",
                "Username must be between 3 and 30 characters",
                {"min_length": 3, "max_length": 30},
            )
        return value

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, value: str) -> str:
        value = value.strip().lower()
        try:
            validate_email(value)
        except PydanticCustomError:
            raise PydanticCustomError(
                "email_invalid",
                "Please enter a valid email address",
            ) from None
        return value

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value) < 6:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least 6 characters long",
                {"min_length": 6},
            )
        return value


class LoginRequestDTO(BaseModel):
    email: str
    password: str  # no strength check on login

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict) or any(
            _is_blank(data.get(field)) for field in ("email", "password")
        ):
            raise PydanticCustomError("missing", "Email and password are required")
        return data

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class PublicUserDTO(BaseModel):
    """Fields of a user that are safe to hand back to clients."""

    id: int
    username: str
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_entity(cls, user: User) -> PublicUserDTO:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


class AuthSuccessDTO(BaseModel):
    message: str
    token: str
    user: PublicUserDTO
