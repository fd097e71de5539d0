# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Base for business failures; subclasses override the class-level defaults."""

    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST
    default_message: ClassVar[str | None] = None

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code or self.default_code,
            status=status or self.default_status,
            message=message or self.default_message,
            context=context,
        )


class ValidationError(DomainError):
    default_code = "validation_error"
    default_status = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(DomainError):
    default_code = "conflict"
    default_status = HTTPStatus.CONFLICT


class AuthError(DomainError):
    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED


class NotFoundError(DomainError):
    default_code = "not_found"
    default_status = HTTPStatus.NOT_FOUND

