# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors.base import AuthError, ConflictError


class UserAlreadyExistsError(ConflictError):
    default_code = "user_already_exists"
    default_message = "User with this email or username already exists"


class InvalidCredentialsError(AuthError):
    default_code = "invalid_credentials"
    default_message = "Invalid email or password"


class MissingTokenError(AuthError):
    default_code = "token_required"
    default_message = "Access token required"


class InvalidTokenError(AuthError):
    default_code = "invalid_token"
    default_message = "Invalid or expired token"
