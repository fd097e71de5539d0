# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from storefront.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
        existing = self._users.find_by_email_or_username(email, username)
        if existing:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=now,
            updated_at=now,
        )
        # Raises UserAlreadyExistsError when the store's unique index rejects a racing insert.
        persisted = self._users.add(user)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, self._tokens.issue(persisted)
