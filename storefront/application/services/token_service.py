# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from storefront.domain.users.entities import TokenClaims, User
from storefront.domain.users.exceptions import InvalidTokenError
from storefront.domain.users.repositories import TokenService


class JwtTokenService(TokenService):
    """Stateless tokens: validity is the signature plus the ``exp`` claim."""

    def __init__(
        self,
        *,
        secret: str,
        ttl_seconds: int,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._secret = secret
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, user: User) -> str:
        now = self._clock()
        payload = {
            "userId": user.id,
            "email": user.email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "userId"]},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

        user_id = payload.get("userId")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError()
        return TokenClaims(user_id=user_id, email=str(payload.get("email", "")))
