# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for checking bearer tokens on protected routes."""

from __future__ import annotations

from storefront.domain.users.entities import TokenClaims
from storefront.domain.users.exceptions import MissingTokenError
from storefront.domain.users.repositories import TokenService


class VerifyTokenUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> TokenClaims:
        if not token:
            raise MissingTokenError()
        return self._tokens.decode(token)
