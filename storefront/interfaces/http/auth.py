# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import g, request

from storefront.application.use_cases.users.verify_token import VerifyTokenUseCase
from storefront.shared.errors.base import AuthError
from storefront.shared.logging import logger


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def require_bearer_token(verify: VerifyTokenUseCase) -> Callable[[], None]:
    """Build a ``before_request`` hook that rejects calls without a valid token."""

    def _guard() -> None:
        if request.method == "OPTIONS":
            return
        try:
            claims = verify.execute(bearer_token())
        except AuthError as exc:
            logger.warning(
                f"Auth failed ({exc.code}) on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise

        g.user_id = claims.user_id
        g.user_email = claims.email
        logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")

    return _guard
