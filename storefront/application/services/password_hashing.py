# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Salted password hashes for stored users."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from storefront.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Hashes with a werkzeug method string such as ``scrypt`` or ``pbkdf2:sha256``.

    Verification reads the method back from the stored hash, so rows written
    under an older method keep working after ``PASSWORD_HASH_METHOD`` changes.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return check_password_hash(hashed, password)
        except ValueError:
            # unknown method prefix in a stored hash
            return False
