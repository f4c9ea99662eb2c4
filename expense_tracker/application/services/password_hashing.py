# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Salted password hashes for stored user accounts."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from expense_tracker.domain.users.repositories import PasswordHasher

# werkzeug default
DEFAULT_METHOD = "scrypt"


class WerkzeugPasswordHasher(PasswordHasher):
    """Adapts ``werkzeug.security`` to the ``PasswordHasher`` protocol.

    The hash string embeds method and salt, so ``verify`` keeps working for
    hashes produced with an older ``method``.
    """

    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        return check_password_hash(hashed, password)
