"""Credential Verifier - bcrypt hashing of identity secrets.

Invariants:
    - hash() is one-way; a fresh salt is generated per call
    - verify() re-hashes and compares, never decrypts
    - Strings are UTF-8 encoded before reaching bcrypt
    - A secret over bcrypt's 72-byte limit is a ValidationError, never a bare ValueError
    - A malformed stored hash verifies as False instead of raising
"""

import bcrypt

from neighborhood.core.errors import ValidationError

MAX_SECRET_BYTES = 72


class BcryptCredentials:
    """CredentialVerifier backed by bcrypt."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, secret: str) -> str:
        raw = secret.encode("utf-8")
        if len(raw) > MAX_SECRET_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_SECRET_BYTES} bytes", field="password",
            )
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(raw, salt).decode("utf-8")

    def verify(self, secret: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(secret.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
