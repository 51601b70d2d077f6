"""bcrypt credentials - hashing, verification and the 72-byte input limit."""

import pytest

from neighborhood.core.errors import ValidationError
from neighborhood.infrastructure.credentials import BcryptCredentials


def test_hash_then_verify(credentials):
    hashed = credentials.hash("rahasia123")
    assert hashed != "rahasia123"
    assert credentials.verify("rahasia123", hashed)
    assert not credentials.verify("rahasia124", hashed)


def test_multibyte_secret_at_the_limit_round_trips(credentials):
    secret = "é" * 36
    assert credentials.verify(secret, credentials.hash(secret))


def test_secret_over_72_bytes_is_a_validation_error(credentials):
    with pytest.raises(ValidationError) as exc:
        credentials.hash("é" * 40)
    assert exc.value.http_status == 400


def test_malformed_stored_hash_does_not_verify():
    assert not BcryptCredentials(rounds=4).verify("rahasia123", "not-a-bcrypt-hash")
