"""Unit tests for the argon2 password hasher."""

import pytest
from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError

from app.infrastructure.security import Argon2PasswordHasher


@pytest.fixture
def hasher() -> Argon2PasswordHasher:
    # Cheap parameters keep the suite fast
    return Argon2PasswordHasher(time_cost=1, memory_cost=1024, parallelism=1)


def test_hash_is_not_plain_text(hasher: Argon2PasswordHasher):
    hashed = hasher.hash("correct horse")
    assert hashed != "correct horse"
    assert hashed.startswith("$argon2id$")


def test_hash_is_salted(hasher: Argon2PasswordHasher):
    assert hasher.hash("same") != hasher.hash("same")


def test_hash_embeds_configured_parameters(hasher: Argon2PasswordHasher):
    assert "m=1024,t=1,p=1" in hasher.hash("correct horse")


def test_hash_verifies_with_argon2(hasher: Argon2PasswordHasher):
    hashed = hasher.hash("correct horse")

    assert PasswordHasher().verify(hashed, "correct horse") is True
    with pytest.raises(VerifyMismatchError):
        PasswordHasher().verify(hashed, "wrong horse")
