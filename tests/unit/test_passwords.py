"""Unit tests for bcrypt password hashing."""

from __future__ import annotations

from legit_city.api.passwords import hash_password, verify_password


def test_hash_uses_requested_cost_factor() -> None:
    hashed = hash_password("correct horse", rounds=10)

    assert hashed.startswith("$2b$10$")
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_hashes_are_salted() -> None:
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_malformed_hash_never_verifies() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_long_passwords_are_accepted() -> None:
    long_password = "x" * 200
    hashed = hash_password(long_password, rounds=4)

    assert verify_password(long_password, hashed)
