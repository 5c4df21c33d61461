"""Password hashing helpers built on bcrypt."""

from __future__ import annotations

import bcrypt

# bcrypt only reads the first 72 bytes of a secret
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, *, rounds: int = 10) -> str:
    """Return a salted bcrypt hash of ``password`` using the given cost factor."""

    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
    except ValueError:
        # Malformed or foreign hash stored for this user.
        return False
