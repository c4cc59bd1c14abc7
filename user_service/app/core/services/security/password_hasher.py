"""One-way password hashing."""

from typing import Protocol

import bcrypt

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordHasher(Protocol):
    def hash(self, plaintext: str) -> str: ...

    def verify(self, plaintext: str, digest: str) -> bool: ...


class BcryptPasswordHasher:
    """bcrypt with a per-digest random salt.

    Two hashes of the same plaintext differ; use ``verify`` to compare.
    Passwords longer than 72 bytes (UTF-8) are rejected with ``ValueError``
    instead of being silently truncated.
    """

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        secret = plaintext.encode("utf-8")
        if len(secret) > MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password exceeds {MAX_PASSWORD_BYTES} bytes ({len(secret)} bytes)"
            )
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(secret, salt).decode("ascii")

    def verify(self, plaintext: str, digest: str) -> bool:
        secret = plaintext.encode("utf-8")
        if len(secret) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(secret, digest.encode("ascii"))
        except ValueError:
            # Not a bcrypt digest.
            return False
