"""Password hashing helpers."""

from __future__ import annotations

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Return an argon2 hash of ``password``."""

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its stored hash."""

    return pwd_context.verify(plain_password, hashed_password)


__all__ = ["get_password_hash", "pwd_context", "verify_password"]
