"""Salts and password hashes."""

from __future__ import annotations

import hashlib
import hmac
import secrets

__all__ = ["generate_salt", "hash_password", "verify_password"]


def generate_salt(length: int) -> str:
    """Return ``length`` random bytes as upper-case hex."""
    if length < 0:
        raise ValueError("salt length must not be negative")
    return secrets.token_bytes(length).hex().upper()


def hash_password(password: str) -> str:
    """Return the SHA-512 digest of ``password`` as upper-case hex."""
    return hashlib.sha512(password.encode("utf-8")).hexdigest().upper()


def verify_password(password: str, hashed: str) -> bool:
    """Check ``password`` against a digest made by :func:`hash_password`."""
    return hmac.compare_digest(hash_password(password), hashed)