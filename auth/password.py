"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.  The password is first reduced to
base64(SHA-256(password)) so every byte of it counts, not just the first
72 that bcrypt reads.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from config.settings import config


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with bcrypt (auto-salted, work factor from config)."""
    salt = bcrypt.gensalt(rounds=rounds or config.bcrypt_rounds)
    return bcrypt.hashpw(_prehash(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode())
    except (ValueError, TypeError, AttributeError):
        return False
