"""
Password hashing helpers backed by bcrypt.

bcrypt only reads the first 72 bytes of a password. Stored hashes come
from a bcryptjs system that truncated silently, so inputs are truncated
here as well instead of being rejected.
"""

import bcrypt

BCRYPT_MAX_BYTES = 72

# Verified against when the email is unknown, so both failure paths do a
# full bcrypt comparison.
_DUMMY_HASH = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt()).decode("utf-8")


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password for storage in ``users.password_hash``."""
    if not password:
        raise ValueError("Password must not be empty")
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Returns False for empty input or a malformed hash instead of raising.
    """
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


def burn_password_check(password: str) -> None:
    """Spend one bcrypt comparison without a real user."""
    verify_password(password or "x", _DUMMY_HASH)
