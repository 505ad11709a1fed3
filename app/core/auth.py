"""
Password hashing utilities.

Registration and login keep a plain request/response contract (no tokens are
issued), but passwords are never kept in clear text.
"""

import bcrypt

from app.core.config import settings

# bcrypt only looks at the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72


def password_too_long(plain_password: str) -> bool:
    """True when the UTF-8 encoding exceeds what bcrypt accepts."""
    return len(plain_password.encode('utf-8')) > PASSWORD_MAX_BYTES


def verify_password(plain_password: str, hashed_password_in_store: str) -> bool:
    """
    Verify plain password against the stored bcrypt hash.

    Args:
        plain_password: Plain text password from the login request
        hashed_password_in_store: Bcrypt hash kept on the user record

    Returns:
        True if password matches hash, False otherwise. A password longer
        than PASSWORD_MAX_BYTES can never have been registered, so it is
        reported as a mismatch.
    """
    if password_too_long(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password_in_store.encode('utf-8')
    )


def get_password_hash(plain_password: str) -> str:
    """
    Hash a plain password using Bcrypt.

    Bcrypt Algorithm Details:
    - Uses Blowfish cipher
    - Includes salt (automatically generated and stored in hash)
    - Cost factor comes from settings.BCRYPT_ROUNDS (12 by default)
    - Format: $2b$[cost]$[22 character salt][31 character hash]

    Args:
        plain_password: Plain text password to hash

    Returns:
        Bcrypt hash of the password

    Raises:
        ValueError: If the password is longer than PASSWORD_MAX_BYTES
    """
    if password_too_long(plain_password):
        raise ValueError(f"password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(plain_password.encode('utf-8'), salt)
    return hashed.decode('utf-8')
