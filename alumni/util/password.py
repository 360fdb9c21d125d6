"""Password hashing utilities."""

import bcrypt

from alumni.config import AuthSettings
from alumni.util.error import PasswordHashError

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, settings: AuthSettings) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain text password
        settings: Authentication settings (provides the cost factor)

    Returns:
        bcrypt hash string
    """
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=settings.bcrypt_rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain text password against a stored bcrypt hash.

    Raises:
        PasswordHashError: If the stored hash is not a bcrypt hash
    """
    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
    except ValueError as e:
        raise PasswordHashError("Stored password hash is malformed") from e
