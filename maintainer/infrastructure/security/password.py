"""User password hashing (bcrypt over a SHA-256 digest).

Stored user passwords are hashed once on Create and carried over unchanged on
Update. bcrypt only reads the first 72 bytes of its input, so the password is
digested with SHA-256 and base64-encoded first; every password then maps to a
44-byte bcrypt input.
"""

import base64
import hashlib

import bcrypt


def _digest(password: str) -> bytes:
    """Fixed-length bcrypt input for any password length."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Hash a plain password for storage in users.password."""
    hashed = bcrypt.hashpw(_digest(password), bcrypt.gensalt())
    return hashed.decode("utf-8")
