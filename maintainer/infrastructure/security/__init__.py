"""Security helpers (password hashing)."""

from maintainer.infrastructure.security.password import get_password_hash

__all__ = ["get_password_hash"]
