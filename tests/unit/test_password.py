"""Password hashing (bcrypt over SHA-256 digest)."""

import bcrypt

from maintainer.infrastructure.security.password import _digest, get_password_hash


def _matches(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(_digest(plain), hashed.encode("utf-8"))


def test_hash_matches_and_is_salted() -> None:
    first = get_password_hash("Secret1!")
    second = get_password_hash("Secret1!")
    assert first != second
    assert first.startswith("$2")
    assert _matches("Secret1!", first)
    assert _matches("Secret1!", second)


def test_wrong_password_does_not_match() -> None:
    hashed = get_password_hash("Secret1!")
    assert not _matches("Secret2!", hashed)


def test_long_passwords_are_not_truncated() -> None:
    """Passwords sharing a 72-byte prefix still hash differently."""
    prefix = "A" * 80
    hashed = get_password_hash(prefix + "1")
    assert not _matches(prefix + "2", hashed)
