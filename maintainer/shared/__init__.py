"""Shared utilities: logging and the UTC clock. No business logic."""

from maintainer.shared.utils import utc_now

__all__ = ["utc_now"]
