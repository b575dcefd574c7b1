"""Utility helpers."""

from maintainer.shared.utils.datetime import utc_now

__all__ = ["utc_now"]
