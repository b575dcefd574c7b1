"""Uniform response envelope returned by every maintained endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Envelope: success flag, HTTP status, optional data, title/detail and field errors.

    ``errors`` maps a field name to its ordered messages and is empty on success.
    """

    success: bool = False
    status: int
    data: Any = None
    title: str | None = None
    detail: str | None = None
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def ok(cls, status: int, data: Any = None) -> "ApiResponse":
        return cls(success=True, status=status, data=data)

    @classmethod
    def failure(
        cls,
        status: int,
        title: str,
        detail: str | None = None,
        errors: dict[str, list[str]] | None = None,
    ) -> "ApiResponse":
        return cls(
            success=False,
            status=status,
            title=title,
            detail=detail,
            errors=errors or {},
        )
