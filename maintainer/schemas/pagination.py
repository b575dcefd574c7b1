"""List query parameters shared by every GetAll endpoint."""

from pydantic import BaseModel

from maintainer.application.filters import StatusEquals

LIMIT_ERROR = "Limit param must be a positive number."
OFFSET_ERROR = "Offset param must be zero or a positive number."


class PaginationParams(BaseModel):
    """status (optional equality filter), limit (> 0) and offset (>= 0).

    Range checks are explicit (is_valid / errors) rather than Field constraints
    so both violations are reported together with the list endpoint's messages.
    """

    status: bool | None = None
    limit: int = 10
    offset: int = 0

    def is_valid(self) -> bool:
        return self.limit > 0 and self.offset >= 0

    def errors(self) -> dict[str, list[str]]:
        """Field errors for invalid limit/offset (empty when valid)."""
        found: dict[str, list[str]] = {}
        if self.limit <= 0:
            found["limit"] = [LIMIT_ERROR]
        if self.offset < 0:
            found["offset"] = [OFFSET_ERROR]
        return found

    def status_filter(self) -> StatusEquals | None:
        return StatusEquals(self.status) if self.status is not None else None
