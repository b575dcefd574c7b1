"""Domain exceptions for the access maintainer.

The business layer raises exactly two of these (RecordNotFoundException and
RecordAlreadyDeletedException); the persistence layer adds
StoreTimeoutException for an exhausted store retry budget. Store errors such
as IntegrityError or StaleDataError are not wrapped: the boundary layer
classifies them directly.
"""

from typing import Any


class MaintainerException(Exception):
    """Base exception for all access maintainer errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. entity, record_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class RecordNotFoundException(MaintainerException):
    """Raised when a record targeted by a write does not exist."""

    def __init__(self, entity: str, record_id: int) -> None:
        """Initialize with entity name and id.

        Args:
            entity: Entity name (e.g. 'Role').
            record_id: The id that was not found.
        """
        super().__init__(
            f"{entity} not found: {record_id}",
            "RECORD_NOT_FOUND",
            {"entity": entity, "record_id": record_id},
        )


class RecordAlreadyDeletedException(MaintainerException):
    """Raised when deleting a record whose status is already inactive."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(
            f"{entity} already deleted: {record_id}",
            "RECORD_ALREADY_DELETED",
            {"entity": entity, "record_id": record_id},
        )


class StoreTimeoutException(MaintainerException):
    """Raised when the store stays unreachable after its retry budget is spent."""

    def __init__(self, operation: str, attempts: int) -> None:
        """Initialize with the store operation and the attempts made.

        Args:
            operation: Store operation that timed out (e.g. 'select', 'commit').
            attempts: Number of attempts made before giving up.
        """
        super().__init__(
            f"Store did not respond for {operation} after {attempts} attempt(s)",
            "STORE_TIMEOUT",
            {"operation": operation, "attempts": attempts},
        )


class SqlNotConfiguredException(MaintainerException):
    """Raised when a request needs the database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
