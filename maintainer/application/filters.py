"""Named record filters passed from services to repositories.

A filter is a closed set of tagged values; the repository translates each
variant into a where clause. None means "no filter".
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class StatusEquals:
    """Match records whose status equals the given value."""

    status: bool


@dataclass(frozen=True, slots=True)
class IdEquals:
    """Match the record with the given id."""

    id: int


EntityFilter: TypeAlias = StatusEquals | IdEquals
