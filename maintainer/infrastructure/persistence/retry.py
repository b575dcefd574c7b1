"""
Store retry budget and timeout classification.

Responsibilities:
  - Classify transient store failures (pool timeouts, dropped connections)
  - Retry idempotent reads with exponential backoff + jitter (tenacity)
  - Surface an exhausted budget as StoreTimeoutException (mapped to 408)

Constraints:
  - Writes are never retried: a failed commit leaves the unit of work in an
    unknown state, so a transient failure there is reported immediately.
  - Non-transient errors (IntegrityError, StaleDataError, ...) propagate
    unchanged for the boundary layer to classify.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from maintainer.core.config import get_settings
from maintainer.domain.exceptions import StoreTimeoutException

logger = logging.getLogger(__name__)


def is_transient_store_error(exception: BaseException) -> bool:
    """Return True for failures worth retrying (connection-level, not data-level).

    Transient:
      - connection pool checkout timeout
      - driver/network timeouts
      - OperationalError or any DBAPIError that invalidated the connection
    """
    if isinstance(exception, (PoolTimeoutError, TimeoutError, ConnectionError)):
        return True
    if isinstance(exception, OperationalError):
        return True
    if isinstance(exception, DBAPIError) and exception.connection_invalidated:
        return True
    return False


T = TypeVar("T")


async def run_with_retry(
    session: AsyncSession,
    operation: str,
    call: Callable[[], Awaitable[T]],
) -> T:
    """Run an idempotent store call under the configured retry budget.

    The session is rolled back between attempts so the next attempt starts
    on a fresh connection. When every attempt fails transiently, raises
    StoreTimeoutException chained to the last store error.
    """
    settings = get_settings()
    attempts = settings.db_retry_attempts
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential_jitter(
                initial=0.1, max=settings.db_retry_max_wait_seconds
            ),
            retry=retry_if_exception(is_transient_store_error),
        ):
            with attempt:
                try:
                    return await call()
                except Exception as exc:
                    if is_transient_store_error(exc):
                        logger.warning(
                            "Transient store error on %s (attempt %d/%d): %s",
                            operation,
                            attempt.retry_state.attempt_number,
                            attempts,
                            exc,
                        )
                        await session.rollback()
                    raise
    except RetryError as exc:
        last = exc.last_attempt.exception()
        raise StoreTimeoutException(operation, attempts) from last
    raise AssertionError("unreachable")  # pragma: no cover


async def commit_or_timeout(session: AsyncSession) -> None:
    """Commit the unit of work; a transient failure becomes StoreTimeoutException."""
    try:
        await session.commit()
    except Exception as exc:
        if is_transient_store_error(exc):
            raise StoreTimeoutException("commit", 1) from exc
        raise
