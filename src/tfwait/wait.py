"""Result tuples, concurrent batches, delays and fixed-delay retries.

Every wrapper follows the same contract: failures are recovered locally
only when the caller asks for it, and every caught failure is logged
before it is returned or re-raised.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from tfwait.config import Config, check_delay_ms
from tfwait.errors import ConfigurationError, InternalError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from tfwait.types import ErrorFilter, Logger, ResultTuple

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")

LIBRARY_LOGGER = "tfwait"


def default_logger() -> logging.Logger:
    """Return the library logger scoped to the ``Wait`` component."""
    return logging.getLogger(LIBRARY_LOGGER).getChild("wait")


def _matches(exc: Exception, errors_to_catch: ErrorFilter | None) -> bool:
    if errors_to_catch is None:
        return True
    return isinstance(exc, tuple(errors_to_catch))


class Wait:
    """Helpers for awaiting operations with explicit failure handling.

    Example:
        wait = Wait()
        err, data = await wait.promise(fetch_data())
        if err is not None:
            ...
    """

    def __init__(
        self, logger: Logger | None = None, *, config: Config | None = None
    ) -> None:
        """Bind the logging collaborator and retry defaults.

        Args:
            logger: Receives ``warning``/``error`` calls. Defaults to the
                ``tfwait.wait`` logger.
            config: Defaults for ``retry``. Defaults to ``Config()``.
        """
        self._log: Logger = logger if logger is not None else default_logger()
        self._config = config if config is not None else Config()

    @property
    def config(self) -> Config:
        return self._config

    async def promise(
        self,
        awaitable: Awaitable[T],
        errors_to_catch: ErrorFilter | None = None,
    ) -> ResultTuple[T, Exception]:
        """Await ``awaitable`` and return its outcome as a result tuple.

        Args:
            awaitable: The operation to await.
            errors_to_catch: Exception classes to capture. When omitted, every
                ``Exception`` is captured; otherwise non-matching exceptions
                are re-raised unchanged.

        Returns:
            ``(None, value)`` on success, ``(exc, None)`` on captured failure.

        Example:
            err, data = await wait.promise(client.get(url), [TimeoutError])
        """
        try:
            value = await awaitable
        except Exception as exc:
            self._log.error("Failed to execute awaitable: %s", exc, exc_info=exc)
            if _matches(exc, errors_to_catch):
                return exc, None
            raise
        return None, value

    @overload
    async def all(
        self,
        awaitables: tuple[Awaitable[T1]],
        errors_to_catch: ErrorFilter | None = None,
    ) -> tuple[None, T1] | tuple[Exception, None]: ...

    @overload
    async def all(
        self,
        awaitables: tuple[Awaitable[T1], Awaitable[T2]],
        errors_to_catch: ErrorFilter | None = None,
    ) -> tuple[None, T1, T2] | tuple[Exception, None]: ...

    @overload
    async def all(
        self,
        awaitables: tuple[Awaitable[T1], Awaitable[T2], Awaitable[T3]],
        errors_to_catch: ErrorFilter | None = None,
    ) -> tuple[None, T1, T2, T3] | tuple[Exception, None]: ...

    @overload
    async def all(
        self,
        awaitables: tuple[Awaitable[T1], Awaitable[T2], Awaitable[T3], Awaitable[T4]],
        errors_to_catch: ErrorFilter | None = None,
    ) -> tuple[None, T1, T2, T3, T4] | tuple[Exception, None]: ...

    @overload
    async def all(
        self,
        awaitables: Sequence[Awaitable[Any]],
        errors_to_catch: ErrorFilter | None = None,
    ) -> tuple[Any, ...]: ...

    async def all(
        self,
        awaitables: Sequence[Awaitable[Any]],
        errors_to_catch: ErrorFilter | None = None,
    ) -> tuple[Any, ...]:
        """Run ``awaitables`` concurrently and return a batch result tuple.

        Results keep input order regardless of completion order. On failure
        the first exception reported by the join decides the outcome and the
        partial results are discarded; the other awaitables are not cancelled.

        Returns:
            ``(None, v1, ..., vn)`` on success, ``(exc, None)`` on captured
            failure.

        Example:
            err, user, posts = await wait.all((get_user(uid), get_posts(uid)))
        """
        try:
            results = await asyncio.gather(*awaitables)
        except Exception as exc:
            self._log.error("Failed to execute awaitables: %s", exc, exc_info=exc)
            if _matches(exc, errors_to_catch):
                return exc, None
            raise
        return (None, *results)

    @staticmethod
    async def time(ms: float) -> None:
        """Suspend for ``ms`` milliseconds.

        Zero or negative durations yield to the event loop once and return.
        """
        await asyncio.sleep(max(ms, 0) / 1000)

    async def retry(
        self,
        fn: Callable[[], Awaitable[T]],
        retries: int | None = None,
        delay_ms: float | None = None,
    ) -> T:
        """Call ``fn`` until it succeeds or ``retries`` attempts are spent.

        The delay between attempts is constant. Intermediate failures are
        logged and discarded; the last one is re-raised unchanged.

        Args:
            fn: Zero-argument factory producing a fresh awaitable per attempt.
            retries: Total number of attempts (>= 1). Defaults to
                ``config.retries``.
            delay_ms: Pause between attempts. Defaults to ``config.delay_ms``.

        Raises:
            ConfigurationError: ``retries`` is not a positive integer, or
                ``delay_ms`` is not a finite number ≥ 0.

        Example:
            data = await wait.retry(lambda: fetch_data(url), 3, 1000)
        """
        if retries is None:
            retries = self._config.retries
        if delay_ms is None:
            delay_ms = self._config.delay_ms
        if isinstance(retries, bool) or not isinstance(retries, int) or retries < 1:
            raise ConfigurationError(
                f"retries must be a positive integer, got {retries!r}",
                hint="This is the total number of attempts, including the first.",
            )
        check_delay_ms(delay_ms)

        attempt = 0
        while attempt < retries:
            try:
                return await fn()
            except Exception as exc:
                attempt += 1
                self._log.warning(
                    "Retry attempt %d/%d failed. Retrying in %sms: %s",
                    attempt,
                    retries,
                    delay_ms,
                    exc,
                )
                if attempt >= retries:
                    self._log.error(
                        "All %d retry attempts failed: %s", retries, exc, exc_info=exc
                    )
                    raise
                await self.time(delay_ms)

        # Defensive: loop should always return or raise.
        raise InternalError("Unexpected error in retry logic")  # pragma: no cover
