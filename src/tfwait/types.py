"""Shared type aliases and the logging collaborator protocol."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeAlias, TypeVar, Union, runtime_checkable

T = TypeVar("T")
E = TypeVar("E", bound=Exception)

#: Exception classes eligible for local capture. Only ``Exception`` subclasses
#: are ever caught, so cancellation cannot be listed here.
ErrorFilter: TypeAlias = Sequence[type[Exception]]

#: ``(None, value)`` on success, ``(exc, None)`` on captured failure.
ResultTuple: TypeAlias = Union[tuple[None, T], tuple[E, None]]  # noqa: UP007


@runtime_checkable
class Logger(Protocol):
    """Duck-typed protocol for the logging collaborator.

    ``logging.Logger`` and ``logging.LoggerAdapter`` both satisfy it.
    """

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...  # noqa: D102
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...  # noqa: D102


__all__ = ["ErrorFilter", "Logger", "ResultTuple"]
