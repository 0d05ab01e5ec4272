"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to prevent test suites from
growing lots of one-off loggers and flaky coroutine factories.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CaptureLogger:
    """Logger double that records warning/error calls for assertions."""

    records: list[tuple[str, str, tuple[Any, ...], dict[str, Any]]] = field(
        default_factory=list
    )

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.records.append(("warning", msg, args, kwargs))

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.records.append(("error", msg, args, kwargs))

    def levels(self) -> list[str]:
        return [level for level, *_ in self.records]

    def messages(self) -> list[str]:
        return [msg % args for _, msg, args, _ in self.records]


@dataclass
class ScriptedFactory:
    """Zero-argument coroutine factory that replays a scripted sequence.

    Exceptions in the script are raised, anything else is returned. The last
    entry repeats once the script is exhausted.
    """

    script: list[Any] = field(default_factory=list)
    calls: int = 0

    async def __call__(self) -> Any:
        idx = min(self.calls, len(self.script) - 1)
        self.calls += 1
        await asyncio.sleep(0)
        item = self.script[idx]
        if isinstance(item, BaseException):
            raise item
        return item


async def resolve_after(value: Any, ms: float) -> Any:
    await asyncio.sleep(ms / 1000)
    return value


async def fail_after(exc: BaseException, ms: float) -> Any:
    await asyncio.sleep(ms / 1000)
    raise exc
