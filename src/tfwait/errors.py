"""Exception hierarchy for tfwait.

Exceptions raised by wrapped awaitables are never wrapped in these types;
they only describe misuse of the library itself.
"""

from __future__ import annotations


class WaitError(Exception):
    """Base class for errors raised by tfwait itself.

    ``hint`` tells the caller which argument or ``TFWAIT_*`` variable to fix.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(WaitError):
    """Invalid retry count or delay.

    Raised by ``Config`` and ``Config.from_env`` for bad values, and by
    ``Wait.retry`` before the first attempt when its arguments are invalid.
    """


class InternalError(WaitError):
    """The retry loop ended without returning a value or re-raising."""
