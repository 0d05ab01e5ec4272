"""Configuration: frozen retry defaults with optional environment resolution."""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from dotenv import find_dotenv, load_dotenv

from tfwait.errors import ConfigurationError

_RETRIES_ENV_VAR = "TFWAIT_RETRIES"
_DELAY_MS_ENV_VAR = "TFWAIT_RETRY_DELAY_MS"
_DELAY_MS_HINT = "This is the constant pause between attempts in milliseconds."


@dataclass(frozen=True)
class Config:
    """Immutable defaults used by ``Wait.retry`` when arguments are omitted.

    Example:
        config = Config(retries=5, delay_ms=250)
        wait = Wait(config=config)
        data = await wait.retry(fetch_data)
    """

    retries: int = 3
    delay_ms: float = 1000

    def __post_init__(self) -> None:
        """Validate invariants to keep retry behavior predictable."""
        if isinstance(self.retries, bool) or not isinstance(self.retries, int):
            raise ConfigurationError(
                f"retries must be an integer, got {self.retries!r}",
                hint="This is the total number of attempts, including the first.",
            )
        if self.retries < 1:
            raise ConfigurationError(
                f"retries must be ≥ 1, got {self.retries}",
                hint="This is the total number of attempts, including the first.",
            )
        check_delay_ms(self.delay_ms)

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``TFWAIT_*`` environment variables.

        A ``.env`` file found from the working directory upward is loaded
        first. Unset variables keep their defaults.
        """
        load_dotenv(find_dotenv(usecwd=True))

        overrides: dict[str, float] = {}
        raw_retries = os.environ.get(_RETRIES_ENV_VAR)
        if raw_retries:
            overrides["retries"] = _parse_env(_RETRIES_ENV_VAR, raw_retries, int)
        raw_delay = os.environ.get(_DELAY_MS_ENV_VAR)
        if raw_delay:
            overrides["delay_ms"] = _parse_env(_DELAY_MS_ENV_VAR, raw_delay, float)
        return cls(**overrides)  # type: ignore[arg-type]


def _parse_env(name: str, raw: str, kind: type[int] | type[float]) -> float:
    try:
        return kind(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"Invalid value for {name}: {raw!r}",
            hint=f"Set {name} to a number or unset it.",
        ) from None


def check_delay_ms(value: object) -> None:
    """Raise ConfigurationError unless ``value`` is a finite number ≥ 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(
            f"delay_ms must be a number, got {value!r}", hint=_DELAY_MS_HINT
        )
    if not math.isfinite(value):
        raise ConfigurationError(
            f"delay_ms must be finite, got {value}", hint=_DELAY_MS_HINT
        )
    if value < 0:
        raise ConfigurationError(
            f"delay_ms must be ≥ 0, got {value}", hint=_DELAY_MS_HINT
        )
