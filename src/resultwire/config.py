"""Configuration: frozen Config resolved from the environment.

Only behavior that has a defensible alternative is configurable. Everything
else about the combinators is fixed.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from resultwire.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_UNWRAP_KEEPS_ERROR = "RESULTWIRE_UNWRAP_KEEPS_ERROR"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def _coerce_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        hint="Use one of: 1, true, yes, on, 0, false, no, off.",
    )


@dataclass(frozen=True)
class Config:
    """Immutable process-wide settings.

    Example:
        set_config(Config(unwrap_keeps_error=True))
        # UnwrapError now carries the failure payload in ``.error``
    """

    #: Attach the failure payload to ``UnwrapError`` instead of discarding it.
    unwrap_keeps_error: bool = False

    def __post_init__(self) -> None:
        """Validate field types; a truthy string here is almost always a bug."""
        if not isinstance(self.unwrap_keeps_error, bool):
            raise ConfigurationError(
                f"unwrap_keeps_error must be a bool, got {type(self.unwrap_keeps_error).__name__}",
                hint=f"Use Config.from_env() to parse {ENV_UNWRAP_KEEPS_ERROR}.",
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from ``RESULTWIRE_*`` variables.

        When ``environ`` is omitted, a project ``.env`` file is loaded first
        (existing variables win) and ``os.environ`` is read.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        raw = environ.get(ENV_UNWRAP_KEEPS_ERROR)
        if raw is None:
            return cls()
        return cls(unwrap_keeps_error=_coerce_bool(ENV_UNWRAP_KEEPS_ERROR, raw))


_config: Config | None = None


def get_config() -> Config:
    """Return the active Config, resolving it from the environment on first use."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Forget the active Config; the next ``get_config()`` re-reads the environment."""
    global _config
    _config = None


def unwrap_keeps_error_enabled(*, override: bool | None = None) -> bool:
    """Return True when ``unsafe_unwrap`` should keep the failure payload.

    An explicit ``override`` takes precedence over the active Config.
    """
    if override is not None:
        return bool(override)
    return get_config().unwrap_keeps_error
