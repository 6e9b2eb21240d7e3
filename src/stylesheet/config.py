"""Configuration for the root style registry."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class StyleConfig:
    """Behavior switches for the root style registry."""

    require_main_thread: bool = True
    apply_once: bool = True  # False re-applies on every lifecycle event
    emit_events: bool = True

    @classmethod
    def from_env(cls) -> StyleConfig:
        """Build a config from ``STYLESHEET_*`` environment variables."""
        defaults = cls()
        return cls(
            require_main_thread=_env_flag(
                "STYLESHEET_REQUIRE_MAIN_THREAD", defaults.require_main_thread
            ),
            apply_once=_env_flag("STYLESHEET_APPLY_ONCE", defaults.apply_once),
            emit_events=_env_flag("STYLESHEET_EMIT_EVENTS", defaults.emit_events),
        )
