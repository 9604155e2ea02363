"""Environment-driven settings for the edit engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "EDIT_ENGINE_"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Process-wide switches.

    ``validate_edits`` makes every ``TextEdit`` check that its edits are
    sorted and non-overlapping at construction time. It is off by default;
    turn it on with ``EDIT_ENGINE_VALIDATE_EDITS=1`` for debug and test runs.
    """

    validate_edits: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        source = os.environ if env is None else env
        return cls(validate_edits=_env_flag(source, "VALIDATE_EDITS", False))


_ACTIVE: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = EngineSettings.from_env()
    return _ACTIVE


def reload_settings(settings: Optional[EngineSettings] = None) -> EngineSettings:
    """Replace the cached settings, re-reading the environment if none given."""

    global _ACTIVE
    _ACTIVE = settings if settings is not None else EngineSettings.from_env()
    return _ACTIVE


__all__ = ["ENV_PREFIX", "EngineSettings", "get_settings", "reload_settings"]
