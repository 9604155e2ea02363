"""Runtime services: settings and telemetry."""

from .config import EngineSettings, get_settings, reload_settings

__all__ = ["EngineSettings", "get_settings", "reload_settings"]
