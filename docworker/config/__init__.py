"""
Configuration access - cached settings singleton.
"""

from .settings import REQUIRED_ENV, Settings, load_settings

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def init_settings(settings: Settings) -> None:
    """Install an explicit settings object (used by tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop cached settings so the next call reloads from the environment."""
    global _settings
    _settings = None


__all__ = [
    "REQUIRED_ENV",
    "Settings",
    "get_settings",
    "init_settings",
    "load_settings",
    "reset_settings",
]
