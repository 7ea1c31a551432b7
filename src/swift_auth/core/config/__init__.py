"""Configuration module with environment variable support."""

from .settings import DEFAULT_USER_AGENT, Settings, get_settings


__all__ = [
    "DEFAULT_USER_AGENT",
    "Settings",
    "get_settings",
]
