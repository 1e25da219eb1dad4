"""Core configuration, database and error handling helpers."""

from .config import Settings, get_settings, settings
from .error_handlers import register_exception_handlers

__all__ = [
    "Settings",
    "get_settings",
    "register_exception_handlers",
    "settings",
]
