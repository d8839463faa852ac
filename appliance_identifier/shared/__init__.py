"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by every layer of the
appliance identifier. Nothing here may depend on Infrastructure or
on a web framework.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumStorageBackend
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumStorageBackend",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
