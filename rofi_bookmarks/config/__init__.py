"""Environment-driven configuration."""

from .pydantic_config import (
    ConfigurationManager,
    LauncherConfig,
    PATH_VARIABLE,
    RETV_VARIABLE,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "LauncherConfig",
    "PATH_VARIABLE",
    "RETV_VARIABLE",
    "format_config_error",
]
