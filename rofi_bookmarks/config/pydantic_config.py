"""
Pydantic-based configuration for rofi-bookmarks.

rofi starts the script with a fresh environment on every selection, so all
settings come from environment variables. This module maps them onto a
validated LauncherConfig model.
"""

import os
from pathlib import Path
from typing import Dict, Literal, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.error_handler import ConfigurationError

PATH_VARIABLE = "ROFI_BOOKMARKS_PATH"
RETV_VARIABLE = "ROFI_RETV"
FORMAT_VARIABLE = "ROFI_BOOKMARKS_FORMAT"
LOG_LEVEL_VARIABLE = "ROFI_BOOKMARKS_LOG_LEVEL"
LOG_FILE_VARIABLE = "ROFI_BOOKMARKS_LOG_FILE"

# Field name -> environment variable, for error messages.
ENVIRONMENT_FIELDS: Dict[str, str] = {
    "bookmarks_path": PATH_VARIABLE,
    "source_format": FORMAT_VARIABLE,
    "log_level": LOG_LEVEL_VARIABLE,
    "log_file": LOG_FILE_VARIABLE,
}


class LauncherConfig(BaseModel):
    """Settings for one script-mode invocation."""

    bookmarks_path: Path = Field(description="Bookmarks file to serve")
    echo_errors: bool = Field(
        default=False,
        description="Mirror errors into the menu as a message line",
    )
    source_format: Literal["auto", "toml", "flat"] = Field(
        default="auto",
        description="Bookmarks file encoding",
        json_schema_extra={
            "error_msg": f"{FORMAT_VARIABLE} must be 'auto', 'toml' or 'flat'."
        },
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum level written to stderr and the log file",
        json_schema_extra={
            "error_msg": f"{LOG_LEVEL_VARIABLE} must be one of DEBUG, INFO, "
            "WARNING, ERROR or CRITICAL."
        },
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file receiving a copy of the log",
    )

    @field_validator("bookmarks_path", mode="before")
    @classmethod
    def validate_bookmarks_path(cls, v):
        """Reject an empty path, which Path() would turn into '.'."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("source_format", "log_level", mode="before")
    @classmethod
    def normalize_case(cls, v, info):
        if isinstance(v, str):
            v = v.strip()
            return v.upper() if info.field_name == "log_level" else v.lower()
        return v


class ConfigurationManager:
    """Builds a LauncherConfig from an environment mapping."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration manager.

        Args:
            environ: Environment to read, defaults to os.environ

        Raises:
            ConfigurationError: If a variable is missing or invalid
        """
        self._environ = os.environ if environ is None else environ
        self._config = self._load_configuration()

    @property
    def config(self) -> LauncherConfig:
        return self._config

    def _load_configuration(self) -> LauncherConfig:
        env = self._environ
        config_data = {"echo_errors": RETV_VARIABLE in env}
        for field_name, variable in ENVIRONMENT_FIELDS.items():
            value = env.get(variable)
            if value is not None and (value != "" or field_name == "bookmarks_path"):
                config_data[field_name] = value

        try:
            return LauncherConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e


def format_config_error(error: ValidationError) -> str:
    """
    Turn a validation error into a one-line message naming the variable.

    Args:
        error: Pydantic validation error raised by LauncherConfig

    Returns:
        Message for the first failing field
    """
    detail = error.errors()[0]
    field_name = str(detail["loc"][0]) if detail.get("loc") else ""
    variable = ENVIRONMENT_FIELDS.get(field_name, field_name)

    if detail["type"] == "missing":
        return f"Environment variable '{variable}' not set."

    field = LauncherConfig.model_fields.get(field_name)
    extra = field.json_schema_extra if field is not None else None
    if detail["type"] == "literal_error" and isinstance(extra, dict):
        return f"{extra['error_msg']} (got: {detail.get('input')!r})"

    return f"Invalid value for '{variable}': {detail['msg']}"
