"""Typed runtime settings with dotenv support and startup validation."""

from typing import Final

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LOG_LEVELS: Final[frozenset[str]] = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the deployment demo runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `node_env` reads from `NODE_ENV`. Absent or empty variables fall
    back to their defaults; malformed values fail validation.

    Attributes:
        port: Web server port.
        bind_host: Host interface for web server binding.
        version: Reported application version.
        color: Reported deployment color (blue/green slot label).
        node_env: Reported runtime environment label.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    port: int = Field(default=3000, ge=1, le=65535)
    bind_host: str = Field(default="0.0.0.0", min_length=1)
    version: str = Field(default="1.0.0")
    color: str = Field(default="blue")
    node_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("version", "color", "node_env")
    @classmethod
    def _validate_reported_label(cls, value: str, info) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            return cls.model_fields[info.field_name].default
        return stripped_value

    @field_validator("bind_host")
    @classmethod
    def _validate_non_empty_host(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        if normalized_level not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"unsupported log level {value!r}")
        return normalized_level


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings values are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
