"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class RuntimeSettings(BaseSettings):
    """Process settings for the HTTP runtime and the properties source location.

    Environment variable names map directly to field names in uppercase.
    Example: `properties_file` reads from `PROPERTIES_FILE`.

    The bound property holders are never read from the environment; they come
    exclusively from the properties source file named here.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        properties_file: Path of the key/value source (`.properties`, `.yml` or `.yaml`).
        properties_file_encoding: Text encoding used to read the source file.
        properties_file_required: Fail startup when the source file does not exist.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    properties_file: str = Field(default="application.properties", min_length=1)
    properties_file_encoding: str = Field(default="utf-8", min_length=1)
    properties_file_required: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @field_validator("properties_file", "properties_file_encoding")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level_name = value.strip().upper()
        if level_name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level_name


def config_load_settings() -> RuntimeSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        RuntimeSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return RuntimeSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_override_settings(settings: RuntimeSettings, **overrides: object) -> RuntimeSettings:
    """Return a copy of runtime settings with overrides passed through validation.

    Args:
        settings: Previously validated runtime settings.
        **overrides: Field values replacing the current ones.

    Returns:
        RuntimeSettings: Revalidated runtime settings object.

    Raises:
        SettingsLoadError: Raised when an override is invalid.
    """

    try:
        return RuntimeSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as error:
        raise SettingsLoadError(f"Runtime settings override validation failed. Details: {error}") from error
