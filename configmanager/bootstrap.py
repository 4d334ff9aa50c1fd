"""Application bootstrap wiring for property binding and dependency assembly."""

import logging

from fastapi import FastAPI

from configmanager.api import create_api_application
from configmanager.config import (
    CONFIG_PROPERTIES_REGISTRATION,
    BoundProperties,
    RuntimeSettings,
    config_bind_registration,
    config_load_settings,
    config_load_source,
)

logger = logging.getLogger(__name__)


def bootstrap_load_properties(settings: RuntimeSettings) -> BoundProperties:
    """Read the configured source and bind all registered property holders once.

    Args:
        settings: Validated runtime settings naming the source file.

    Returns:
        BoundProperties: Immutable container of bound holders.

    Raises:
        ConfigurationSourceError: Raised when the source cannot be read or parsed.
        ConfigurationBindingError: Raised when a holder cannot be populated.
    """

    logger.info("Binding configuration properties from %s", settings.properties_file)
    source = config_load_source(
        settings.properties_file,
        encoding=settings.properties_file_encoding,
        missing_ok=not settings.properties_file_required,
    )
    return config_bind_registration(CONFIG_PROPERTIES_REGISTRATION, source)


def bootstrap_create_application(settings: RuntimeSettings | None = None) -> FastAPI:
    """Assemble the runtime application after binding startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when runtime settings validation fails.
        ConfigurationError: Raised when property binding fails.
    """

    resolved_settings = settings or config_load_settings()
    bound_properties = bootstrap_load_properties(resolved_settings)
    return create_api_application(settings=resolved_settings, bound_properties=bound_properties)
