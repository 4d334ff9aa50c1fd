"""FastAPI application factory for the configuration echo service."""

from fastapi import FastAPI

from configmanager.config import AppProperties, BoundProperties, DatabaseProperties, RuntimeSettings

from .routers import api_create_info_router


def create_api_application(settings: RuntimeSettings, bound_properties: BoundProperties) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated runtime settings used for application metadata.
        bound_properties: Property holders bound once at startup.

    Returns:
        FastAPI: Framework application with the info router mounted.

    Raises:
        ConfigurationBindingError: Raised when a required holder was not bound.
    """

    application = FastAPI(title="Config Manager", description=f"Environment: {settings.environment_name}")
    application.include_router(
        api_create_info_router(
            app_properties=bound_properties.config_get(AppProperties),
            database_properties=bound_properties.config_get(DatabaseProperties),
        )
    )
    return application
