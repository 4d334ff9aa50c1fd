"""Info endpoint router echoing bound application and database properties."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from configmanager.config import AppProperties, DatabaseProperties


def api_render_app_info(app_properties: AppProperties) -> str:
    """Render application identity values as plain text.

    Args:
        app_properties: Bound application properties.

    Returns:
        str: `App Name: <name>, Version: <version>`.
    """

    return f"App Name: {app_properties.name}, Version: {app_properties.version}"


def api_render_database_info(database_properties: DatabaseProperties) -> str:
    """Render database connection values as plain text, without the password.

    Args:
        database_properties: Bound database properties.

    Returns:
        str: `DB URL: <url>, Username: <username>`.
    """

    return f"DB URL: {database_properties.url}, Username: {database_properties.username}"


def api_create_info_router(
    app_properties: AppProperties,
    database_properties: DatabaseProperties,
) -> APIRouter:
    """Create router exposing the `/info` and `/dbinfo` endpoints.

    Args:
        app_properties: Bound application properties.
        database_properties: Bound database properties.

    Returns:
        APIRouter: Router exposing read-only plain-text info endpoints.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if app_properties is None:
        raise ValueError("app_properties must not be None")
    if database_properties is None:
        raise ValueError("database_properties must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info", response_class=PlainTextResponse)
    def api_app_info() -> str:
        """Return bound application name and version."""

        return api_render_app_info(app_properties)

    @router.get("/dbinfo", response_class=PlainTextResponse)
    def api_database_info() -> str:
        """Return bound database URL and username."""

        return api_render_database_info(database_properties)

    return router
