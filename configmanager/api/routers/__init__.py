"""API router package for endpoint composition."""

from .info import api_create_info_router, api_render_app_info, api_render_database_info

__all__ = ["api_create_info_router", "api_render_app_info", "api_render_database_info"]
