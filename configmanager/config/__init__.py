"""Configuration package for runtime settings and property binding."""

from .binding import BoundProperties, config_bind_properties, config_bind_registration, config_normalize_key
from .errors import ConfigurationBindingError, ConfigurationError, ConfigurationSourceError
from .properties import AppProperties, DatabaseProperties, PropertyHolder
from .registration import CONFIG_PROPERTIES_REGISTRATION, PropertiesRegistration, config_enable_properties
from .settings import RuntimeSettings, SettingsLoadError, config_load_settings, config_override_settings
from .sources import config_flatten_mapping, config_load_source, config_parse_properties_text

__all__ = [
    "AppProperties",
    "BoundProperties",
    "CONFIG_PROPERTIES_REGISTRATION",
    "ConfigurationBindingError",
    "ConfigurationError",
    "ConfigurationSourceError",
    "DatabaseProperties",
    "PropertiesRegistration",
    "PropertyHolder",
    "RuntimeSettings",
    "SettingsLoadError",
    "config_bind_properties",
    "config_bind_registration",
    "config_enable_properties",
    "config_flatten_mapping",
    "config_load_settings",
    "config_load_source",
    "config_normalize_key",
    "config_override_settings",
    "config_parse_properties_text",
]
