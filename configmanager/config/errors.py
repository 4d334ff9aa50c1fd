"""Project-native typed exceptions for configuration loading and binding."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base exception for configuration source and binding failures."""


class ConfigurationSourceError(ConfigurationError):
    """Raised when a key/value configuration source cannot be read or parsed.

    Attributes:
        source_label: Optional label of the offending source, usually a file path.
    """

    def __init__(self, message: str, source_label: str | None = None):
        super().__init__(message)
        self.source_label = source_label


class ConfigurationBindingError(ConfigurationError):
    """Raised when a property holder cannot be populated or looked up.

    Attributes:
        prefix: Optional key prefix of the holder involved in the failure.
    """

    def __init__(self, message: str, prefix: str | None = None):
        super().__init__(message)
        self.prefix = prefix
