"""Declaration of the property holder types populated at startup."""

from __future__ import annotations

from dataclasses import dataclass

from .properties import AppProperties, DatabaseProperties, PropertyHolder


@dataclass(frozen=True)
class PropertiesRegistration:
    """Closed set of property holder types that must be bound before serving.

    Attributes:
        holder_types: Registered holder classes; their order is immaterial.
    """

    holder_types: tuple[type[PropertyHolder], ...]

    def __post_init__(self) -> None:
        if not self.holder_types:
            raise ValueError("holder_types must not be empty")
        for holder_type in self.holder_types:
            if not isinstance(holder_type, type) or not issubclass(holder_type, PropertyHolder):
                raise ValueError(f"{holder_type!r} is not a PropertyHolder subclass")
            if not holder_type.properties_prefix.strip():
                raise ValueError(f"{holder_type.__name__} must declare a non-blank properties_prefix")
        if len(set(self.holder_types)) != len(self.holder_types):
            raise ValueError("holder_types must not contain duplicates")


def config_enable_properties(*holder_types: type[PropertyHolder]) -> PropertiesRegistration:
    """Declare holder types to bind at startup.

    Args:
        holder_types: Property holder classes to register.

    Returns:
        PropertiesRegistration: Validated registration.

    Raises:
        ValueError: Raised when the set is empty, contains duplicates or non-holder types.
    """

    return PropertiesRegistration(holder_types=tuple(holder_types))


CONFIG_PROPERTIES_REGISTRATION = config_enable_properties(AppProperties, DatabaseProperties)
