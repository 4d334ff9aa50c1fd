"""Binder populating property holders from a flat key/value source.

Binding is explicit: the startup wiring hands a source and a registration to
`config_bind_registration`, which returns one immutable `BoundProperties`
container. Consumers receive holders from that container by reference; there
is no ambient registry.

Keys are matched in relaxed form (case-insensitive, `-` and `_` ignored), so
`app.name`, `APP.NAME` and `app.na-me` all address `AppProperties.name`.
Unknown keys under a declared prefix are ignored and reported by name only.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, TypeVar

from pydantic import ValidationError

from .errors import ConfigurationBindingError
from .properties import PropertyHolder

if TYPE_CHECKING:
    from .registration import PropertiesRegistration

logger = logging.getLogger(__name__)

PropertyHolderT = TypeVar("PropertyHolderT", bound=PropertyHolder)


def config_normalize_key(key: str) -> str:
    """Return the relaxed comparison form of a configuration key.

    Args:
        key: Raw configuration key or field name.

    Returns:
        str: Lowercased key with `-` and `_` removed.
    """

    return key.strip().lower().replace("-", "").replace("_", "")


def config_bind_properties(holder_type: type[PropertyHolderT], source: Mapping[str, str]) -> PropertyHolderT:
    """Populate one property holder from the keys under its prefix.

    Args:
        holder_type: Property holder class to instantiate.
        source: Flat key/value configuration source.

    Returns:
        PropertyHolderT: Frozen holder; absent keys leave fields at their defaults.

    Raises:
        ConfigurationBindingError: Raised when a value cannot be coerced to its field type.
    """

    prefix = holder_type.properties_prefix
    normalized_prefix = config_normalize_key(prefix) + "."
    field_lookup = {config_normalize_key(field_name): field_name for field_name in holder_type.model_fields}

    field_values: dict[str, object] = {}
    ignored_keys: list[str] = []
    for key, value in source.items():
        normalized_key = config_normalize_key(key)
        if not normalized_key.startswith(normalized_prefix):
            continue
        field_name = field_lookup.get(normalized_key[len(normalized_prefix) :])
        if field_name is None:
            ignored_keys.append(key)
            continue
        field_values[field_name] = value

    if ignored_keys:
        logger.warning(
            "Ignoring unknown keys under prefix `%s`: %s",
            prefix,
            ", ".join(sorted(ignored_keys)),
        )

    try:
        return holder_type.model_validate(field_values)
    except ValidationError as error:
        raise ConfigurationBindingError(
            f"Failed to bind properties with prefix `{prefix}` to {holder_type.__name__}. Details: {error}",
            prefix=prefix,
        ) from error


class BoundProperties:
    """Immutable container of property holders bound once at startup."""

    def __init__(self, holders: Mapping[type[PropertyHolder], PropertyHolder]):
        """Initialize the container.

        Args:
            holders: Bound holder instances keyed by their holder type.

        Raises:
            ValueError: Raised when a holder is not an instance of its key type.
        """

        for holder_type, holder in holders.items():
            if not isinstance(holder, holder_type):
                raise ValueError(f"holder for {holder_type.__name__} must be an instance of that type")
        self._holders = MappingProxyType(dict(holders))

    def config_get(self, holder_type: type[PropertyHolderT]) -> PropertyHolderT:
        """Return the bound holder of the requested type.

        Args:
            holder_type: Registered property holder class.

        Returns:
            PropertyHolderT: Bound holder instance.

        Raises:
            ConfigurationBindingError: Raised when the type was not registered.
        """

        try:
            return self._holders[holder_type]  # type: ignore[return-value]
        except KeyError as error:
            raise ConfigurationBindingError(
                f"No bound properties registered for {holder_type.__name__}",
                prefix=holder_type.properties_prefix,
            ) from error

    def __contains__(self, holder_type: object) -> bool:
        return holder_type in self._holders

    def __iter__(self) -> Iterator[type[PropertyHolder]]:
        return iter(self._holders)

    def __len__(self) -> int:
        return len(self._holders)

    def __repr__(self) -> str:
        return f"BoundProperties({list(self._holders.values())!r})"


def config_bind_registration(registration: PropertiesRegistration, source: Mapping[str, str]) -> BoundProperties:
    """Bind every holder type declared by a registration.

    Args:
        registration: Closed set of holder types to populate.
        source: Flat key/value configuration source.

    Returns:
        BoundProperties: Container with one bound holder per registered type.

    Raises:
        ConfigurationBindingError: Raised when any holder fails to bind.
    """

    holders: dict[type[PropertyHolder], PropertyHolder] = {}
    for holder_type in registration.holder_types:
        holders[holder_type] = config_bind_properties(holder_type, source)
        logger.info("Bound %s from prefix `%s`", holder_type.__name__, holder_type.properties_prefix)
    return BoundProperties(holders)
