"""Typed property holders populated from prefixed configuration keys.

Each holder is a flat, immutable record whose fields are filled from the keys
sharing its `properties_prefix`. Holders perform no parsing or validation of
their own beyond the string coercion applied during binding.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class PropertyHolder(BaseModel):
    """Base model for prefix-addressed configuration records.

    Attributes:
        properties_prefix: Key namespace segment addressing this holder.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    properties_prefix: ClassVar[str] = ""


class AppProperties(PropertyHolder):
    """Application identity values bound from `app.*` keys.

    Attributes:
        name: Application display name.
        version: Application version label.
    """

    properties_prefix: ClassVar[str] = "app"

    name: str = ""
    version: str = ""


class DatabaseProperties(PropertyHolder):
    """Database connection values bound from `database.*` keys.

    No URL well-formedness or credential checks are performed here.

    Attributes:
        url: Database connection URL.
        username: Database login name.
        password: Database login secret, hidden from `repr`.
    """

    properties_prefix: ClassVar[str] = "database"

    url: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)
