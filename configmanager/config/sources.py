"""Readers turning configuration files into flat key/value sources.

Two source formats are supported:

- properties-style `key=value` text (`.properties`)
- hierarchical YAML documents (`.yml`, `.yaml`) flattened into dotted keys

Every reader returns a `dict[str, str]`; no value transformation happens after
the format's own escape and scalar rules have been applied.
"""

from __future__ import annotations

import logging
import re
import string
from pathlib import Path
from typing import Any, Final, Iterator, Mapping

import yaml

from .errors import ConfigurationSourceError

logger = logging.getLogger(__name__)

PROPERTIES_SUFFIXES: Final[frozenset[str]] = frozenset({".properties"})
YAML_SUFFIXES: Final[frozenset[str]] = frozenset({".yml", ".yaml"})

_PROPERTIES_WHITESPACE: Final[str] = " \t\f"
_PROPERTIES_KEY_TERMINATORS: Final[str] = "=:" + _PROPERTIES_WHITESPACE
_PROPERTIES_ESCAPES: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK_PATTERN: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def config_parse_properties_text(text: str) -> dict[str, str]:
    """Parse properties-style text into a flat key/value mapping.

    Args:
        text: Raw properties document.

    Returns:
        dict[str, str]: Parsed keys and values; later duplicates override earlier ones.

    Raises:
        ConfigurationSourceError: Raised when a `\\uXXXX` escape is malformed.
    """

    parsed_values: dict[str, str] = {}
    for logical_line in _properties_logical_lines(text):
        key, value = _properties_split_entry(logical_line)
        parsed_values[key] = value
    return parsed_values


def _properties_logical_lines(text: str) -> Iterator[str]:
    buffer = ""
    continuing = False
    for natural_line in _LINE_BREAK_PATTERN.split(text):
        line = natural_line.lstrip(_PROPERTIES_WHITESPACE)
        if not continuing and (not line or line[0] in "#!"):
            continue

        buffer = buffer + line if continuing else line
        trailing_backslashes = len(line) - len(line.rstrip("\\"))
        if trailing_backslashes % 2 == 1:
            buffer = buffer[:-1]
            continuing = True
            continue

        continuing = False
        yield buffer
        buffer = ""

    if continuing:
        yield buffer


def _properties_split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        character = line[index]
        if character == "\\":
            index += 2
            continue
        if character in _PROPERTIES_KEY_TERMINATORS:
            break
        index += 1

    raw_key = line[:index]
    remainder = line[index:].lstrip(_PROPERTIES_WHITESPACE)
    if remainder and remainder[0] in "=:":
        remainder = remainder[1:].lstrip(_PROPERTIES_WHITESPACE)
    return _properties_unescape(raw_key), _properties_unescape(remainder)


def _properties_unescape(value: str) -> str:
    characters: list[str] = []
    index = 0
    while index < len(value):
        character = value[index]
        if character != "\\":
            characters.append(character)
            index += 1
            continue

        index += 1
        if index >= len(value):
            break
        escaped = value[index]
        if escaped == "u":
            digits = value[index + 1 : index + 5]
            if len(digits) != 4 or any(digit not in string.hexdigits for digit in digits):
                raise ConfigurationSourceError(f"Malformed \\uxxxx escape in properties entry: {value!r}")
            characters.append(chr(int(digits, 16)))
            index += 5
            continue
        characters.append(_PROPERTIES_ESCAPES.get(escaped, escaped))
        index += 1
    return "".join(characters)


def config_flatten_mapping(mapping: Mapping[Any, Any], parent_key: str = "") -> dict[str, str]:
    """Flatten a hierarchical mapping into dotted keys with text values.

    Nested mappings join their keys with `.`, sequence items are addressed as
    `key[index]` and `None` renders as an empty string. Other scalars are
    rendered with `str`; YAML sources arrive here as text already.

    Args:
        mapping: Hierarchical document, typically parsed YAML.
        parent_key: Key prefix for nested recursion.

    Returns:
        dict[str, str]: Flat key/value mapping.
    """

    flattened: dict[str, str] = {}
    for key, value in mapping.items():
        full_key = f"{parent_key}.{key}" if parent_key else str(key)
        _flatten_value(full_key, value, flattened)
    return flattened


def _flatten_value(key: str, value: Any, flattened: dict[str, str]) -> None:
    if isinstance(value, Mapping):
        flattened.update(config_flatten_mapping(value, parent_key=key))
    elif isinstance(value, (list, tuple)):
        for item_index, item in enumerate(value):
            _flatten_value(f"{key}[{item_index}]", item, flattened)
    elif value is None:
        flattened[key] = ""
    else:
        flattened[key] = str(value)


def config_load_source(
    path: str | Path,
    encoding: str = "utf-8",
    missing_ok: bool = False,
) -> dict[str, str]:
    """Read one configuration file into a flat key/value source.

    Args:
        path: Source file path; the suffix selects the reader.
        encoding: Text encoding of the file.
        missing_ok: Return an empty source instead of failing when the file is absent.

    Returns:
        dict[str, str]: Flat key/value source.

    Raises:
        ConfigurationSourceError: Raised when the file is missing (and not allowed to be),
            unreadable, malformed or of an unsupported format.
    """

    source_path = Path(path)
    suffix = source_path.suffix.lower()
    if suffix not in PROPERTIES_SUFFIXES | YAML_SUFFIXES:
        raise ConfigurationSourceError(
            f"Unsupported configuration source format `{suffix or '<none>'}`. "
            "Use a .properties, .yml or .yaml file.",
            source_label=str(source_path),
        )

    if not source_path.exists():
        if missing_ok:
            logger.warning("Configuration source %s not found; binding defaults only", source_path)
            return {}
        raise ConfigurationSourceError(
            f"Configuration source not found: {source_path}",
            source_label=str(source_path),
        )

    try:
        text = source_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as error:
        raise ConfigurationSourceError(
            f"Configuration source could not be read: {source_path}. Details: {error}",
            source_label=str(source_path),
        ) from error

    text = text.removeprefix("\ufeff")

    if suffix in PROPERTIES_SUFFIXES:
        source = config_parse_properties_text(text)
    else:
        source = _config_parse_yaml_text(text, source_label=str(source_path))

    logger.info("Loaded %d configuration keys from %s", len(source), source_path)
    return source


def _config_parse_yaml_text(text: str, source_label: str) -> dict[str, str]:
    try:
        document = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as error:
        raise ConfigurationSourceError(
            f"Configuration source is not valid YAML: {source_label}. Details: {error}",
            source_label=source_label,
        ) from error

    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise ConfigurationSourceError(
            f"Configuration source root must be a mapping: {source_label}",
            source_label=source_label,
        )
    return config_flatten_mapping(document)
