"""Tests for startup wiring from a properties file to a served application."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from configmanager.bootstrap import bootstrap_create_application, bootstrap_load_properties
from configmanager.config import (
    AppProperties,
    ConfigurationSourceError,
    DatabaseProperties,
    RuntimeSettings,
)


def _build_settings(properties_file, required: bool = False) -> RuntimeSettings:
    """Create test settings pointing at a properties file.

    Args:
        properties_file: Path of the configuration source.
        required: Whether a missing file must fail startup.

    Returns:
        RuntimeSettings: Deterministic test settings.

    Raises:
        ValueError: Raised by RuntimeSettings when values are invalid.
    """

    return RuntimeSettings(
        _env_file=None,
        environment_name="test",
        properties_file=str(properties_file),
        properties_file_required=required,
    )


def test_bootstrap_serves_values_from_properties_file(tmp_path) -> None:
    """Bind a properties file at startup and serve its values.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate end-to-end startup binding.

    Raises:
        AssertionError: Raised when served values differ from the file.
    """

    properties_file = tmp_path / "application.properties"
    properties_file.write_text(
        "app.name=Config Manager\n"
        "app.version=1.0.0\n"
        "database.url=jdbc:mysql://db:3306/app\n"
        "database.username=root\n"
        "database.password=s3cret\n",
        encoding="utf-8",
    )

    client = TestClient(bootstrap_create_application(settings=_build_settings(properties_file)))

    assert client.get("/info").text == "App Name: Config Manager, Version: 1.0.0"
    assert client.get("/dbinfo").text == "DB URL: jdbc:mysql://db:3306/app, Username: root"


def test_bootstrap_loads_yaml_source(tmp_path) -> None:
    """Bind a hierarchical YAML source to the same holders.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate YAML binding.

    Raises:
        AssertionError: Raised when YAML values are not bound.
    """

    properties_file = tmp_path / "application.yaml"
    properties_file.write_text(
        "app:\n  name: demo\n  version: '2'\ndatabase:\n  url: sqlite://\n  username: sa\n",
        encoding="utf-8",
    )

    bound_properties = bootstrap_load_properties(_build_settings(properties_file))

    assert bound_properties.config_get(AppProperties) == AppProperties(name="demo", version="2")
    assert bound_properties.config_get(DatabaseProperties).username == "sa"


def test_bootstrap_missing_optional_file_binds_defaults(tmp_path) -> None:
    """Start with empty defaults when the optional source file is absent.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate default binding.

    Raises:
        AssertionError: Raised when startup fails or values are not empty.
    """

    client = TestClient(bootstrap_create_application(settings=_build_settings(tmp_path / "absent.properties")))

    assert client.get("/info").text == "App Name: , Version: "
    assert client.get("/dbinfo").text == "DB URL: , Username: "


def test_bootstrap_missing_required_file_fails_startup(tmp_path) -> None:
    """Fail startup when a required source file is absent.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate fatal startup behavior.

    Raises:
        AssertionError: Raised when startup succeeds without the file.
    """

    with pytest.raises(ConfigurationSourceError):
        bootstrap_create_application(settings=_build_settings(tmp_path / "absent.properties", required=True))


def test_bootstrap_loads_settings_from_environment(tmp_path, monkeypatch) -> None:
    """Resolve the source path from the environment when settings are omitted.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest environment patching fixture.

    Returns:
        None: Assertions validate environment-driven startup.

    Raises:
        AssertionError: Raised when the environment path is not used.
    """

    properties_file = tmp_path / "custom.properties"
    properties_file.write_text("app.name=from-env\n", encoding="utf-8")
    monkeypatch.setenv("PROPERTIES_FILE", str(properties_file))

    client = TestClient(bootstrap_create_application())

    assert client.get("/info").text == "App Name: from-env, Version: "


def test_bootstrap_serves_unquoted_yaml_scalars_verbatim(tmp_path) -> None:
    """Serve unquoted YAML values exactly as written in the source.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate verbatim end-to-end rendering.

    Raises:
        AssertionError: Raised when YAML typing alters rendered values.
    """

    properties_file = tmp_path / "application.yml"
    properties_file.write_text("app:\n  name: on\n  version: 1.10\n", encoding="utf-8")

    client = TestClient(bootstrap_create_application(settings=_build_settings(properties_file)))

    assert client.get("/info").text == "App Name: on, Version: 1.10"
