"""Tests for the runtime entrypoint argument handling."""

from __future__ import annotations

import sys

import pytest
from fastapi.testclient import TestClient

from configmanager import main as main_module
from configmanager.config import SettingsLoadError


def test_main_rejects_blank_properties_file_override(monkeypatch) -> None:
    """Fail before serving when `--properties-file` is blank.

    Args:
        monkeypatch: Pytest attribute and environment patching fixture.

    Returns:
        None: Assertions validate startup failure.

    Raises:
        AssertionError: Raised when the server starts with a blank source path.
    """

    served: list[object] = []
    monkeypatch.setattr(main_module.uvicorn, "run", lambda application, **_: served.append(application))
    monkeypatch.setattr(sys, "argv", ["config-manager", "--properties-file", "   "])

    with pytest.raises(SettingsLoadError):
        main_module.main()
    assert served == []


def test_main_serves_with_stripped_properties_file_override(tmp_path, monkeypatch) -> None:
    """Bind the source named by a padded `--properties-file` override.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest attribute and environment patching fixture.

    Returns:
        None: Assertions validate override resolution.

    Raises:
        AssertionError: Raised when the override is not applied.
    """

    properties_file = tmp_path / "override.properties"
    properties_file.write_text("app.name=override\n", encoding="utf-8")
    captured: dict[str, object] = {}

    def _capture_run(application, **kwargs) -> None:
        captured["application"] = application
        captured.update(kwargs)

    monkeypatch.setenv("PROPERTIES_FILE_REQUIRED", "true")
    monkeypatch.setattr(main_module.uvicorn, "run", _capture_run)
    monkeypatch.setattr(sys, "argv", ["config-manager", "--properties-file", f"  {properties_file}  "])

    main_module.main()

    client = TestClient(captured["application"])
    assert client.get("/info").text == "App Name: override, Version: "
