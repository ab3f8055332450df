"""Tests for container wiring."""

import importlib
import sys

from bodycalc.adapters.json_file_storage import JsonFileStorage
from bodycalc.config import Settings
from bodycalc.containers import build_container
from bodycalc.services.lookup import lenient_lookup, strict_lookup


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.progress_service.storage, JsonFileStorage)
    assert container.progress_service.storage.path == settings.progress_store_path
    assert container.progress_service.storage_key == "bodycalc_progress"
    assert container.lookup_policy is lenient_lookup


def test_build_container_strict_policy(tmp_path) -> None:
    settings = Settings(
        progress_store_path=tmp_path / "progress.json", enum_key_policy="strict"
    )

    container = build_container(settings)

    assert container.lookup_policy is strict_lookup


def test_settings_read_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BODYCALC_PROGRESS_STORE_PATH", str(tmp_path / "env.json"))
    monkeypatch.setenv("BODYCALC_CHART_LIMIT", "12")

    settings = Settings()

    assert settings.progress_store_path == tmp_path / "env.json"
    assert settings.chart_limit == 12


def test_asgi_app_uses_environment_settings(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BODYCALC_PROGRESS_STORE_PATH", str(tmp_path / "asgi.json"))
    sys.modules.pop("bodycalc.api.asgi", None)

    asgi = importlib.import_module("bodycalc.api.asgi")

    container = asgi.app.state.container
    assert container.progress_service.storage.path == tmp_path / "asgi.json"
