"""Tests for the runtime configuration loader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from phishtank.config import settings


def _write_tmp_config(tmp_path: Path, content: str) -> Path:
    file_path = tmp_path / "conf.yaml"
    file_path.write_text(content, encoding="utf-8")
    return file_path


def test_env_overrides_take_effect(monkeypatch):
    monkeypatch.setenv("PHISHTANK_N_FISH", "42")
    conf = settings.load_runtime_settings(args=[], env=os.environ)
    assert conf.N_FISH == 42


def test_cli_overrides_take_precedence():
    conf = settings.load_runtime_settings(args=["--window-width", "1234"], env={})
    assert conf.WINDOW_WIDTH == 1234


def test_config_file_used_when_provided(tmp_path):
    config = _write_tmp_config(tmp_path, "window_width: 1600\nfps: 15\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env={})
    assert conf.WINDOW_WIDTH == 1600
    assert conf.FPS == 15


def test_config_path_from_env(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "sparkle_count: 12\n")
    monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(config))
    conf = settings.load_runtime_settings(args=[], env=os.environ)
    assert conf.SPARKLE_COUNT == 12


def test_env_overrides_config(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "detection_radius: 200\n")
    monkeypatch.setenv("PHISHTANK_DETECTION_RADIUS", "250")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env=os.environ)
    assert conf.DETECTION_RADIUS == 250.0


def test_cli_overrides_config_and_env(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "detection_radius: 200\n")
    monkeypatch.setenv("PHISHTANK_DETECTION_RADIUS", "250")
    conf = settings.load_runtime_settings(
        args=["--config", str(config), "--detection-radius", "275"],
        env=os.environ,
    )
    assert conf.DETECTION_RADIUS == 275.0


def test_feeding_flags():
    assert settings.load_runtime_settings(args=["--feeding"], env={}).FEEDING_MODE is True
    assert settings.load_runtime_settings(args=["--no-feeding"], env={}).FEEDING_MODE is False


def test_log_level_is_normalised(tmp_path):
    config = _write_tmp_config(tmp_path, "debug_log_level: debug\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env={})
    assert conf.DEBUG_LOG_LEVEL == "DEBUG"


def test_invalid_field_in_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "unknown_value: 1\n")
    with pytest.raises(ValueError, match="Unknown config field"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_missing_config_file_errors(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(FileNotFoundError):
        settings.load_runtime_settings(args=["--config", str(missing)], env={})


def test_invalid_numeric_range_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "window_width: 100000\n")
    with pytest.raises(ValueError, match="WINDOW_WIDTH"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_boolean_is_not_a_number(tmp_path):
    config = _write_tmp_config(tmp_path, "n_fish: true\n")
    with pytest.raises(ValueError, match="numeric"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_invalid_log_level_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "debug_log_level: chatty\n")
    with pytest.raises(ValueError, match="DEBUG_LOG_LEVEL"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_invalid_relationship_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "detection_radius: 20\neat_radius: 30\n")
    with pytest.raises(ValueError, match="EAT_RADIUS must be smaller than DETECTION_RADIUS"):
        settings.load_runtime_settings(args=["--config", str(config)], env={})


def test_apply_runtime_settings_updates_module_values():
    original = settings.current_settings()
    try:
        updated = original.with_updates({"N_FISH": 3, "STEER_BLEND": 0.5})
        settings.apply_runtime_settings(updated)
        assert settings.current_settings() is updated
        assert settings.N_FISH == 3
        assert settings.STEER_BLEND == 0.5
    finally:
        settings.apply_runtime_settings(original)
