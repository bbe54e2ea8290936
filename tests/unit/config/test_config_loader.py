"""Tests for config loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from fxcurve.core.config import AppConfig, detect_format, load_app_config, load_config
from fxcurve.core.config.loader import LOG_LEVEL_ENV_VAR


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known_formats(self, name: str, expected: str) -> None:
        assert detect_format(name) == expected

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("a.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("generator:\n  power: 3.0\n", encoding="utf-8")
        assert load_config(path) == {"generator": {"power": 3.0}}

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"render": {"values_per_row": 8}}), encoding="utf-8")
        assert load_config(path) == {"render": {"values_per_row": 8}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """An empty YAML file is an empty mapping."""
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_yaml_list_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected mapping"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_defaults_without_file(self, clean_env: Path) -> None:
        """Without a config file every default applies."""
        config = load_app_config()
        assert config == AppConfig()
        assert config.logging.level == "WARNING"
        assert config.generator.end_frame == 160

    def test_default_path_used(self, clean_env: Path) -> None:
        (clean_env / "fxcurve.yaml").write_text("generator:\n  cycles: 3\n", encoding="utf-8")
        assert load_app_config().generator.cycles == 3.0

    def test_explicit_path(self, clean_env: Path) -> None:
        """Unknown top-level sections are ignored."""
        path = clean_env / "custom.yml"
        path.write_text(
            "logging:\n  level: DEBUG\ngenerator:\n  start_val: 10\n  end_val: 20\n"
            "unknown_section: true\n",
            encoding="utf-8",
        )
        config = load_app_config(path)
        assert config.logging.level == "DEBUG"
        assert config.generator.start_val == 10.0
        assert config.generator.end_val == 20.0

    def test_explicit_path_must_exist(self, clean_env: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_app_config(clean_env / "missing.yaml")

    def test_unknown_generator_field(self, clean_env: Path) -> None:
        path = clean_env / "bad.yaml"
        path.write_text("generator:\n  wobble: 1\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_invalid_level(self, clean_env: Path) -> None:
        path = clean_env / "bad.yaml"
        path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_env_override(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment variable overrides the configured level."""
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert load_app_config().logging.level == "DEBUG"
