"""Tests for YAML settings."""

from __future__ import annotations

from pathlib import Path

import yaml

from rooted.config.settings import Settings, default_config_path


class TestSettings:
    """Tests for Settings.load and Settings.save."""

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.defaults.recent_days == 7
        assert settings.defaults.height_unit == "in"
        assert settings.logging.level == "WARNING"
        assert settings.database.path.name == "rooted.db"

    def test_partial_file(self, tmp_path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text(yaml.dump({
            "defaults": {"recent_days": 14, "weight_unit": "kg"},
            "logging": {"level": "debug"},
        }))

        settings = Settings.load(config)
        assert settings.defaults.recent_days == 14
        assert settings.defaults.weight_unit == "kg"
        assert settings.defaults.height_unit == "in"
        assert settings.logging.level == "DEBUG"

    def test_empty_file(self, tmp_path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("")
        assert Settings.load(config).defaults.recent_days == 7

    def test_save_and_reload(self, tmp_path) -> None:
        settings = Settings()
        settings.database.path = tmp_path / "data.db"
        settings.defaults.height_unit = "cm"

        written = settings.save(tmp_path / "sub" / "config.yaml")
        loaded = Settings.load(written)

        assert loaded.database.path == tmp_path / "data.db"
        assert loaded.defaults.height_unit == "cm"

    def test_env_override(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("ROOTED_CONFIG", str(tmp_path / "custom.yaml"))
        assert default_config_path() == tmp_path / "custom.yaml"

    def test_default_path(self, monkeypatch) -> None:
        monkeypatch.delenv("ROOTED_CONFIG", raising=False)
        assert default_config_path() == Path.home() / ".rooted" / "config.yaml"
