"""Application settings and configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CONFIG_ENV_VAR = "ROOTED_CONFIG"


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".rooted"


def _default_db_path() -> Path:
    """Return the default database path."""
    return _default_config_dir() / "rooted.db"


def default_config_path() -> Path:
    """Return the config file path, honoring the ROOTED_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return _default_config_dir() / "config.yaml"


@dataclass
class DatabaseConfig:
    """Database configuration."""

    path: Path = field(default_factory=_default_db_path)


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    height_unit: str = "in"  # "in", "cm", "ft"
    weight_unit: str = "lbs"  # "lbs", "kg"
    recent_days: int = 7
    output_format: str = "table"  # "table", "json"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses $ROOTED_CONFIG
                or ~/.rooted/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse database config
        if "database" in data:
            db_data = data["database"] or {}
            if db_data.get("path"):
                settings.database.path = Path(db_data["path"]).expanduser()

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "height_unit" in def_data:
                settings.defaults.height_unit = def_data["height_unit"]
            if "weight_unit" in def_data:
                settings.defaults.weight_unit = def_data["weight_unit"]
            if "recent_days" in def_data:
                settings.defaults.recent_days = int(def_data["recent_days"])
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        # Parse logging config
        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                settings.logging.level = str(log_data["level"]).upper()

        return settings

    def to_dict(self) -> dict:
        """Return settings in config-file layout."""
        return {
            "database": {
                "path": str(self.database.path),
            },
            "defaults": {
                "height_unit": self.defaults.height_unit,
                "weight_unit": self.defaults.weight_unit,
                "recent_days": self.defaults.recent_days,
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses the default path

        Returns:
            Path the settings were written to
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        return config_path


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
