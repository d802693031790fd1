"""Application settings loader from YAML configuration."""
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass

import yaml

from ledgercheck.utils.exceptions import ConfigError

DEFAULT_CONFIG_FILE = "config.yaml"


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str = "LedgerCheck"
    app_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_max_file_size_mb: int = 10
    log_backup_count: int = 5

    # Paths
    account_file: str = "account.json"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppSettings":
        """Load settings from YAML file.

        Without an explicit path, ``config.yaml`` in the working directory is
        used when present and built-in defaults otherwise.
        """
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILE)
            if not config_path.exists():
                return cls()
        elif not Path(config_path).exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed configuration file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

        if config is None:
            return cls()
        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file {config_path} must contain a mapping")

        return cls.from_dict(config)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AppSettings":
        """Build settings from a parsed config mapping, filling gaps with defaults."""
        defaults = cls()
        app = _section(config, "app")
        log = _section(config, "logging")
        paths = _section(config, "paths")

        try:
            settings = cls(
                app_name=app.get("name", defaults.app_name),
                app_version=str(app.get("version", defaults.app_version)),
                log_level=str(log.get("level", defaults.log_level)).upper(),
                log_file=log.get("log_file", defaults.log_file),
                log_max_file_size_mb=int(log.get("max_file_size_mb", defaults.log_max_file_size_mb)),
                log_backup_count=int(log.get("backup_count", defaults.log_backup_count)),
                account_file=paths.get("account_file", defaults.account_file)
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e

        if not isinstance(settings.account_file, str) or not settings.account_file:
            raise ConfigError("paths.account_file must be a non-empty string")

        if settings.log_file is not None and not isinstance(settings.log_file, str):
            raise ConfigError("logging.log_file must be a string")

        if not isinstance(logging.getLevelName(settings.log_level), int):
            raise ConfigError(f"Unknown log level: {settings.log_level}")

        return settings


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Configuration section '{name}' must be a mapping")
    return section

