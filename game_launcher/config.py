"""
Configuration management for the game launcher.
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional
from urllib.parse import urlsplit, urlunsplit

from .utils.logging import get_logger, DEFAULT_LOG_FILE
from .utils.validators import FileNameValidator, URLValidator

DEFAULT_CHUNK_SIZE = 8192


@dataclass
class GameConfig:
    """Where the game lives and what to start."""
    executable: str = "MyGame.exe"
    install_dir: str = ""  # Empty means the current working directory

    def resolve_install_dir(self) -> Path:
        return Path(self.install_dir) if self.install_dir else Path(os.getcwd())


@dataclass
class UpdateConfig:
    """Configuration for the update pipeline."""
    archive_url: str = "https://yourwebsite.com/update/latest.zip"
    version_url: str = ""  # Empty means derived from archive_url
    version_file: str = "version.txt"
    temp_archive_name: str = "game_update.zip"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    request_timeout: int = 30
    check_on_startup: bool = False

    def resolve_version_url(self) -> str:
        """The remote version token lives next to the archive, as version.txt."""
        if self.version_url:
            return self.version_url
        return derive_version_url(self.archive_url)


@dataclass
class UIConfig:
    """Configuration for the launcher window."""
    window_title: str = "My Game Launcher"
    window_width: int = 600
    window_height: int = 400


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file_path: str = DEFAULT_LOG_FILE
    max_file_size: int = 5 * 1024 * 1024
    backup_count: int = 3


def derive_version_url(archive_url: str) -> str:
    """Replace the archive's file name with ``version.txt``, keeping the base path."""
    parts = urlsplit(archive_url)
    base_path, _, _ = parts.path.rpartition("/")
    return urlunsplit((parts.scheme, parts.netloc, f"{base_path}/version.txt", "", ""))


class Config:
    """Main configuration class."""

    def __init__(self):
        self.game = GameConfig()
        self.updates = UpdateConfig()
        self.ui = UIConfig()
        self.logging = LoggingConfig()
        self.logger = get_logger(__name__)

    @classmethod
    def load_from_file(cls, config_path: Optional[str] = None) -> 'Config':
        """Load configuration from file, falling back to defaults."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_file = Path(config_path)
        config = cls()

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                config._update_from_dict(data)
                config.logger.info(f"Config loaded from {config_file}")

            except (OSError, ValueError) as e:
                config.logger.warning(f"Failed to load config from {config_file}: {e}")
                config.logger.info("Using default configuration")
        else:
            config.logger.info("No config file found, using defaults")

        return config

    def save_to_file(self, config_path: Optional[str] = None):
        """Save configuration to file."""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)

            self.logger.info(f"Config saved to {config_file}")

        except OSError as e:
            self.logger.error(f"Failed to save config to {config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'game': asdict(self.game),
            'updates': asdict(self.updates),
            'ui': asdict(self.ui),
            'logging': asdict(self.logging),
        }

    def _update_from_dict(self, data: Dict[str, Any]):
        """Update configuration from dictionary."""
        if 'game' in data:
            self._update_dataclass(self.game, data['game'])

        if 'updates' in data:
            self._update_dataclass(self.updates, data['updates'])

        if 'ui' in data:
            self._update_dataclass(self.ui, data['ui'])

        if 'logging' in data:
            self._update_dataclass(self.logging, data['logging'])

    def _update_dataclass(self, instance, data: Dict[str, Any]):
        """Update a dataclass instance from dictionary."""
        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
            else:
                self.logger.warning(f"Ignoring unknown config key '{key}'")

    @staticmethod
    def get_default_config_path() -> str:
        """Get the default configuration file path."""
        config_dir = Path.home() / ".config" / "game_launcher"
        return str(config_dir / "config.json")

    def validate(self) -> bool:
        """Validate configuration values, auto-fixing the ones that have a safe default."""
        errors = []
        fixed_values = []

        url_validator = URLValidator()
        name_validator = FileNameValidator()

        valid, error = url_validator.validate(self.updates.archive_url)
        if not valid:
            errors.append(f"updates.archive_url: {error}")

        if self.updates.version_url:
            valid, error = url_validator.validate(self.updates.version_url)
            if not valid:
                errors.append(f"updates.version_url: {error}")

        for field_name in ("version_file", "temp_archive_name"):
            valid, error = name_validator.validate(getattr(self.updates, field_name))
            if not valid:
                errors.append(f"updates.{field_name}: {error}")

        valid, error = name_validator.validate(self.game.executable)
        if not valid:
            errors.append(f"game.executable: {error}")

        if self.updates.chunk_size <= 0:
            self.updates.chunk_size = DEFAULT_CHUNK_SIZE
            fixed_values.append(f"chunk_size auto-fixed to {DEFAULT_CHUNK_SIZE} bytes")

        if self.updates.request_timeout <= 0:
            self.updates.request_timeout = 30
            fixed_values.append("request_timeout auto-fixed to 30 seconds")

        for fix in fixed_values:
            self.logger.info(f"Config auto-fix: {fix}")

        for error in errors:
            self.logger.error(f"Config validation error: {error}")

        return not errors
