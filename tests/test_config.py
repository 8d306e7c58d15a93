"""
Tests for configuration loading and validation.
"""

import json

import pytest

from game_launcher.config import Config, UpdateConfig, derive_version_url


class TestConfig:
    """Test Config functionality."""

    def test_defaults(self):
        config = Config()
        assert config.game.executable == "MyGame.exe"
        assert config.updates.version_file == "version.txt"
        assert config.updates.temp_archive_name == "game_update.zip"
        assert config.updates.chunk_size == 8192

    @pytest.mark.parametrize("archive_url, expected", [
        ("https://yourwebsite.com/update/latest.zip", "https://yourwebsite.com/update/version.txt"),
        ("https://cdn.example.com/game.zip", "https://cdn.example.com/version.txt"),
        ("http://host:8080/a/b/pkg.zip?token=1", "http://host:8080/a/b/version.txt"),
    ])
    def test_derive_version_url(self, archive_url, expected):
        assert derive_version_url(archive_url) == expected

    def test_explicit_version_url_wins(self):
        updates = UpdateConfig(version_url="https://other.example.com/v.txt")
        assert updates.resolve_version_url() == "https://other.example.com/v.txt"

    def test_install_dir_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert Config().game.resolve_install_dir() == tmp_path

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "game": {"executable": "Other.exe"},
            "updates": {"archive_url": "https://example.com/x/pkg.zip", "bogus": 1},
        }), encoding="utf-8")

        config = Config.load_from_file(str(config_file))

        assert config.game.executable == "Other.exe"
        assert config.updates.archive_url == "https://example.com/x/pkg.zip"
        assert not hasattr(config.updates, "bogus")

    def test_invalid_file_falls_back_to_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json", encoding="utf-8")

        config = Config.load_from_file(str(config_file))

        assert config.game.executable == "MyGame.exe"

    def test_save_and_reload(self, tmp_path):
        config_file = tmp_path / "nested" / "config.json"
        config = Config()
        config.updates.check_on_startup = True
        config.save_to_file(str(config_file))

        assert Config.load_from_file(str(config_file)).updates.check_on_startup is True

    def test_validate_auto_fixes_sizes(self):
        config = Config()
        config.updates.chunk_size = 0
        config.updates.request_timeout = -1

        assert config.validate() is True
        assert config.updates.chunk_size == 8192
        assert config.updates.request_timeout == 30

    @pytest.mark.parametrize("section, field, value", [
        ("updates", "archive_url", "ftp://example.com/pkg.zip"),
        ("updates", "archive_url", "not a url"),
        ("updates", "temp_archive_name", "../evil.zip"),
        ("game", "executable", ""),
    ])
    def test_validate_rejects_bad_values(self, section, field, value):
        config = Config()
        setattr(getattr(config, section), field, value)
        assert config.validate() is False


class TestValidators:
    """Test configuration validators."""

    def test_url_validator(self):
        from game_launcher.utils.validators import URLValidator

        validator = URLValidator()
        assert validator.is_valid("https://example.com/pkg.zip")
        assert not validator.is_valid("example.com/pkg.zip")
        assert not validator.is_valid(None)

    def test_file_name_validator(self):
        from game_launcher.utils.validators import FileNameValidator

        validator = FileNameValidator()
        assert validator.is_valid("version.txt")
        assert not validator.is_valid("sub/version.txt")
        assert not validator.is_valid("..")
