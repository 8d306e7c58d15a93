"""
Tests for starting the game executable.
"""

from unittest.mock import patch

import pytest

from game_launcher.core.exceptions import ExecutableMissing, LaunchError
from game_launcher.core.game import GameLauncher


class TestGameLauncher:
    """Test GameLauncher functionality."""

    def test_missing_executable(self, install_dir):
        game = GameLauncher(install_dir, "MyGame.exe")

        assert game.is_installed() is False
        with pytest.raises(ExecutableMissing) as exc_info:
            game.launch()
        assert exc_info.value.path.endswith("MyGame.exe")

    def test_launch_is_detached(self, install_dir):
        (install_dir / "MyGame.exe").write_bytes(b"game")
        game = GameLauncher(install_dir, "MyGame.exe")

        with patch("game_launcher.core.game.sys.platform", "linux"), \
                patch("game_launcher.core.game.subprocess.Popen") as popen:
            game.launch()

        popen.assert_called_once()
        args, kwargs = popen.call_args
        assert args[0] == [str(install_dir / "MyGame.exe")]
        assert kwargs["start_new_session"] is True
        assert kwargs["cwd"] == str(install_dir)

    def test_os_error_becomes_launch_error(self, install_dir):
        (install_dir / "MyGame.exe").write_bytes(b"game")
        game = GameLauncher(install_dir, "MyGame.exe")

        with patch("game_launcher.core.game.sys.platform", "linux"), \
                patch("game_launcher.core.game.subprocess.Popen", side_effect=PermissionError("denied")):
            with pytest.raises(LaunchError):
                game.launch()
