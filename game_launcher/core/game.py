import os
import subprocess
import sys
from pathlib import Path

from .exceptions import ExecutableMissing, LaunchError
from ..utils.logging import get_logger


class GameLauncher:
    """Starts the installed game as a detached process."""

    def __init__(self, install_dir: Path, executable: str):
        self.install_dir = Path(install_dir)
        self.executable_path = self.install_dir / executable
        self.logger = get_logger(__name__)

    def is_installed(self) -> bool:
        return self.executable_path.is_file()

    def launch(self):
        """
        Start the game with the OS default handling and return without waiting.

        Raises:
            ExecutableMissing: the executable is not in the installation directory
            LaunchError: the OS refused to start it
        """
        if not self.is_installed():
            self.logger.warning(f"Executable not found: {self.executable_path}")
            raise ExecutableMissing(str(self.executable_path))

        self.logger.info(f"Launching {self.executable_path}")
        try:
            if sys.platform == "win32":
                os.startfile(str(self.executable_path))
            elif sys.platform == "darwin":
                subprocess.Popen(["open", str(self.executable_path)], cwd=str(self.install_dir))
            else:
                subprocess.Popen([str(self.executable_path)], cwd=str(self.install_dir),
                                 start_new_session=True)
        except OSError as e:
            self.logger.error(f"Failed to launch game: {e}")
            raise LaunchError(f"Failed to launch game: {e}") from e
