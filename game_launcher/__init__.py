"""
Game Launcher - checks for updates, installs them and starts the game.
"""

__version__ = "1.0.0"
__author__ = "Game Launcher Team"
__email__ = "dev@example.com"


def get_info() -> dict:
    """Returns basic application information."""
    return {
        "name": "Game Launcher",
        "version": __version__,
        "description": "Desktop launcher that keeps a game up to date and starts it.",
        "author": __author__,
        "email": __email__,
    }


from .config import Config
from .core.exceptions import (ArchiveError, ExecutableMissing, FileSystemError,
                              LauncherError, LaunchError, NetworkError)
from .core.game import GameLauncher
from .core.models import (PipelineState, ProgressEvent, UpdateOutcome,
                          UpdatePhase, VersionCheckResult)
from .core.pipeline import UpdatePipeline
from .core.progress import ProgressChannel
from .updates.checker import VersionChecker
from .updates.http import HttpClient
from .updates.installer import UpdateInstaller


def build_pipeline(config: Config, http_client: HttpClient = None):
    """Wire the checker, installer and progress channel from configuration."""
    install_dir = config.game.resolve_install_dir()
    http_client = http_client or HttpClient(request_timeout=config.updates.request_timeout)
    checker = VersionChecker(config.updates, http_client, install_dir)
    installer = UpdateInstaller(config.updates, http_client, install_dir, version_checker=checker)
    return UpdatePipeline(checker, installer, ProgressChannel())


__all__ = [
    "__version__",
    "get_info",
    "build_pipeline",
    "Config",
    "LauncherError",
    "NetworkError",
    "FileSystemError",
    "ArchiveError",
    "ExecutableMissing",
    "LaunchError",
    "GameLauncher",
    "PipelineState",
    "ProgressEvent",
    "UpdateOutcome",
    "UpdatePhase",
    "VersionCheckResult",
    "UpdatePipeline",
    "ProgressChannel",
    "VersionChecker",
    "HttpClient",
    "UpdateInstaller",
]
