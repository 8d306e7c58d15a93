"""
Core update pipeline and launcher logic.
"""

from .exceptions import (ArchiveError, ExecutableMissing, FileSystemError,
                         LauncherError, LaunchError, NetworkError)
from .game import GameLauncher
from .models import (PipelineState, ProgressEvent, UpdateOutcome, UpdatePhase,
                     VersionCheckResult)
from .pipeline import UpdatePipeline
from .progress import ProgressChannel

__all__ = [
    "LauncherError", "NetworkError", "FileSystemError", "ArchiveError",
    "ExecutableMissing", "LaunchError",
    "GameLauncher",
    "PipelineState", "ProgressEvent", "UpdateOutcome", "UpdatePhase", "VersionCheckResult",
    "UpdatePipeline", "ProgressChannel",
]
