"""Data models for the update pipeline and launcher status."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import (ArchiveError, ExecutableMissing, LauncherError,
                         LaunchError, NetworkError)


class PipelineState(Enum):
    """Lifecycle of one update pipeline execution."""
    IDLE = "idle"
    CHECKING_VERSION = "checking_version"
    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    FINALIZING = "finalizing"
    FAILED = "failed"
    SUCCEEDED = "succeeded"

    @property
    def is_active(self) -> bool:
        """True while a pipeline execution is in flight."""
        return self in [
            PipelineState.CHECKING_VERSION,
            PipelineState.DOWNLOADING,
            PipelineState.EXTRACTING,
            PipelineState.FINALIZING,
        ]

    @property
    def is_terminal(self) -> bool:
        return self in [PipelineState.FAILED, PipelineState.SUCCEEDED]


class UpdatePhase(Enum):
    """Phase names reported through the progress stream."""
    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    INSTALLED = "installed"


@dataclass(frozen=True)
class ProgressEvent:
    """One progress notification. ``percent`` is None for indeterminate progress."""
    phase: UpdatePhase
    percent: Optional[int] = None

    @property
    def is_indeterminate(self) -> bool:
        return self.percent is None


@dataclass
class VersionCheckResult:
    """Outcome of comparing the local version marker with the remote token."""
    update_available: bool
    local_version: Optional[str] = None
    remote_version: Optional[str] = None
    error: Optional[LauncherError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class UpdateOutcome(Enum):
    """Terminal states visible to the user, each with exactly one status string."""
    UP_TO_DATE = "up_to_date"
    UPDATED = "updated"
    NETWORK_ERROR = "network_error"
    FILESYSTEM_ERROR = "filesystem_error"
    EXTRACT_ERROR = "extract_error"
    UNEXPECTED_ERROR = "unexpected_error"
    EXECUTABLE_MISSING = "executable_missing"
    LAUNCHED = "launched"
    LAUNCH_FAILED = "launch_failed"
    BUSY = "busy"

    @property
    def status_message(self) -> str:
        """Get the user-facing status line for this outcome."""
        status_map = {
            UpdateOutcome.UP_TO_DATE: "Game is up to date!",
            UpdateOutcome.UPDATED: "Update complete!",
            UpdateOutcome.NETWORK_ERROR: "Update failed: could not reach the update server.",
            UpdateOutcome.FILESYSTEM_ERROR: "Update failed: could not write game files.",
            UpdateOutcome.EXTRACT_ERROR: "Update failed: the update archive is damaged.",
            UpdateOutcome.UNEXPECTED_ERROR: "Update failed: unexpected error.",
            UpdateOutcome.EXECUTABLE_MISSING: "Game executable not found!",
            UpdateOutcome.LAUNCHED: "Starting game...",
            UpdateOutcome.LAUNCH_FAILED: "Failed to start the game.",
            UpdateOutcome.BUSY: "An update is already in progress.",
        }
        return status_map[self]

    @property
    def is_error(self) -> bool:
        return self in [
            UpdateOutcome.NETWORK_ERROR,
            UpdateOutcome.FILESYSTEM_ERROR,
            UpdateOutcome.EXTRACT_ERROR,
            UpdateOutcome.UNEXPECTED_ERROR,
            UpdateOutcome.EXECUTABLE_MISSING,
            UpdateOutcome.LAUNCH_FAILED,
        ]

    @classmethod
    def from_error(cls, error: LauncherError) -> 'UpdateOutcome':
        """Map a launcher error onto the terminal outcome it represents."""
        if isinstance(error, NetworkError):
            return cls.NETWORK_ERROR
        if isinstance(error, ArchiveError):
            return cls.EXTRACT_ERROR
        if isinstance(error, ExecutableMissing):
            return cls.EXECUTABLE_MISSING
        if isinstance(error, LaunchError):
            return cls.LAUNCH_FAILED
        # FileSystemError and anything unclassified
        return cls.FILESYSTEM_ERROR
