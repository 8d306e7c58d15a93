"""Error taxonomy for the launcher and its update pipeline."""


class LauncherError(Exception):
    """Base class for every error the launcher reports to the user."""
    pass


class NetworkError(LauncherError):
    """Transport failure or non-success HTTP status."""

    def __init__(self, message: str, url: str = "", status: int = 0):
        super().__init__(message)
        self.url = url
        self.status = status


class FileSystemError(LauncherError):
    """Unreadable or unwritable path, permission failure."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class ArchiveError(LauncherError):
    """Malformed archive or I/O failure while extracting it."""
    pass


class ExecutableMissing(LauncherError):
    """The game executable is absent from the installation directory."""

    def __init__(self, path: str):
        super().__init__(f"Game executable not found: {path}")
        self.path = path


class LaunchError(LauncherError):
    """The OS refused to start the game executable."""
    pass
