from abc import ABC, abstractmethod
from typing import Callable, Optional

from .models import VersionCheckResult


class VersionSource(ABC):
    """Abstract base class for version checkers."""

    @abstractmethod
    async def check(self) -> VersionCheckResult:
        """Compare the installed version with the latest one. Never raises."""
        pass

    @abstractmethod
    async def fetch_remote_version(self) -> str:
        """Fetch the latest version token. Raises NetworkError."""
        pass

    async def is_update_available(self) -> bool:
        result = await self.check()
        return result.update_available


class PackageInstaller(ABC):
    """Abstract base class for update installers."""

    @abstractmethod
    async def download_and_install(self,
                                   progress_callback: Optional[Callable[[Optional[int], str], None]] = None,
                                   version_token: Optional[str] = None) -> None:
        """Download, extract and finalize an update. Raises LauncherError."""
        pass
