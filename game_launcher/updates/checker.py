"""
Update checking functionality.
"""

import asyncio
import aiohttp
from pathlib import Path
from typing import Optional

from ..config import UpdateConfig
from ..core.exceptions import FileSystemError, LauncherError, NetworkError
from ..core.interfaces import VersionSource
from ..core.models import VersionCheckResult
from ..utils.logging import get_logger
from .http import HttpClient


class VersionChecker(VersionSource):
    """Compares the local version marker with the token published next to the archive."""

    def __init__(self, config: UpdateConfig, http_client: HttpClient, install_dir: Path):
        self.config = config
        self.http_client = http_client
        self.marker_path = Path(install_dir) / config.version_file
        self.version_url = config.resolve_version_url()
        self.logger = get_logger(__name__)

    def read_local_version(self) -> Optional[str]:
        """
        Read the full text of the local version marker.

        Returns:
            The marker content, or None if the marker does not exist
        """
        try:
            with open(self.marker_path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise FileSystemError(f"Cannot read version marker: {e}", str(self.marker_path)) from e

    def write_local_version(self, version: str):
        try:
            with open(self.marker_path, 'w', encoding='utf-8', newline='') as f:
                f.write(version)
        except OSError as e:
            raise FileSystemError(f"Cannot write version marker: {e}", str(self.marker_path)) from e
        self.logger.info(f"Version marker updated to '{version}'")

    async def fetch_remote_version(self) -> str:
        """Fetch the remote version token as text."""
        session = await self.http_client.get_session()
        try:
            async with session.get(self.version_url) as response:
                if not 200 <= response.status < 300:
                    raise NetworkError(
                        f"Version request failed with status {response.status}",
                        url=self.version_url, status=response.status)
                return await response.text()
        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error fetching version: {e}", url=self.version_url) from e
        except asyncio.TimeoutError as e:
            raise NetworkError("Timeout fetching version", url=self.version_url) from e

    async def check(self) -> VersionCheckResult:
        """Check if an update is available. Failures resolve to 'no update'."""
        try:
            local_version = self.read_local_version()
            if local_version is None:
                self.logger.info(f"No version marker at {self.marker_path}, update required.")
                return VersionCheckResult(update_available=True)

            self.logger.info(f"Checking for updates at {self.version_url} (installed: {local_version!r})...")
            remote_version = await self.fetch_remote_version()
        except LauncherError as e:
            self.logger.warning(f"Update check failed, assuming no update: {e}")
            return VersionCheckResult(update_available=False, error=e)
        except Exception as e:
            self.logger.error(f"Unexpected error during update check: {e}", exc_info=True)
            return VersionCheckResult(update_available=False, error=LauncherError(str(e)))

        update_available = remote_version != local_version
        if update_available:
            self.logger.info(f"New version found: {remote_version!r}")
        else:
            self.logger.info(f"Installed version {local_version!r} is up to date.")

        return VersionCheckResult(
            update_available=update_available,
            local_version=local_version,
            remote_version=remote_version,
        )
