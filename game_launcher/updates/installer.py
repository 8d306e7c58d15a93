import asyncio
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Optional

from ..config import UpdateConfig
from ..core.exceptions import ArchiveError, FileSystemError
from ..core.interfaces import PackageInstaller
from ..core.models import UpdatePhase
from ..utils.logging import get_logger
from .checker import VersionChecker
from .downloader import UpdateDownloader
from .http import HttpClient


class UpdateInstaller(PackageInstaller):
    """Downloads the update archive, extracts it over the installation and cleans up."""

    def __init__(self, config: UpdateConfig, http_client: HttpClient, install_dir: Path,
                 version_checker: Optional[VersionChecker] = None,
                 temp_dir: Optional[Path] = None):
        self.config = config
        self.install_dir = Path(install_dir)
        self.version_checker = version_checker
        self.temp_archive = Path(temp_dir or tempfile.gettempdir()) / config.temp_archive_name
        self.downloader = UpdateDownloader(http_client, chunk_size=config.chunk_size)
        self.logger = get_logger(__name__)

    async def download_and_install(self,
                                   progress_callback: Optional[Callable[[Optional[int], str], None]] = None,
                                   version_token: Optional[str] = None) -> None:
        """
        Install an update.

        Args:
            progress_callback: Optional callback receiving (percent, phase);
                percent is None while progress is indeterminate
            version_token: Version to record in the local marker once installed

        Raises:
            NetworkError, FileSystemError or ArchiveError. The staged archive is
            removed in every case; already extracted files are not reverted.
        """
        report = progress_callback or (lambda percent, phase: None)

        try:
            await self.downloader.download(self.config.archive_url, self.temp_archive, report)

            report(None, UpdatePhase.EXTRACTING.value)
            loop = asyncio.get_running_loop()
            extracted = await loop.run_in_executor(None, self.extract_archive, self.temp_archive)
            self.logger.info(f"Extracted {extracted} entries into {self.install_dir}")
        finally:
            self._remove_temp_archive()

        if version_token is not None and self.version_checker is not None:
            self.version_checker.write_local_version(version_token)

        report(100, UpdatePhase.INSTALLED.value)
        self.logger.info("Update installed.")

    def extract_archive(self, archive_path: Path) -> int:
        """
        Extract every entry of the archive into the installation directory,
        one after another, overwriting existing files.

        Returns:
            Number of entries extracted
        """
        install_root = self.install_dir.resolve()
        extracted = 0

        try:
            with zipfile.ZipFile(archive_path, 'r') as zip_ref:
                for member in zip_ref.infolist():
                    target = (install_root / member.filename).resolve()
                    if target != install_root and install_root not in target.parents:
                        self.logger.warning(f"Skipping archive entry outside install dir: {member.filename}")
                        continue
                    zip_ref.extract(member, install_root)
                    extracted += 1
        except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as e:
            raise ArchiveError(f"Update archive is corrupt: {e}") from e
        except PermissionError as e:
            raise FileSystemError(f"Cannot write game files: {e}", str(install_root)) from e
        except OSError as e:
            raise ArchiveError(f"Extraction failed: {e}") from e

        return extracted

    def _remove_temp_archive(self):
        try:
            self.temp_archive.unlink()
            self.logger.debug(f"Removed staged archive {self.temp_archive}")
        except FileNotFoundError:
            pass
        except OSError as e:
            self.logger.error(f"Could not remove staged archive {self.temp_archive}: {e}")
