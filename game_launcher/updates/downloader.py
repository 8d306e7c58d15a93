import asyncio
import aiohttp
from pathlib import Path
from typing import Optional, Callable

from ..core.exceptions import FileSystemError, NetworkError
from ..core.models import UpdatePhase
from ..utils.logging import get_logger
from .http import HttpClient


class UpdateDownloader:
    """Streams the update archive to disk."""

    def __init__(self, http_client: HttpClient, chunk_size: int = 8192):
        self.http_client = http_client
        self.chunk_size = chunk_size
        self.logger = get_logger(__name__)

    async def download(self, url: str, destination: Path,
                       progress_callback: Optional[Callable[[Optional[int], str], None]] = None) -> int:
        """
        Download ``url`` into ``destination`` chunk by chunk.

        Args:
            url: Archive URL
            destination: File to write (created or truncated)
            progress_callback: Optional callback receiving (percent, "downloading");
                only called with a numeric percent when the server advertises a length

        Returns:
            Number of bytes written
        """
        self.logger.info(f"Downloading update from {url} to {destination}")
        session = await self.http_client.get_session()

        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise NetworkError(f"Download failed with status {response.status}",
                                       url=url, status=response.status)

                total_size = _content_length(response)
                downloaded = 0

                if progress_callback and total_size <= 0:
                    # Unknown length: report the phase without a percentage
                    progress_callback(None, UpdatePhase.DOWNLOADING.value)

                try:
                    f = open(destination, 'wb')
                except OSError as e:
                    raise FileSystemError(f"Cannot create {destination}: {e}", str(destination)) from e

                with f:
                    async for chunk in response.content.iter_chunked(self.chunk_size):
                        try:
                            f.write(chunk)
                        except OSError as e:
                            raise FileSystemError(f"Cannot write {destination}: {e}", str(destination)) from e
                        downloaded += len(chunk)

                        if progress_callback and total_size > 0:
                            percent = min(100, downloaded * 100 // total_size)
                            progress_callback(percent, UpdatePhase.DOWNLOADING.value)

        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error during download: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise NetworkError("Timeout during download", url=url) from e

        self.logger.info(f"Download completed: {downloaded} bytes written to {destination}")
        return downloaded


def _content_length(response) -> int:
    """Advertised body size, or 0 when missing or unparsable."""
    try:
        return max(0, int(response.headers.get('Content-Length', 0)))
    except (TypeError, ValueError):
        return 0
