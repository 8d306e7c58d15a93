import aiohttp
from typing import Optional

from ..utils.logging import get_logger


class HttpClient:
    """
    Long-lived aiohttp session shared by the version checker and the installer.
    Created lazily on first use and released by ``close()`` at shutdown.
    """

    def __init__(self, request_timeout: int = 30, user_agent: str = "GameLauncher/1.0"):
        self.logger = get_logger(__name__)
        self.request_timeout = request_timeout
        self.user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp ClientSession."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={'User-Agent': self.user_agent},
                timeout=aiohttp.ClientTimeout(total=None, sock_connect=self.request_timeout,
                                              sock_read=self.request_timeout),
            )
        return self._session

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def close(self):
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self.logger.debug("HTTP session closed.")
        self._session = None
