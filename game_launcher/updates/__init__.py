"""
Update system: version check, streamed download and archive installation.
"""

from .checker import VersionChecker
from .downloader import UpdateDownloader
from .http import HttpClient
from .installer import UpdateInstaller

__all__ = ["VersionChecker", "UpdateDownloader", "HttpClient", "UpdateInstaller"]
