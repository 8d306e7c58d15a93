"""
Pytest configuration and fixtures for game launcher tests.
"""

import asyncio
import io
import zipfile
from pathlib import Path
from typing import Dict, Optional
from unittest.mock import AsyncMock, Mock

import pytest

from game_launcher.config import Config, UpdateConfig
from game_launcher.updates.checker import VersionChecker
from game_launcher.updates.http import HttpClient
from game_launcher.updates.installer import UpdateInstaller

ARCHIVE_URL = "https://updates.example.com/update/latest.zip"
VERSION_URL = "https://updates.example.com/update/version.txt"


class AsyncContextManager:
    """Helper class for async context manager testing."""

    def __init__(self, return_value):
        self.return_value = return_value

    async def __aenter__(self):
        return self.return_value

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


def make_zip(files: Dict[str, bytes], size: Optional[int] = None) -> bytes:
    """Build a zip archive in memory, padded with a comment to exactly ``size`` bytes if given."""

    def build(comment: bytes) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_STORED) as zf:
            for name, data in files.items():
                zf.writestr(zipfile.ZipInfo(name, date_time=(2024, 1, 1, 0, 0, 0)), data)
            zf.comment = comment
        return buffer.getvalue()

    data = build(b"")
    if size is not None:
        data = build(b"x" * (size - len(data)))
        assert len(data) == size
    return data


def make_response(status: int = 200, body: bytes = b"", text: Optional[str] = None,
                  advertise_length: bool = True, gate: Optional[asyncio.Event] = None,
                  fail_after: Optional[Exception] = None):
    """Mock aiohttp response whose body streams in ``iter_chunked`` slices."""
    response = Mock()
    response.status = status
    response.headers = {"Content-Length": str(len(body))} if advertise_length else {}
    response.text = AsyncMock(return_value=text if text is not None else body.decode("latin-1"))

    def iter_chunked(size):
        async def chunks():
            if gate is not None:
                await gate.wait()
            for start in range(0, len(body), size):
                yield body[start:start + size]
                if fail_after is not None:
                    raise fail_after
        return chunks()

    response.content.iter_chunked = Mock(side_effect=iter_chunked)
    return response


class FakeUpdateServer:
    """Routes mocked ``session.get`` calls by URL and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, url: str, route):
        """Register a response mock, or an exception to raise on request."""
        self.routes[url] = route

    def get(self, url, **kwargs):
        self.requests.append(url)
        route = self.routes.get(url)
        if route is None:
            return AsyncContextManager(make_response(status=404))
        if isinstance(route, Exception):
            raise route
        return AsyncContextManager(route)


@pytest.fixture
def server():
    return FakeUpdateServer()


@pytest.fixture
def http_client(server):
    """HttpClient whose session is served by the fake update server."""
    session = Mock()
    session.get = Mock(side_effect=server.get)
    session.closed = False
    client = Mock(spec=HttpClient)
    client.get_session = AsyncMock(return_value=session)
    client.close = AsyncMock()
    return client


@pytest.fixture
def install_dir(tmp_path) -> Path:
    directory = tmp_path / "game"
    directory.mkdir()
    return directory


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    directory = tmp_path / "tmp"
    directory.mkdir()
    return directory


@pytest.fixture
def update_config() -> UpdateConfig:
    return UpdateConfig(archive_url=ARCHIVE_URL)


@pytest.fixture
def sample_config(install_dir) -> Config:
    config = Config()
    config.game.install_dir = str(install_dir)
    config.updates.archive_url = ARCHIVE_URL
    return config


@pytest.fixture
def checker(update_config, http_client, install_dir) -> VersionChecker:
    return VersionChecker(update_config, http_client, install_dir)


@pytest.fixture
def installer(update_config, http_client, install_dir, temp_dir, checker) -> UpdateInstaller:
    return UpdateInstaller(update_config, http_client, install_dir,
                           version_checker=checker, temp_dir=temp_dir)


@pytest.fixture
def progress_log():
    """Collects (percent, phase) callback invocations."""
    events = []

    def callback(percent, phase):
        events.append((percent, phase))

    callback.events = events
    return callback
