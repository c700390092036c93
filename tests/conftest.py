"""
Test fixtures for depot-client tests.

This module provides common fixtures for building clients against
mocked depots, either through respx routes or through an
httpx.MockTransport when a test needs full control of the response
stream.
"""

from typing import Callable, Iterable, List, Optional

import httpx
import pytest
import respx

from depot_client.api import DepotClient
from depot_client.models import Package, PackageIdent

DEPOT_URL = "http://repo.example"


class ChunkedStream(httpx.SyncByteStream):
    """Response body delivered in the given chunks, optionally failing afterwards."""

    def __init__(self, chunks: Iterable[bytes], error: Optional[Exception] = None) -> None:
        self.chunks = list(chunks)
        self.error = error

    def __iter__(self):
        yield from self.chunks
        if self.error is not None:
            raise self.error


class RecordingProgress:
    """Progress callback that records every report."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def __call__(self, label: str, written: int, length: str, finished: bool) -> None:
        self.calls.append((label, written, length, finished))


@pytest.fixture
def depot_url():
    """Base URL of the mocked depot."""
    return DEPOT_URL


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


@pytest.fixture
def progress():
    """Recording progress callback."""
    return RecordingProgress()


@pytest.fixture
def mock_session():
    """
    Factory for an httpx.Client backed by a MockTransport.

    Usage:
        def test_something(mock_session):
            session = mock_session(lambda request: httpx.Response(200))
    """
    sessions = []

    def _create(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        session = httpx.Client(transport=httpx.MockTransport(handler))
        sessions.append(session)
        return session

    yield _create

    for session in sessions:
        session.close()


@pytest.fixture
def depot_client(httpx_mock, progress):
    """DepotClient using a real session, intercepted by respx."""
    client = DepotClient(DEPOT_URL, progress=progress)
    yield client
    client.close()


@pytest.fixture
def partial_ident():
    """Identifier without version and release."""
    return PackageIdent.from_string("core/foo")


@pytest.fixture
def versioned_ident():
    """Identifier with version but no release."""
    return PackageIdent.from_string("core/foo/1.0.0")


@pytest.fixture
def full_ident():
    """Fully qualified identifier."""
    return PackageIdent.from_string("core/foo/1.0.0/20160101000000")


@pytest.fixture
def cached_package(tmp_path):
    """A package whose archive exists in a temporary cache directory."""
    package = Package(origin="core", name="foo", version="1.0.0", release="20160101000000", cache_dir=str(tmp_path))
    with open(package.cache_file, "wb") as f:
        f.write(b"archive bytes " * 1000)
    return package


@pytest.fixture
def metadata_json():
    """Package metadata as returned by the depot's show endpoint."""
    return {
        "ident": {"origin": "core", "name": "foo", "version": "1.0.0", "release": "20160101000000"},
        "checksum": "0f1e2d3c",
        "manifest": "# core/foo",
        "deps": [{"origin": "core", "name": "glibc", "version": "2.22", "release": "20160310192356"}],
        "tdeps": [],
        "exposes": [6379],
        "config": None,
    }


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary TOML config file."""
    config_path = tmp_path / "cli.toml"
    config_path.write_text(
        "[cli]\n"
        f'url = "{DEPOT_URL}"\n'
        f'cache_key_path = "{tmp_path / "keys"}"\n'
        f'cache_pkg_path = "{tmp_path / "pkgs"}"\n'
        "timeout = 60\n"
    )
    return config_path


@pytest.fixture
def serve_chunks():
    """
    Factory for MockTransport handlers that stream a body in chunks.

    Usage:
        def test_something(mock_session, serve_chunks):
            session = mock_session(serve_chunks([b"abc", b"def"], error=httpx.ReadError("reset")))
    """

    def _create(
        chunks: Iterable[bytes],
        headers: Optional[dict] = None,
        status: int = 200,
        error: Optional[Exception] = None,
    ) -> Callable[[httpx.Request], httpx.Response]:
        response_headers = {"X-Filename": "core-foo-1.0.0-1.bldr"} if headers is None else headers

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, headers=response_headers, stream=ChunkedStream(chunks, error))

        return handler

    return _create
