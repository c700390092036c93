"""Tests for session utilities."""

import httpx

from depot_client.utils import create_session
from depot_client.utils.constants import CONNECT_TIMEOUT


class TestCreateSession:
    """Test create_session function."""

    def test_returns_client(self):
        """Test create_session returns a configured httpx client."""
        with create_session(timeout=42.0) as session:
            assert isinstance(session, httpx.Client)
            assert session.timeout.read == 42.0
            assert session.timeout.connect == CONNECT_TIMEOUT
            assert session.follow_redirects is True

    def test_single_attempt(self):
        """Test the transport does not retry."""
        with create_session() as session:
            transport = session._transport
            assert isinstance(transport, httpx.HTTPTransport)
            assert transport._pool._retries == 0
