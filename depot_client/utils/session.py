"""
Session utilities for depot operations.

This module creates the httpx client used for all depot requests.
"""

import httpx
from httpx import HTTPTransport

from .constants import CONNECT_TIMEOUT, DEFAULT_MAX_CONNECTIONS, DEFAULT_TIMEOUT


def create_session(timeout: float = DEFAULT_TIMEOUT, max_connections: int = DEFAULT_MAX_CONNECTIONS) -> httpx.Client:
    """
    Create an httpx client for talking to a depot.

    Args:
        timeout: Total timeout in seconds (default: 300.0)
        max_connections: Maximum number of connections in the pool (default: 10)

    Returns:
        Configured httpx.Client object with:
        - Exactly one attempt per request (no transport retries)
        - Connection pooling
        - Timeout configuration
        - Redirects followed

    Example:
        >>> client = create_session()
        >>> response = client.get("http://depot.example.com/v1/depot/pkgs/core/redis/latest")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_connections,
    )

    # Configure timeout (total, connect, read, write)
    timeout_config = httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)

    transport = HTTPTransport(limits=limits, retries=0)

    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
    )


__all__ = ["create_session"]
