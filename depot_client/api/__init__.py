"""
Depot API client.

This package provides the DepotClient used for all depot operations.
"""

from .depot_client import DepotClient

# Import depot API models for convenience
from ..models.depot_api import PackageMetadata

__all__ = [
    "DepotClient",
    "PackageMetadata",
]
