"""
Pydantic models for depot-client.

This package contains all Pydantic models used in the application:
- depot_api: Models for depot API responses
- base, ident, package, transfer: Domain models
"""

from .base import DepotBaseModel, DepotResponseModel
from .ident import PackageIdent
from .package import Package, PackageArchive
from .depot_api import PackageMetadata
from .transfer import TransferDescriptor

__all__ = [
    "DepotBaseModel",
    "DepotResponseModel",
    "PackageIdent",
    "Package",
    "PackageArchive",
    "PackageMetadata",
    "TransferDescriptor",
]
