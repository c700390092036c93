"""
Pydantic models for depot API responses.

The depot's "show" endpoint returns a JSON description of a package;
these models give it a typed shape while keeping any extra fields.
"""

from typing import List, Optional

from pydantic import Field

from .base import DepotResponseModel
from .ident import PackageIdent


class PackageMetadata(DepotResponseModel):
    """Package description returned by the depot."""

    ident: PackageIdent
    checksum: Optional[str] = None
    manifest: Optional[str] = None
    deps: List[PackageIdent] = Field(default_factory=list)
    tdeps: List[PackageIdent] = Field(default_factory=list)
    exposes: List[int] = Field(default_factory=list)
    config: Optional[str] = None


__all__ = ["PackageMetadata"]
