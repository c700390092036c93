"""Package identifier model."""

from typing import Optional

from pydantic import ConfigDict, model_validator

from .base import DepotBaseModel


class PackageIdent(DepotBaseModel):
    """
    Identifier of a package in a depot, possibly partial.

    Attributes:
        origin: Origin (publisher namespace) of the package
        name: Package name
        version: Optional version; required when release is given
        release: Optional release timestamp

    Example:
        >>> ident = PackageIdent.from_string("core/redis/3.0.7")
        >>> str(ident)
        'core/redis/3.0.7'
        >>> ident.fully_qualified
        False
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    origin: str
    name: str
    version: Optional[str] = None
    release: Optional[str] = None

    @model_validator(mode="after")
    def check_release_has_version(self) -> "PackageIdent":
        """A release only makes sense for a specific version."""
        if self.release is not None and self.version is None:
            raise ValueError(f"Release '{self.release}' given without a version")
        return self

    @classmethod
    def from_string(cls, value: str) -> "PackageIdent":
        """
        Parse an identifier of the form origin/name[/version[/release]].

        Args:
            value: Textual identifier

        Returns:
            Parsed PackageIdent

        Raises:
            ValueError: If the identifier has the wrong number of parts or an empty part
        """
        parts = value.strip().split("/")
        if len(parts) < 2 or len(parts) > 4 or any(not part for part in parts):
            raise ValueError(f"Invalid package identifier: '{value}' (expected origin/name[/version[/release]])")

        version = parts[2] if len(parts) > 2 else None
        release = parts[3] if len(parts) > 3 else None
        return cls(origin=parts[0], name=parts[1], version=version, release=release)

    @property
    def fully_qualified(self) -> bool:
        """Check if both version and release are set."""
        return self.version is not None and self.release is not None

    def __str__(self) -> str:
        parts = [self.origin, self.name]
        if self.version is not None:
            parts.append(self.version)
            if self.release is not None:
                parts.append(self.release)
        return "/".join(parts)


__all__ = ["PackageIdent"]
