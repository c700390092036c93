"""Base models for depot-client."""

from pydantic import BaseModel, ConfigDict


class DepotBaseModel(BaseModel):
    """Base model for all depot-client domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


class DepotResponseModel(BaseModel):
    """Base model for decoded depot API responses."""

    model_config = ConfigDict(extra="allow")  # Allow extra fields from API


__all__ = ["DepotBaseModel", "DepotResponseModel"]
