"""
Shared Pydantic base models.

Value types we own inherit from StrictModel. Payloads produced by other
programs (ddev, Claude Code) inherit from PermissiveModel so new upstream
fields do not break parsing.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model with strict validation settings."""

    model_config = ConfigDict(
        extra='forbid',  # Raise error on unexpected fields
        strict=True,  # Strict type validation
        frozen=True,  # Immutable (cannot modify after creation)
    )


class PermissiveModel(BaseModel):
    """
    Base model for external payloads.

    Symmetry with StrictModel:
    - StrictModel: extra='forbid' (rejects unknown fields)
    - PermissiveModel: extra='allow' (accepts unknown fields)
    """

    model_config = ConfigDict(
        extra='allow',  # Accept unknown fields (graceful fallback)
        frozen=True,
    )
