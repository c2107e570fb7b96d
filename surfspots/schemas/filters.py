"""Pydantic schemas for filter parameters."""
from typing import Optional

from pydantic import BaseModel, Field

from surfspots.schemas.spot import Difficulty


class SpotFilterParams(BaseModel):
    """Parameters for deriving the visible spots from the catalog."""

    difficulty: Optional[Difficulty] = Field(default=None, description="Difficulty to keep (None = all)")
    query: str = Field(default="", description="Case-insensitive substring of name or description")
