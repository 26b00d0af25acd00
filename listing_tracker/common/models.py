"""Shared Pydantic data models for the listing tracker.

The ``Listing`` record is the contract between the remote listings table
and every client-side module. All modules import it from here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Listing(BaseModel):
    """One active market record as stored in the remote listings table.

    Optional fields the store leaves out stay ``None``; nothing is
    defaulted on the client. Monetary fields are taken as-is.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    source: str
    model: str
    year: int
    price: float
    currency: str
    mileage: Optional[float] = None
    transmission: str
    color: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    seller_type: Optional[str] = None
    investment_score: Optional[float] = None
    market_value: Optional[float] = None
    rarity_score: Optional[str] = None
    description: Optional[str] = None
    images_count: int
    first_seen: datetime
    status: str
    url: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # bigint primary keys arrive as JSON numbers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_dict(self) -> dict:
        """Serialize for JSON output, leaving absent optional fields out."""
        return self.model_dump(mode="json", exclude_none=True)
