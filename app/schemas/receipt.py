"""
Pydantic v2 models for receipts as they travel over the wire and into storage.

Amounts, dates and times stay as text here; the scoring package decides
whether they are well formed.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ReceiptItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field(
        ..., alias="shortDescription", description="e.g. 'Mountain Dew 12PK'"
    )
    price: str = Field(..., description="Decimal amount, e.g. '6.49'")


class Receipt(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str = Field(..., description="e.g. 'M&M Corner Market'")
    purchase_date: str = Field(..., alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field(..., alias="purchaseTime", description="HH:MM, 24h")
    items: list[ReceiptItem]
    total: str = Field(..., description="Decimal amount, e.g. '35.35'")


class ScoredReceipt(BaseModel):
    """A receipt plus the points it earned when it was processed."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        alias="createdAt",
    )
    receipt: Receipt
    points: int


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
