"""
Shape checks run before a receipt is scored.
"""
from __future__ import annotations

import re

from app.schemas import Receipt

RETAILER_PATTERN = re.compile(r"[\w\s\-&]+")
DESCRIPTION_PATTERN = re.compile(r"[\w\s\-]+")
# ASCII digits only; str patterns would otherwise accept any Unicode digit
AMOUNT_PATTERN = re.compile(r"[0-9]+\.[0-9]{2}")


def _matches(pattern: re.Pattern[str], value: str) -> bool:
    return pattern.fullmatch(value) is not None


def validate(receipt: Receipt) -> bool:
    """Return ``True`` when every field has an acceptable shape.

    Date and time are not checked here; they are parsed while computing
    points.
    """
    if not receipt.items:
        return False
    if not _matches(RETAILER_PATTERN, receipt.retailer):
        return False
    if not _matches(AMOUNT_PATTERN, receipt.total):
        return False
    return all(
        _matches(DESCRIPTION_PATTERN, item.short_description)
        and _matches(AMOUNT_PATTERN, item.price)
        for item in receipt.items
    )
