"""
Rule-based loyalty points calculator.

Every rule is a pure function of the receipt and contributes an integer;
the score is their sum.
"""
from __future__ import annotations

import math
import re
from datetime import datetime, time

from app.schemas import Receipt
from app.scoring.errors import ComputationInvalid

ROUND_DOLLAR_POINTS = 50
QUARTER_POINTS = 25
QUARTER_SUFFIXES = frozenset({".00", ".25", ".50", ".75"})
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_FACTOR = 3
PRICE_MULTIPLIER = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)
# signed 64-bit accumulator
MAX_POINTS = 2**63 - 1

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_SHAPE = re.compile(r"[0-9]{1,2}:[0-9]{2}")


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def _total_suffix(total: str) -> str:
    if len(total) < 3:
        raise ComputationInvalid(f"total too short: {total!r}")
    return total[-3:]


def _parse_price(price: str) -> float:
    try:
        return float(price)
    except ValueError:
        raise ComputationInvalid(f"invalid price: {price!r}") from None


def parse_purchase_date(value: str) -> datetime:
    """Strict calendar parse; ``2023-02-29`` is rejected."""
    if not _DATE_SHAPE.fullmatch(value):
        raise ComputationInvalid(f"invalid purchase date: {value!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ComputationInvalid(f"invalid purchase date: {value!r}") from None


def parse_purchase_time(value: str) -> time:
    """Strict 24h clock parse; ``25:99`` is rejected."""
    if not _TIME_SHAPE.fullmatch(value):
        raise ComputationInvalid(f"invalid purchase time: {value!r}")
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        raise ComputationInvalid(f"invalid purchase time: {value!r}") from None


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_points(receipt: Receipt) -> int:
    """One point per letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def round_dollar_points(receipt: Receipt) -> int:
    """50 points when the total has no cents.

    Compared as text so float rounding never matters.
    """
    return ROUND_DOLLAR_POINTS if _total_suffix(receipt.total) == ".00" else 0


def quarter_points(receipt: Receipt) -> int:
    """25 points when the total is a multiple of 0.25.

    Stacks with ``round_dollar_points``: a ``.00`` total earns both.
    """
    return QUARTER_POINTS if _total_suffix(receipt.total) in QUARTER_SUFFIXES else 0


def item_pair_points(receipt: Receipt) -> int:
    return ITEM_PAIR_POINTS * (len(receipt.items) // 2)


def description_points(receipt: Receipt) -> int:
    """``ceil(price * 0.2)`` for each item whose trimmed description length
    is a multiple of 3.

    A description that trims to nothing has length 0 and still qualifies.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        price = _parse_price(item.price)
        try:
            points += math.ceil(price * PRICE_MULTIPLIER)
        except (ValueError, OverflowError):
            raise ComputationInvalid(f"invalid price: {item.price!r}") from None
    return points


def odd_day_points(receipt: Receipt) -> int:
    purchase_date = parse_purchase_date(receipt.purchase_date)
    return ODD_DAY_POINTS if purchase_date.day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    """10 points strictly between 14:00 and 16:00; both ends excluded."""
    purchase_time = parse_purchase_time(receipt.purchase_time)
    if AFTERNOON_START < purchase_time < AFTERNOON_END:
        return AFTERNOON_POINTS
    return 0


RULES = (
    retailer_points,
    round_dollar_points,
    quarter_points,
    item_pair_points,
    description_points,
    odd_day_points,
    afternoon_points,
)


def point_breakdown(receipt: Receipt) -> dict[str, int]:
    """Return ``{rule_name: points}`` for every rule, in evaluation order."""
    return {rule.__name__: rule(receipt) for rule in RULES}


def total_points(breakdown: dict[str, int]) -> int:
    """Sum a breakdown, rejecting totals outside the signed 64-bit range."""
    points = sum(breakdown.values())
    if not -MAX_POINTS - 1 <= points <= MAX_POINTS:
        raise ComputationInvalid(f"points out of range: {points}")
    return points


def compute_points(receipt: Receipt) -> int:
    """Total points for a receipt that already passed ``validate``.

    Raises :class:`ComputationInvalid` if a numeric, date or time field
    cannot be parsed, or if the total does not fit in 64 bits.
    """
    return total_points(point_breakdown(receipt))
