"""
Receipt scoring.

Orchestrates: validate shape → compute points.
"""
import logging

from app.schemas import Receipt
from app.scoring.errors import ComputationInvalid, ReceiptInvalid, ShapeInvalid
from app.scoring.points import compute_points, point_breakdown, total_points
from app.scoring.validator import validate

logger = logging.getLogger(__name__)

__all__ = [
    "ComputationInvalid",
    "ReceiptInvalid",
    "ShapeInvalid",
    "compute_points",
    "point_breakdown",
    "score_receipt",
    "validate",
]


def score_receipt(receipt: Receipt) -> int:
    """Validate a receipt and return its points.

    Raises :class:`ShapeInvalid` or :class:`ComputationInvalid`; callers
    should treat both as "the receipt is invalid".
    """
    if not validate(receipt):
        raise ShapeInvalid("receipt failed shape validation")

    breakdown = point_breakdown(receipt)
    logger.debug("Point breakdown: %s", breakdown)
    points = total_points(breakdown)
    logger.info("Scored receipt from %r: %d points", receipt.retailer, points)
    return points
