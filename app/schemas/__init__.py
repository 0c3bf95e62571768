from app.schemas.receipt import (
    PointsResponse,
    ProcessResponse,
    Receipt,
    ReceiptItem,
    ScoredReceipt,
)

__all__ = [
    "PointsResponse",
    "ProcessResponse",
    "Receipt",
    "ReceiptItem",
    "ScoredReceipt",
]
