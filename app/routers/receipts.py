"""
Receipt API endpoints.

POST /receipts/process         — validate + score a receipt, store it, return its id
GET  /receipts/{id}/points     — points awarded to a stored receipt
GET  /receipts/{id}            — the stored receipt with its points
"""
from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException

from app.schemas import PointsResponse, ProcessResponse, Receipt, ScoredReceipt
from app.scoring import ReceiptInvalid, score_receipt
from app.store import ReceiptStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_RECEIPT = "The receipt is invalid."
RECEIPT_NOT_FOUND = "No receipt found for that ID."


def _lookup(store: ReceiptStore, receipt_id: str) -> ScoredReceipt:
    scored = store.get(receipt_id)
    if scored is None:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail=RECEIPT_NOT_FOUND)
    return scored


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post(
    "/receipts/process",
    response_model=ProcessResponse,
    responses={400: {"description": INVALID_RECEIPT}},
)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    try:
        points = score_receipt(receipt)
    except ReceiptInvalid as exc:
        logger.warning("Rejected receipt (%s): %s", type(exc).__name__, exc.reason)
        raise HTTPException(status_code=400, detail=INVALID_RECEIPT)

    # identical receipts are accepted again under a new id
    receipt_id = str(uuid.uuid4())
    store.put(receipt_id, ScoredReceipt(id=receipt_id, receipt=receipt, points=points))
    logger.info("Stored receipt %s (%d points)", receipt_id, points)
    return ProcessResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get(
    "/receipts/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"description": RECEIPT_NOT_FOUND}},
)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    return PointsResponse(points=_lookup(store, receipt_id).points)


# ── GET /receipts/{receipt_id} ───────────────────────────────────────────
@router.get(
    "/receipts/{receipt_id}",
    response_model=ScoredReceipt,
    response_model_by_alias=True,
    responses={404: {"description": RECEIPT_NOT_FOUND}},
)
def get_receipt(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    return _lookup(store, receipt_id)
