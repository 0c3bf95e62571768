"""
Storage for scored receipts, keyed by the id handed back to clients.

Two backends share the ``put`` / ``get`` interface: SQLAlchemy (default)
and a process-local dict. Scoring never touches either; it only produces
the value that gets stored.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models.receipt import ScoredReceiptModel
from app.schemas import Receipt, ScoredReceipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    def put(self, receipt_id: str, scored: ScoredReceipt) -> None:
        raise NotImplementedError

    def get(self, receipt_id: str) -> Optional[ScoredReceipt]:
        raise NotImplementedError


class SqlReceiptStore(ReceiptStore):
    def __init__(self, db: Session):
        self.db = db

    def put(self, receipt_id: str, scored: ScoredReceipt) -> None:
        record = ScoredReceiptModel(
            id=receipt_id,
            created_at=scored.created_at,
            receipt_json=scored.receipt.model_dump(by_alias=True),
            points=scored.points,
        )
        self.db.add(record)
        self.db.commit()

    def get(self, receipt_id: str) -> Optional[ScoredReceipt]:
        row = (
            self.db.query(ScoredReceiptModel)
            .filter(ScoredReceiptModel.id == receipt_id)
            .first()
        )
        if not row:
            return None
        return ScoredReceipt(
            id=row.id,
            created_at=row.created_at,
            receipt=Receipt.model_validate(row.receipt_json),
            points=row.points,
        )


class InMemoryReceiptStore(ReceiptStore):
    """Dict-backed store; a lock serializes concurrent request threads."""

    def __init__(self):
        self._receipts: dict[str, ScoredReceipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, scored: ScoredReceipt) -> None:
        with self._lock:
            self._receipts[receipt_id] = scored

    def get(self, receipt_id: str) -> Optional[ScoredReceipt]:
        with self._lock:
            return self._receipts.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)


_memory_store = InMemoryReceiptStore()


def get_store() -> Iterator[ReceiptStore]:
    """Store dependency selected by ``settings.RECEIPT_STORE``.

    A database session is only opened for the sql backend.
    """
    if settings.RECEIPT_STORE == "memory":
        yield _memory_store
        return
    if settings.RECEIPT_STORE != "sql":
        logger.warning("Unknown RECEIPT_STORE %r, using sql", settings.RECEIPT_STORE)
    sessions = get_db()
    try:
        yield SqlReceiptStore(next(sessions))
    finally:
        sessions.close()
