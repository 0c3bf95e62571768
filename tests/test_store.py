"""
Tests for the scored-receipt storage backends.
"""
import threading

import pytest

from app.schemas import Receipt, ScoredReceipt
from app.scoring.points import MAX_POINTS
from app.store import InMemoryReceiptStore, SqlReceiptStore
from conftest import TARGET_RECEIPT


def _scored(receipt_id: str, points: int = 28) -> ScoredReceipt:
    return ScoredReceipt(
        id=receipt_id, receipt=Receipt.model_validate(TARGET_RECEIPT), points=points
    )


@pytest.fixture(params=["sql", "memory"])
def store(request, db):
    if request.param == "sql":
        return SqlReceiptStore(db)
    return InMemoryReceiptStore()


class TestReceiptStore:
    def test_missing(self, store):
        assert store.get("nonexistent") is None

    def test_put_then_get(self, store):
        store.put("abc", _scored("abc"))
        got = store.get("abc")
        assert got is not None
        assert got.id == "abc"
        assert got.points == 28
        assert got.receipt == Receipt.model_validate(TARGET_RECEIPT)

    def test_largest_points_survive(self, store):
        store.put("big", _scored("big", points=MAX_POINTS))
        assert store.get("big").points == MAX_POINTS


class TestSqlReceiptStore:
    def test_stores_camel_case_json(self, db):
        SqlReceiptStore(db).put("abc", _scored("abc"))
        from app.models import ScoredReceiptModel

        row = db.query(ScoredReceiptModel).filter(ScoredReceiptModel.id == "abc").first()
        assert row.receipt_json["purchaseDate"] == "2022-01-01"
        assert row.receipt_json["items"][0]["shortDescription"] == "Mountain Dew 12PK"


class TestInMemoryReceiptStore:
    def test_concurrent_puts(self):
        store = InMemoryReceiptStore()

        def worker(n):
            for i in range(50):
                rid = f"{n}-{i}"
                store.put(rid, _scored(rid, points=i))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 400
        assert store.get("7-49").points == 49
