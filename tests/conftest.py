"""
Shared pytest fixtures — in‑memory SQLite + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.models import ScoredReceiptModel  # noqa: F401  — register model
from app.main import app
from app.schemas import Receipt
from app.store import SqlReceiptStore, get_store

# StaticPool ensures all connections share the same in-memory database
_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_Session = sessionmaker(autocommit=False, autoflush=False, bind=_ENGINE)


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "Klarbrunn 12-PK 12 FL OZ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
    "total": "9.00",
}

WALGREENS_RECEIPT = {
    "retailer": "Walgreens",
    "purchaseDate": "2022-01-21",
    "purchaseTime": "14:00",
    "items": [
        {"shortDescription": "Milk", "price": "4.00"},
        {"shortDescription": "Bread", "price": "6.00"},
    ],
    "total": "10.00",
}


@pytest.fixture()
def make_receipt():
    """Build a ``Receipt`` from the Target example with fields overridden."""
    def _make(**overrides) -> Receipt:
        data = {**TARGET_RECEIPT, **overrides}
        return Receipt.model_validate(data)

    return _make


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.create_all(bind=_ENGINE)
    yield
    Base.metadata.drop_all(bind=_ENGINE)


@pytest.fixture()
def db():
    session = _Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_store] = lambda: SqlReceiptStore(db)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
