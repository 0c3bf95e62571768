"""
SQLAlchemy model for scored receipt persistence.
"""
from sqlalchemy import BigInteger, Column, JSON, String

from app.database import Base


class ScoredReceiptModel(Base):
    __tablename__ = "scored_receipts"

    id = Column(String, primary_key=True)
    created_at = Column(String, nullable=False)
    receipt_json = Column(JSON, nullable=False)
    # scores can exceed the 32-bit range
    points = Column(BigInteger, nullable=False)
