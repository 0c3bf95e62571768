from app.models.receipt import ScoredReceiptModel

__all__ = ["ScoredReceiptModel"]
