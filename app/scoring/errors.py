"""
Failure kinds for receipt scoring.

Both surface to clients as the same "receipt is invalid" response; the
split only exists so logs can say which stage rejected the receipt.
"""


class ReceiptInvalid(Exception):
    """Base class; ``reason`` is for logs, never for clients."""

    def __init__(self, reason: str = "receipt is invalid"):
        super().__init__(reason)
        self.reason = reason


class ShapeInvalid(ReceiptInvalid):
    """A field failed a format or non-empty check."""


class ComputationInvalid(ReceiptInvalid):
    """A field had the right shape but could not be parsed for scoring."""
