"""Exceptions raised by the finance tracker.

Validation problems are never raised; they are returned as data by
``validators.validate``. These exceptions cover storage and workflow faults.
"""


class FinanceTrackerError(Exception):
    """Base class for finance tracker errors."""


class StorageError(FinanceTrackerError):
    """Records or budget could not be written."""


class ImportFormatError(FinanceTrackerError):
    """An imported document does not have the expected shape."""


class TransactionNotFound(FinanceTrackerError):
    """No record exists with the requested id."""

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction not found: {transaction_id}")
        self.transaction_id = transaction_id
