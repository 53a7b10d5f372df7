"""
Application state and workflow.

FinanceTracker owns the record list, the budget and the editing cursor.
Every write goes through the validator, replaces the whole list and is
then persisted, so readers never see a half-applied update.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, List, Mapping, Optional, Tuple, Any

from .analytics import aggregate
from .analytics.dashboard_aggregator import Notifier
from .errors import ImportFormatError, TransactionNotFound
from .models import DashboardStats, Notification, Transaction, TransactionKind, to_decimal
from .storage import JsonStore, export_json, import_json
from .utils import generate_id
from .validators import validate, compile_search_pattern, ValidationResult, INVALID_PATTERN

logger = logging.getLogger(__name__)

SORT_KEYS = {
    'date-desc': (lambda t: t.date, True),
    'date-asc': (lambda t: t.date, False),
    'amount-desc': (lambda t: t.amount, True),
    'amount-asc': (lambda t: t.amount, False),
}


def _ignore_notification(notification: Notification) -> None:
    pass


class FinanceTracker:
    """
    Single-user tracker state.

    Not thread safe; callers sharing an instance must serialise access.
    """

    def __init__(
        self,
        store: Optional[JsonStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
        notifier: Optional[Notifier] = None
    ):
        """
        Initialize tracker and load saved state.

        Args:
            store: Persistence backend (default file locations if None)
            clock: Returns the current time; used for timestamps and the
                dashboard month/trend window
            notifier: Receives dashboard notifications such as budget exceeded
        """
        self.store = store or JsonStore()
        self.clock = clock or datetime.now
        self.notifier = notifier
        self.editing_id: Optional[str] = None

        self._transactions: Tuple[Transaction, ...] = tuple(self.store.load())
        self._budget: Decimal = self.store.get_budget()

        logger.info(f"Loaded {len(self._transactions)} transactions, budget {self._budget}")

    @property
    def transactions(self) -> List[Transaction]:
        """Snapshot of all records in insertion order."""
        return list(self._transactions)

    @property
    def budget(self) -> Decimal:
        return self._budget

    def get(self, transaction_id: str) -> Transaction:
        """
        Get a record by id.

        Raises:
            TransactionNotFound: If no record has this id
        """
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn
        raise TransactionNotFound(transaction_id)

    def _commit(self, transactions: List[Transaction]) -> None:
        self._transactions = tuple(transactions)
        self.store.save(list(self._transactions))

    @staticmethod
    def _fields_from(candidate: Mapping[str, Any]) -> dict:
        """Typed field values for an accepted candidate."""
        return {
            'description': candidate['description'],
            'amount': to_decimal(candidate['amount']),
            'date': candidate['date'],
            'category': candidate['category'],
            'type': TransactionKind(candidate['type']),
        }

    def add(self, candidate: Mapping[str, Any]) -> Tuple[ValidationResult, Optional[Transaction]]:
        """
        Validate and append a new record.

        Args:
            candidate: Raw field values

        Returns:
            Validation result and the created record (None when rejected)
        """
        result = validate(candidate)
        if not result.accepted:
            logger.info(f"Rejected new transaction: {result.messages}")
            return result, None

        existing_ids = {t.id for t in self._transactions}
        new_id = generate_id()
        while new_id in existing_ids:
            new_id = generate_id()

        timestamp = self.clock().isoformat()
        txn = Transaction(
            id=new_id,
            created_at=timestamp,
            updated_at=timestamp,
            **self._fields_from(candidate)
        )

        self._commit(list(self._transactions) + [txn])
        logger.info(f"Added transaction {txn.id}")
        return result, txn

    def start_edit(self, transaction_id: str) -> Transaction:
        """Point the editing cursor at a record."""
        txn = self.get(transaction_id)
        self.editing_id = transaction_id
        return txn

    def cancel_edit(self) -> None:
        self.editing_id = None

    def update(
        self,
        transaction_id: str,
        candidate: Mapping[str, Any]
    ) -> Tuple[ValidationResult, Optional[Transaction]]:
        """
        Validate and replace every editable field of a record.

        The id and creation time are kept. On success the editing cursor is
        cleared.

        Raises:
            TransactionNotFound: If no record has this id
        """
        existing = self.get(transaction_id)

        result = validate(candidate)
        if not result.accepted:
            logger.info(f"Rejected edit of {transaction_id}: {result.messages}")
            return result, None

        updated = existing.with_changes(
            updated_at=self.clock().isoformat(),
            **self._fields_from(candidate)
        )
        self._commit([updated if t.id == transaction_id else t for t in self._transactions])
        self.editing_id = None

        logger.info(f"Updated transaction {transaction_id}")
        return result, updated

    def delete(self, transaction_id: str) -> Transaction:
        """
        Remove a record.

        Raises:
            TransactionNotFound: If no record has this id
        """
        removed = self.get(transaction_id)
        self._commit([t for t in self._transactions if t.id != transaction_id])
        if self.editing_id == transaction_id:
            self.editing_id = None

        logger.info(f"Deleted transaction {transaction_id}")
        return removed

    def delete_all(self) -> int:
        """Remove every record, returning how many were removed."""
        count = len(self._transactions)
        self._commit([])
        self.editing_id = None
        logger.info(f"Deleted all {count} transactions")
        return count

    def set_budget(self, value: Any) -> Decimal:
        """
        Replace the monthly budget.

        Raises:
            ValueError: If the value is not a non-negative number
        """
        budget = to_decimal(value)
        if budget < 0:
            raise ValueError("Budget cannot be negative")

        self.store.set_budget(budget)
        self._budget = budget
        logger.info(f"Budget set to {budget}")
        return budget

    def search(self, query: Optional[str]) -> List[Transaction]:
        """
        Filter records by description, amount or category.

        The query is treated as a case-insensitive regular expression; if it
        does not compile, a plain substring match is used instead.
        """
        pattern = compile_search_pattern(query)
        if pattern is None:
            return self.transactions

        def fields(txn: Transaction) -> List[str]:
            return [txn.description, str(txn.amount), txn.category]

        if pattern is INVALID_PATTERN:
            needle = query.strip().lower()
            return [t for t in self._transactions if any(needle in f.lower() for f in fields(t))]

        return [t for t in self._transactions if any(pattern.search(f) for f in fields(t))]

    @staticmethod
    def sort(transactions: List[Transaction], key: str = 'date-desc') -> List[Transaction]:
        """
        Sort records.

        Args:
            transactions: Records to sort
            key: One of date-desc, date-asc, amount-desc, amount-asc

        Raises:
            ValueError: For an unknown sort key
        """
        if key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {key}. Choose from {', '.join(SORT_KEYS)}")

        sort_key, reverse = SORT_KEYS[key]
        return sorted(transactions, key=sort_key, reverse=reverse)

    def dashboard(self, notify: bool = True) -> DashboardStats:
        """
        Dashboard figures for the current records and budget.

        Args:
            notify: Send notifications such as budget exceeded to the
                notifier; False computes the figures silently
        """
        notifier = self.notifier if notify else _ignore_notification
        return aggregate(self.transactions, self._budget, self.clock(), notifier)

    def export_json(self) -> str:
        return export_json(self.transactions)

    def import_json(self, text: str, replace: bool = True) -> int:
        """
        Load records from an exported document.

        Every imported record must pass validation; otherwise nothing is
        changed.

        Args:
            text: JSON document
            replace: Replace all records (True) or merge by id (False)

        Returns:
            Number of records imported

        Raises:
            ImportFormatError: If the document is malformed or a record is invalid
        """
        imported = import_json(text)

        for txn in imported:
            result = validate(txn.to_candidate())
            if not result.accepted:
                details = "; ".join(f"{k}: {v}" for k, v in result.messages.items())
                raise ImportFormatError(f"Record {txn.id} is invalid: {details}")

        if replace:
            merged = imported
        else:
            incoming = {t.id: t for t in imported}
            merged = [incoming.pop(t.id, t) for t in self._transactions]
            merged.extend(incoming.values())

        self._commit(merged)
        self.editing_id = None
        logger.info(f"Imported {len(imported)} transactions (replace={replace})")
        return len(imported)
