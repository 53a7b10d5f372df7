"""Export and import of transactions as a JSON document."""
import json
import logging
from decimal import Decimal
from typing import List

from ..errors import ImportFormatError
from ..models import Transaction, TransactionKind, EXPENSE_CATEGORIES, INCOME_CATEGORIES, to_decimal

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ('id', 'description', 'amount', 'category', 'date')


def export_json(transactions: List[Transaction]) -> str:
    """Serialize transactions as a pretty-printed JSON array."""
    return json.dumps([t.to_dict() for t in transactions], indent=2)


def _infer_kind(category: str) -> TransactionKind:
    """Type for a legacy record that predates income support."""
    if category in INCOME_CATEGORIES and category not in EXPENSE_CATEGORIES:
        return TransactionKind.INCOME
    return TransactionKind.EXPENSE


def import_json(text: str) -> List[Transaction]:
    """
    Parse an exported document.

    The root must be an array. Each item needs a unique id, description,
    a numeric-coercible amount, category and date. Items without a type
    are given one from their category (income-only categories become
    income, everything else expense).

    Args:
        text: JSON document

    Returns:
        List of transactions

    Raises:
        ImportFormatError: If the document or any item is malformed
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except ValueError as e:
        raise ImportFormatError(f"Not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ImportFormatError("Root must be an array")

    transactions = []
    seen_ids = set()
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ImportFormatError(f"Item {index} is not an object")

        missing = [key for key in REQUIRED_KEYS if item.get(key) in (None, '')]
        if missing:
            raise ImportFormatError(f"Item {index} is missing: {', '.join(missing)}")

        item_id = str(item['id'])
        if item_id in seen_ids:
            raise ImportFormatError(f"Item {index} repeats id {item_id}")
        seen_ids.add(item_id)

        try:
            to_decimal(item['amount'])
        except ValueError as e:
            raise ImportFormatError(f"Item {index} has a non-numeric amount") from e

        record = dict(item)
        if not record.get('type'):
            record['type'] = _infer_kind(str(record['category'])).value

        try:
            transactions.append(Transaction.from_dict(record))
        except ValueError as e:
            raise ImportFormatError(f"Item {index} is invalid: {e}") from e

    logger.info(f"Imported {len(transactions)} transactions")
    return transactions
