"""Transaction data model."""
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import FrozenSet, Optional, Union


class TransactionKind(Enum):
    """Whether a transaction adds to or takes from the balance."""
    INCOME = "income"
    EXPENSE = "expense"


class ExpenseCategory(Enum):
    """Categories allowed for expense transactions."""
    FOOD = "Food"
    BOOKS = "Books"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    FEES = "Fees"
    OTHER = "Other"


class IncomeCategory(Enum):
    """Categories allowed for income transactions."""
    SALARY = "Salary"
    ALLOWANCE = "Allowance"
    GIFT = "Gift"
    OTHER = "Other"


EXPENSE_CATEGORIES: FrozenSet[str] = frozenset(c.value for c in ExpenseCategory)
INCOME_CATEGORIES: FrozenSet[str] = frozenset(c.value for c in IncomeCategory)
ALL_CATEGORIES: FrozenSet[str] = EXPENSE_CATEGORIES | INCOME_CATEGORIES


def categories_for(kind: Optional[TransactionKind]) -> FrozenSet[str]:
    """
    Get the category names allowed for a transaction kind.

    Args:
        kind: Transaction kind, or None when unknown

    Returns:
        Allowed category names (union of both sets when kind is unknown)
    """
    if kind is TransactionKind.INCOME:
        return INCOME_CATEGORIES
    if kind is TransactionKind.EXPENSE:
        return EXPENSE_CATEGORIES
    return ALL_CATEGORIES


def to_decimal(value: Union[str, int, float, Decimal]) -> Decimal:
    """Convert a stored or typed amount to Decimal, raising ValueError if impossible."""
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric amount: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a numeric amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a numeric amount: {value!r}")
    return amount


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single income or expense record.

    Attributes:
        id: Opaque identifier, immutable once assigned
        description: Free text description (letters and single spaces)
        amount: Non-negative amount with at most 2 decimals
        date: ISO date string (YYYY-MM-DD)
        category: Category name, interpreted relative to ``type``
        type: Income or expense; None for legacy untyped records
        created_at: ISO timestamp of creation
        updated_at: ISO timestamp of last edit
    """
    id: str
    description: str
    amount: Decimal
    date: str
    category: str
    type: Optional[TransactionKind] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_expense(self) -> bool:
        """Untyped legacy records count as expenses."""
        return self.type is not TransactionKind.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with income positive and expense negative."""
        return self.amount if self.type is TransactionKind.INCOME else -self.amount

    def with_changes(self, **changes) -> "Transaction":
        """Return a copy with the given fields replaced. The id never changes."""
        changes.pop('id', None)
        return replace(self, **changes)

    def to_candidate(self) -> dict:
        """Convert to the raw form shape accepted by the validator."""
        return {
            'description': self.description,
            'amount': str(self.amount),
            'date': self.date,
            'category': self.category,
            'type': self.type.value if self.type else None,
        }

    def _amount_for_json(self) -> Union[float, str]:
        """Amount as a JSON number, or as a string when a float would lose digits."""
        as_float = float(self.amount)
        if Decimal(repr(as_float)) == self.amount:
            return as_float
        return str(self.amount)

    def to_dict(self) -> dict:
        """Convert transaction to the exported document shape."""
        result = {
            'id': self.id,
            'description': self.description,
            'amount': self._amount_for_json(),
            'category': self.category,
            'date': self.date,
        }
        if self.type is not None:
            result['type'] = self.type.value
        if self.created_at:
            result['createdAt'] = self.created_at
        if self.updated_at:
            result['updatedAt'] = self.updated_at
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """
        Build a transaction from the exported document shape.

        Args:
            data: Mapping with id, description, amount, category, date and
                optional type / createdAt / updatedAt

        Returns:
            Transaction instance

        Raises:
            ValueError: If a required key is missing, the amount is not
                numeric, or the type is not a known kind
        """
        missing = [key for key in ('id', 'description', 'amount', 'category', 'date') if data.get(key) in (None, '')]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        raw_type = data.get('type')
        kind = TransactionKind(raw_type) if raw_type else None

        return cls(
            id=str(data['id']),
            description=str(data['description']),
            amount=to_decimal(data['amount']),
            date=str(data['date']),
            category=str(data['category']),
            type=kind,
            created_at=data.get('createdAt') or data.get('created_at'),
            updated_at=data.get('updatedAt') or data.get('updated_at'),
        )
