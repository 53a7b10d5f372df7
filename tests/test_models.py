"""Tests for data models."""
import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from finance_tracker.models import (
    Transaction,
    TransactionKind,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    categories_for,
    to_decimal,
)


class TestCategories:
    """Test category sets keyed by type."""

    def test_expense_categories(self):
        """Test expense set."""
        assert categories_for(TransactionKind.EXPENSE) == {
            'Food', 'Books', 'Transport', 'Entertainment', 'Fees', 'Other'
        }

    def test_income_categories(self):
        """Test income set."""
        assert categories_for(TransactionKind.INCOME) == {'Salary', 'Allowance', 'Gift', 'Other'}

    def test_unknown_kind_is_union(self):
        """Test fallback for missing type."""
        assert categories_for(None) == EXPENSE_CATEGORIES | INCOME_CATEGORIES


class TestTransaction:
    """Test transaction value object."""

    def test_frozen(self, sample_transaction):
        """Test records are immutable."""
        with pytest.raises(FrozenInstanceError):
            sample_transaction.amount = Decimal("1")

    def test_with_changes_keeps_id(self, sample_transaction):
        """Test id survives edits."""
        changed = sample_transaction.with_changes(id="other", amount=Decimal("3"))

        assert changed.id == sample_transaction.id
        assert changed.amount == Decimal("3")

    def test_signed_amount(self, sample_transactions):
        """Test income positive, expense and legacy negative."""
        assert [t.signed_amount for t in sample_transactions] == [
            Decimal("-12.50"), Decimal("-89.99"), Decimal("500"), Decimal("-30")
        ]

    def test_from_dict_accepts_camel_case_timestamps(self):
        """Test exported timestamp keys."""
        txn = Transaction.from_dict({
            'id': 'a', 'description': 'Bus', 'amount': '2', 'category': 'Transport',
            'date': '2025-09-01', 'createdAt': '2025-09-01T10:00:00',
        })

        assert txn.created_at == '2025-09-01T10:00:00'
        assert txn.type is None

    def test_from_dict_missing_field(self):
        """Test required keys."""
        with pytest.raises(ValueError, match="amount"):
            Transaction.from_dict({'id': 'a', 'description': 'Bus', 'category': 'Transport', 'date': '2025-09-01'})

    def test_to_candidate(self, sample_transaction):
        """Test raw form values."""
        assert sample_transaction.to_candidate() == {
            'description': 'Lunch at cafeteria',
            'amount': '12.50',
            'date': '2025-09-25',
            'category': 'Food',
            'type': 'expense',
        }


class TestToDecimal:
    """Test amount conversion."""

    def test_float_uses_shortest_repr(self):
        """Test floats convert without binary noise."""
        assert to_decimal(0.1) == Decimal("0.1")

    @pytest.mark.parametrize("value", ["abc", "", "nan", "inf", True, None])
    def test_rejects_non_numbers(self, value):
        """Test invalid amounts raise ValueError."""
        with pytest.raises(ValueError):
            to_decimal(value)
