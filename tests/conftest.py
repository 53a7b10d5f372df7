"""Pytest configuration and fixtures."""
import pytest
from datetime import datetime
from decimal import Decimal

from finance_tracker.models import Transaction, TransactionKind
from finance_tracker.storage import JsonStore
from finance_tracker.tracker import FinanceTracker


@pytest.fixture
def valid_candidate():
    """Raw form values that pass validation."""
    return {
        'description': 'Lunch',
        'amount': '12.5',
        'date': '2025-09-25',
        'category': 'Food',
        'type': 'expense',
    }


@pytest.fixture
def sample_transaction():
    """Create a sample expense transaction."""
    return Transaction(
        id="txn_1",
        description="Lunch at cafeteria",
        amount=Decimal("12.50"),
        date="2025-09-25",
        category="Food",
        type=TransactionKind.EXPENSE,
    )


@pytest.fixture
def sample_transactions():
    """Create a mixed list of income, expense and legacy records."""
    return [
        Transaction(
            id="txn_1",
            description="Lunch at cafeteria",
            amount=Decimal("12.50"),
            date="2025-09-25",
            category="Food",
            type=TransactionKind.EXPENSE,
        ),
        Transaction(
            id="txn_2",
            description="Chemistry Textbook",
            amount=Decimal("89.99"),
            date="2025-09-23",
            category="Books",
            type=TransactionKind.EXPENSE,
        ),
        Transaction(
            id="txn_3",
            description="Monthly allowance",
            amount=Decimal("500"),
            date="2025-09-01",
            category="Allowance",
            type=TransactionKind.INCOME,
        ),
        Transaction(
            id="txn_4",
            description="Bus pass",
            amount=Decimal("30"),
            date="2025-08-30",
            category="Transport",
            type=None,
        ),
    ]


@pytest.fixture
def fixed_now():
    """Reference time used by dashboard tests."""
    return datetime(2025, 9, 25, 12, 0, 0)


@pytest.fixture
def store(tmp_path):
    """Empty JSON store in a temporary directory (no seed records)."""
    return JsonStore(
        tmp_path / "data.json",
        tmp_path / "budget.json",
        seed_file=None
    )


@pytest.fixture
def notifications():
    """Collects notifications emitted by the tracker."""
    return []


@pytest.fixture
def tracker(store, fixed_now, notifications):
    """Tracker over an empty store with a fixed clock."""
    return FinanceTracker(store, clock=lambda: fixed_now, notifier=notifications.append)
