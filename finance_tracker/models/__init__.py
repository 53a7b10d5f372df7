"""Data models for the finance tracker."""
from .transaction import (
    Transaction,
    TransactionKind,
    ExpenseCategory,
    IncomeCategory,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ALL_CATEGORIES,
    categories_for,
    to_decimal,
)
from .dashboard import DashboardStats, Forecast, ForecastStatus, TrendPoint, Notification, Severity

__all__ = [
    'Transaction',
    'TransactionKind',
    'ExpenseCategory',
    'IncomeCategory',
    'EXPENSE_CATEGORIES',
    'INCOME_CATEGORIES',
    'ALL_CATEGORIES',
    'categories_for',
    'to_decimal',
    'DashboardStats',
    'Forecast',
    'ForecastStatus',
    'TrendPoint',
    'Notification',
    'Severity',
]
