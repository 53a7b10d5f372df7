"""Dashboard statistics for a transaction list."""
import logging
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_FLOOR
from typing import Callable, Iterable, List, Optional, Union

import pandas as pd

from ..config.settings import NO_CATEGORY, TREND_DAYS
from ..models import (
    DashboardStats,
    Forecast,
    ForecastStatus,
    Notification,
    Severity,
    Transaction,
    TrendPoint,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Fixed English labels so output does not depend on the process locale
WEEKDAY_LABELS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')

Notifier = Callable[[Notification], None]


def _log_notification(notification: Notification) -> None:
    logger.warning(f"[{notification.severity.value}] {notification.message}")


def _decimal_sum(values: Iterable) -> Decimal:
    return sum(values, ZERO)


class DashboardAggregator:
    """
    Computes dashboard figures over a snapshot of transactions.

    The snapshot is copied into a DataFrame on construction; the input list
    is never kept or modified. Dates are compared as ISO strings so records
    with loosely valid dates (e.g. 2025-02-31) still aggregate.
    """

    COLUMNS = ['category', 'amount', 'signed_amount', 'date', 'is_expense']

    def __init__(self, transactions: Iterable[Transaction]):
        """Initialize aggregator with transaction list."""
        self.df = self._to_dataframe(transactions)

    def _to_dataframe(self, transactions: Iterable[Transaction]) -> pd.DataFrame:
        """Convert transactions to pandas DataFrame."""
        data = []
        for txn in transactions:
            data.append({
                'category': txn.category,
                'amount': txn.amount,
                'signed_amount': txn.signed_amount,
                'date': str(txn.date),
                'is_expense': txn.is_expense,
            })

        return pd.DataFrame(data, columns=self.COLUMNS)

    @property
    def expenses(self) -> pd.DataFrame:
        """Expense and legacy untyped rows."""
        if self.df.empty:
            return self.df
        return self.df[self.df['is_expense'].astype(bool)]

    def net_balance(self) -> Decimal:
        """Income minus expenses."""
        return _decimal_sum(self.df['signed_amount'])

    def gross_volume(self) -> Decimal:
        """Sum of all amounts regardless of type."""
        return _decimal_sum(self.df['amount'])

    def record_count(self) -> int:
        """Number of records."""
        return len(self.df)

    def top_category(self) -> str:
        """
        Most frequent category.

        Ties go to the category seen first in input order; "-" when there
        are no records.
        """
        if self.df.empty:
            return NO_CATEGORY

        # sort=False keeps first-appearance order, idxmax returns the first maximum
        counts = self.df.groupby('category', sort=False).size()
        return str(counts.idxmax())

    def monthly_expense(self, today: date) -> Decimal:
        """Total expense dated in the same calendar month as ``today``."""
        expenses = self.expenses
        if expenses.empty:
            return ZERO

        month_prefix = today.strftime('%Y-%m')
        in_month = expenses['date'].str[:7] == month_prefix
        return _decimal_sum(expenses.loc[in_month, 'amount'])

    def daily_trend(self, today: date, days: int = TREND_DAYS) -> List[TrendPoint]:
        """
        Expense totals per day for the ``days`` days ending today.

        Always returns one point per day, oldest first, with zero totals for
        days without expenses.
        """
        expenses = self.expenses
        daily = {}
        if not expenses.empty:
            for day_key, amounts in expenses.groupby('date')['amount']:
                daily[day_key] = _decimal_sum(amounts)

        points = []
        for offset in range(days - 1, -1, -1):
            day = today - timedelta(days=offset)
            points.append(TrendPoint(
                label=WEEKDAY_LABELS[day.weekday()],
                day=day,
                total=daily.get(day.isoformat(), ZERO),
            ))
        return points

    def forecast(
        self,
        budget: Decimal,
        monthly_expense: Decimal,
        today: date,
        notifier: Optional[Notifier] = None
    ) -> Forecast:
        """
        Project when the monthly budget runs out.

        The average daily spend so far this month (spend / day of month) is
        extrapolated over the remaining budget. Going over budget emits one
        ERROR notification through ``notifier``.
        """
        if budget <= ZERO:
            return Forecast(ForecastStatus.NO_BUDGET, "No budget set")

        remaining = budget - monthly_expense

        if remaining <= ZERO:
            notify = notifier or _log_notification
            notify(Notification(
                f"Budget exceeded: spent {monthly_expense} of {budget} this month",
                Severity.ERROR
            ))
            return Forecast(ForecastStatus.EXCEEDED, "Budget exceeded")

        daily_average = monthly_expense / Decimal(today.day)

        if daily_average > ZERO:
            days_left = int((remaining / daily_average).to_integral_value(rounding=ROUND_FLOOR))
            return Forecast(ForecastStatus.RUNS_OUT, f"Runs out in {days_left} days", days_left)

        return Forecast(ForecastStatus.ON_TRACK, "On track")

    def get_stats(
        self,
        budget: Decimal,
        today: date,
        notifier: Optional[Notifier] = None
    ) -> DashboardStats:
        """Compute every dashboard figure."""
        monthly = self.monthly_expense(today)
        budget_percent = min(monthly / budget * HUNDRED, HUNDRED) if budget > ZERO else None

        return DashboardStats(
            net_balance=self.net_balance(),
            gross_volume=self.gross_volume(),
            record_count=self.record_count(),
            top_category=self.top_category(),
            monthly_expense=monthly,
            budget=budget,
            budget_remaining=budget - monthly,
            budget_percent=budget_percent,
            forecast=self.forecast(budget, monthly, today, notifier),
            daily_trend=self.daily_trend(today),
        )


def aggregate(
    transactions: Iterable[Transaction],
    budget: Union[Decimal, int, str] = ZERO,
    now: Optional[Union[date, datetime]] = None,
    notifier: Optional[Notifier] = None
) -> DashboardStats:
    """
    Compute dashboard statistics.

    Args:
        transactions: Snapshot of all records
        budget: Monthly budget (0 means no budget)
        now: Reference date; defaults to today
        notifier: Receives the budget-exceeded notification; logged as a
            warning when omitted

    Returns:
        DashboardStats
    """
    if now is None:
        now = datetime.now()
    today = now.date() if isinstance(now, datetime) else now

    budget = Decimal(str(budget))

    stats = DashboardAggregator(transactions).get_stats(budget, today, notifier)
    logger.debug(f"Aggregated {stats.record_count} records for {today.isoformat()}")
    return stats
