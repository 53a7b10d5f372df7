"""Dashboard statistics model."""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class Severity(Enum):
    """Notification severity."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A message the surrounding application should surface to the user."""
    message: str
    severity: Severity = Severity.INFO


class ForecastStatus(Enum):
    """Budget forecast outcome."""
    NO_BUDGET = "no_budget"
    EXCEEDED = "exceeded"
    RUNS_OUT = "runs_out"
    ON_TRACK = "on_track"


@dataclass(frozen=True)
class Forecast:
    """
    Budget forecast for the current month.

    Attributes:
        status: Which forecast state applies
        message: Human readable summary
        days_left: Days until the budget runs out (RUNS_OUT only)
    """
    status: ForecastStatus
    message: str
    days_left: Optional[int] = None


@dataclass(frozen=True)
class TrendPoint:
    """Total expense for one calendar day."""
    label: str
    day: date
    total: Decimal


@dataclass(frozen=True)
class DashboardStats:
    """
    Derived figures shown on the dashboard.

    Amounts are raw Decimals; rounding is left to presentation.
    """
    net_balance: Decimal
    gross_volume: Decimal
    record_count: int
    top_category: str
    monthly_expense: Decimal
    budget: Decimal
    budget_remaining: Decimal
    budget_percent: Optional[Decimal]
    forecast: Forecast
    daily_trend: List[TrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert dashboard stats to a JSON friendly dictionary."""
        return {
            'net_balance': float(self.net_balance),
            'gross_volume': float(self.gross_volume),
            'record_count': self.record_count,
            'top_category': self.top_category,
            'monthly_expense': float(self.monthly_expense),
            'budget': float(self.budget),
            'budget_remaining': float(self.budget_remaining),
            'budget_percent': float(self.budget_percent) if self.budget_percent is not None else None,
            'forecast': {
                'status': self.forecast.status.value,
                'message': self.forecast.message,
                'days_left': self.forecast.days_left,
            },
            'daily_trend': [
                {'label': p.label, 'date': p.day.isoformat(), 'total': float(p.total)}
                for p in self.daily_trend
            ],
        }
