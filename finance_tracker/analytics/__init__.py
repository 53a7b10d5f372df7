"""Derived dashboard statistics."""
from .dashboard_aggregator import DashboardAggregator, aggregate, WEEKDAY_LABELS

__all__ = ['DashboardAggregator', 'aggregate', 'WEEKDAY_LABELS']
