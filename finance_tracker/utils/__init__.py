"""Utility functions."""
from .logger import setup_logger
from .formatting import format_currency, format_date
from .highlight import highlight
from .ids import generate_id

__all__ = [
    'setup_logger',
    'format_currency',
    'format_date',
    'highlight',
    'generate_id',
]
