"""Display formatting for amounts and dates."""
import logging
from decimal import Decimal
from typing import Optional, Union

from dateutil import parser as dateutil_parser

from ..config.settings import CURRENCY_SYMBOLS, DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


def format_currency(amount: Union[Decimal, float, int], currency: Optional[str] = None) -> str:
    """
    Format amount as currency string.

    Args:
        amount: Numeric amount
        currency: Currency code (USD, GBP, EUR...); defaults to FINANCE_CURRENCY

    Returns:
        Formatted currency string, e.g. ``-$1,234.50``
    """
    code = (currency or DEFAULT_CURRENCY).upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")

    value = Decimal(str(amount))

    # Format with thousands separator and 2 decimal places
    formatted = f"{abs(value):,.2f}"

    if value < 0:
        return f"-{symbol}{formatted}"
    return f"{symbol}{formatted}"


def format_date(date_string: Optional[str]) -> str:
    """
    Format an ISO date for display, e.g. ``Sep 25, 2025``.

    Returns the input unchanged when it is not a real calendar date (the
    validator accepts days such as 2025-02-31) and "" for empty input.
    """
    if not date_string:
        return ""

    try:
        parsed = dateutil_parser.isoparse(date_string)
    except (ValueError, OverflowError):
        logger.debug(f"Not a calendar date, leaving as is: {date_string}")
        return date_string

    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
