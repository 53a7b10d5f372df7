"""Safe compilation of user supplied search patterns."""
import logging
import re
from enum import Enum
from typing import Optional, Pattern, Union

logger = logging.getLogger(__name__)


class PatternStatus(Enum):
    """Marker returned when search text is not a usable pattern."""
    INVALID = "invalid"


INVALID_PATTERN = PatternStatus.INVALID


def compile_search_pattern(text: Optional[str]) -> Union[Pattern, PatternStatus, None]:
    """
    Compile search text into a case-insensitive pattern.

    Args:
        text: Free-form text typed by the user

    Returns:
        Compiled pattern, None for blank text, or INVALID_PATTERN when the
        text is not a valid regular expression
    """
    if text is None or not text.strip():
        return None

    try:
        return re.compile(text, re.IGNORECASE)
    except (re.error, OverflowError, RecursionError) as e:
        logger.debug(f"Invalid search pattern {text!r}: {e}")
        return INVALID_PATTERN
