"""
Transaction form validation.

Checks a raw candidate (the values a user typed, or an imported record)
field by field and reports every offending field at once. Bad values are
reported as data; nothing here raises for malformed input and the
candidate is never modified.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..models import TransactionKind, categories_for
from . import patterns

logger = logging.getLogger(__name__)

FIELDS = ('description', 'amount', 'date', 'category', 'type')


class ErrorCode(Enum):
    """Kinds of field validation failure."""
    EMPTY_FIELD = "EmptyField"
    FORMAT_ERROR = "FormatError"
    DUPLICATE_WORD = "DuplicateWord"
    INVALID_ENUM = "InvalidEnum"


@dataclass(frozen=True)
class FieldError:
    """The first rule a single field failed."""
    code: ErrorCode
    message: str


@dataclass
class ValidationResult:
    """Result of transaction validation."""
    errors: Dict[str, FieldError] = field(default_factory=dict)

    @property
    def accepted(self) -> bool:
        """True when no field produced an error."""
        return not self.errors

    @property
    def messages(self) -> Dict[str, str]:
        """Field name to message, for display."""
        return {name: error.message for name, error in self.errors.items()}

    def to_dict(self) -> dict:
        """Convert validation result to dictionary."""
        return {
            'accepted': self.accepted,
            'errors': {
                name: {'code': error.code.value, 'message': error.message}
                for name, error in self.errors.items()
            },
        }


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _amount_text(value: Any) -> Optional[str]:
    """String form of an amount, or None when the value has no sensible one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)):
        return repr(value) if isinstance(value, float) else str(value)
    return None


def _check_description(value: Any) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(ErrorCode.EMPTY_FIELD, "Description is required.")
    if not isinstance(value, str) or patterns.contains_digit(value):
        return FieldError(ErrorCode.FORMAT_ERROR, "Numbers are not allowed in the description.")
    if not patterns.is_well_formed_description(value):
        return FieldError(
            ErrorCode.FORMAT_ERROR,
            "Invalid description. Letters and single spaces only, no leading/trailing spaces."
        )
    if patterns.has_adjacent_duplicate_word(value):
        return FieldError(
            ErrorCode.DUPLICATE_WORD,
            'Description contains duplicate words (e.g., "coffee coffee").'
        )
    return None


def _check_amount(value: Any) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(ErrorCode.EMPTY_FIELD, "Amount is required.")
    text = _amount_text(value)
    if text is None or not patterns.is_well_formed_amount(text):
        return FieldError(
            ErrorCode.FORMAT_ERROR,
            "Invalid amount. Must be a non-negative number (max 2 decimals)."
        )
    return None


def _check_date(value: Any) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(ErrorCode.EMPTY_FIELD, "Date is required.")
    if not isinstance(value, str) or not patterns.is_well_formed_date(value):
        return FieldError(ErrorCode.FORMAT_ERROR, "Invalid date format (YYYY-MM-DD).")
    return None


def _parse_kind(value: Any) -> Optional[TransactionKind]:
    if not isinstance(value, str):
        return None
    for kind in TransactionKind:
        if kind.value == value:
            return kind
    return None


def _check_type(value: Any) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(ErrorCode.EMPTY_FIELD, "Type is required.")
    if _parse_kind(value) is None:
        return FieldError(ErrorCode.INVALID_ENUM, "Type must be 'income' or 'expense'.")
    return None


def _check_category(value: Any, kind: Optional[TransactionKind]) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(ErrorCode.EMPTY_FIELD, "Category is required.")
    allowed = categories_for(kind)
    if not isinstance(value, str) or value not in allowed:
        label = f"{kind.value} " if kind else ""
        return FieldError(
            ErrorCode.INVALID_ENUM,
            f"Invalid {label}category. Choose one of: {', '.join(sorted(allowed))}."
        )
    return None


def validate(candidate: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a transaction candidate.

    Every field is checked independently and at most one error is kept per
    field (the first rule that failed). The category is checked against the
    set allowed for the candidate's type; when the type itself is invalid
    the union of both sets is used so only the type is reported.

    Args:
        candidate: Mapping of description, amount, date, category and type

    Returns:
        ValidationResult with accepted flag and per-field errors
    """
    kind = _parse_kind(candidate.get('type'))

    checks = {
        'description': _check_description(candidate.get('description')),
        'amount': _check_amount(candidate.get('amount')),
        'date': _check_date(candidate.get('date')),
        'category': _check_category(candidate.get('category'), kind),
        'type': _check_type(candidate.get('type')),
    }

    result = ValidationResult(errors={name: error for name, error in checks.items() if error})

    if not result.accepted:
        logger.debug(f"Validation failed: {result.messages}")

    return result
