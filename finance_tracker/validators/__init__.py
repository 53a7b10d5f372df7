"""Validation modules."""
from .transaction_validator import validate, ValidationResult, FieldError, ErrorCode
from .search_pattern import compile_search_pattern, INVALID_PATTERN, PatternStatus

__all__ = [
    'validate',
    'ValidationResult',
    'FieldError',
    'ErrorCode',
    'compile_search_pattern',
    'INVALID_PATTERN',
    'PatternStatus',
]
