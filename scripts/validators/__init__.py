"""Validation utilities for the genotype concordance scheme.

Modules:
    base: ValidationError and the row-shape and table-coverage checks

Example:
    >>> from validators import ValidationError, validate_complete
    >>> try:
    ...     validate_complete({})
    ... except ValidationError as e:
    ...     print(f"Validation failed: {e}")
    Validation failed: Missing scheme tuple: [HOM_REF, HOM_REF]
"""

from .base import (
    ValidationError,
    validate_row_length,
    validate_complete,
    validate_no_extra_keys,
    validate_na_exclusive,
)

__all__ = [
    "ValidationError",
    "validate_row_length",
    "validate_complete",
    "validate_no_extra_keys",
    "validate_na_exclusive",
]
