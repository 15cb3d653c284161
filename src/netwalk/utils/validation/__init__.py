"""
Validation package for netwalk.

This package provides the validation rules used by the network models and the
configuration layer.
"""

from .base import (
    DataclassRule,
    RangeRule,
    RegexRule,
    ValidationResult,
    ValidationRule,
    first_failure,
    validate_dataclass,
)

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RangeRule",
    "RegexRule",
    "DataclassRule",
    "first_failure",
    "validate_dataclass",
]
