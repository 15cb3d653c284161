"""
Base Validation Components for netwalk

This module provides the validation rules used by the network models and the
configuration layer. Rules are small objects with a ``validate()`` method that
returns a boolean; callers decide which exception to raise when a rule fails.

Supported checks:
- Numeric range validation
- Regular expression pattern matching
- Dataclass field type validation
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    Base class for all validation rules.

    Attributes:
        error_message (str): Message to display when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")

    def check(self, value: Any) -> ValidationResult:
        """Validate a value and wrap the outcome in a ValidationResult."""
        if self.validate(value):
            return ValidationResult(is_valid=True, errors=[])
        return ValidationResult(
            is_valid=False,
            errors=[self.error_message],
            context={"value": value},
        )


class RangeRule(ValidationRule):
    """
    Rule for validating integer ranges.

    Either min_value or max_value can be None to create an open-ended range.
    Booleans are rejected even though they are ints.
    """

    def __init__(
        self,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
        error_message: str = "",
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True


class RegexRule(ValidationRule):
    """
    Rule for regex pattern matching.

    The whole value must match the pattern, not just a prefix.

    Attributes:
        pattern: Compiled regular expression pattern
    """

    def __init__(self, pattern: str, error_message: str):
        super().__init__(error_message)
        self.pattern = re.compile(pattern)

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return bool(self.pattern.fullmatch(value))


class DataclassRule(ValidationRule):
    """
    Rule for validating dataclass fields.

    This rule ensures that fields in a dataclass instance match their type hints.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        super().__init__(error_message or f"Invalid value for {dataclass_type.__name__}")
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        origin = get_origin(expected_type)

        if expected_type is Any:
            return True

        # Optional[X] and other unions
        if origin is Union:
            return any(self._validate_type(value, arg) for arg in get_args(expected_type))

        if expected_type is type(None):
            return value is None

        if origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            # Tuple[X, ...]
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._validate_type(item, args[0]) for item in value)
            if len(args) != len(value):
                return False
            return all(self._validate_type(val, typ) for val, typ in zip(value, args))
        elif origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            return all(self._validate_type(item, args[0]) for item in value)
        elif origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        # Enum members are instances of their class, nothing special needed
        if isinstance(expected_type, type) and issubclass(expected_type, Enum):
            return isinstance(value, expected_type)
        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def validate(self, value: Any) -> bool:
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if not self._validate_type(getattr(value, field_name), field_type):
                return False

        return True


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The class's own ``__post_init__`` runs first so that it can raise a more
    specific error; field types are checked afterwards.

    Example:
        >>> @validate_dataclass
        ... @dataclass(frozen=True)
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        if original_post_init:
            original_post_init(self)

        validator = DataclassRule(cls)
        if not validator.validate(self):
            raise TypeError(f"Invalid field types in {cls.__name__}")

    cls.__post_init__ = validated_post_init
    return cls


def first_failure(rules: Tuple[Tuple[ValidationRule, Any], ...]) -> Optional[ValidationResult]:
    """Run (rule, value) pairs in order and return the first failing result."""
    for rule, value in rules:
        result = rule.check(value)
        if not result.is_valid:
            return result
    return None
