"""
Utility functions for walk operations.
"""

import logging
import time
from contextlib import contextmanager
from typing import AbstractSet, Callable, Generator, Union

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

TargetPredicate = Callable[[str], bool]
Targets = Union[AbstractSet[str], TargetPredicate]


def as_predicate(targets: Targets) -> TargetPredicate:
    """Normalise a target set or predicate into a predicate.

    Raises:
        ValidationError: If an empty target set is given, since no walk
            could ever terminate against it, or if a bare string is given.
    """
    if callable(targets):
        return targets
    # A str is iterable and would be split into single symbols
    if isinstance(targets, str):
        raise ValidationError(
            f"targets must be a set of node ids or a predicate, got string {targets!r}"
        )
    if not targets:
        raise ValidationError("target set must not be empty")
    frozen = frozenset(targets)
    return frozen.__contains__


def describe_targets(targets: Targets) -> str:
    """Short description of a target set for log messages."""
    if callable(targets):
        return getattr(targets, "__name__", "predicate")
    shown = sorted(targets)[:5]
    suffix = ", ..." if len(targets) > 5 else ""
    return "{" + ", ".join(shown) + suffix + "}"


@contextmanager
def timer(label: str = "") -> Generator[None, None, None]:
    """Context manager that logs how long the enclosed block took."""
    start = time.perf_counter()
    yield
    duration = time.perf_counter() - start
    if label:
        logger.debug(f"{label}: {duration*1000:.1f}ms")
