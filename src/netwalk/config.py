"""
Runtime configuration.

Two things are configurable: which puzzle part to compute, read from the
``PUZZLE_PART`` environment variable, and how walks are run, read from
``NETWALK_*`` variables into a WalkConfig.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError, ValidationError
from .core.models import validate_node_id
from .core.traversal.walker import DEFAULT_MAX_STEPS
from .utils.validation import RangeRule, RegexRule, first_failure

logger = logging.getLogger(__name__)

PUZZLE_PART_ENV = "PUZZLE_PART"
MAX_STEPS_ENV = "NETWALK_MAX_STEPS"
MAX_WORKERS_ENV = "NETWALK_MAX_WORKERS"

_max_steps_rule = RangeRule(min_value=1, error_message="max_steps must be a positive integer")
_max_workers_rule = RangeRule(
    min_value=1, max_value=64, error_message="max_workers must be between 1 and 64"
)
_marker_rule = RegexRule(r"[A-Z0-9]", "markers must be a single uppercase letter or digit")


class PuzzlePart(Enum):
    """Which of the two answers to compute."""

    ONE = "one"
    TWO = "two"

    @classmethod
    def parse(cls, value: str) -> "PuzzlePart":
        """Case-insensitive lookup by name."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown puzzle part: {value}") from None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PuzzlePart":
        """Read PUZZLE_PART; unset means part one."""
        env = os.environ if environ is None else environ
        value = env.get(PUZZLE_PART_ENV)
        if value is None:
            return cls.ONE
        return cls.parse(value)


@dataclass
class WalkConfig:
    """
    Settings for a computation.

    Attributes:
        max_steps (Optional[int]): Step bound per walk; None walks without bound
        max_workers (int): Threads used for multi-start walks
        start_id (str): Start node for part one
        target_id (str): Target node for part one
        start_marker (str): Last symbol of part-two start ids
        target_marker (str): Last symbol of part-two target ids
    """

    max_steps: Optional[int] = DEFAULT_MAX_STEPS
    max_workers: int = 1
    start_id: str = "AAA"
    target_id: str = "ZZZ"
    start_marker: str = "A"
    target_marker: str = "Z"

    def __post_init__(self):
        checks = [
            (_max_workers_rule, self.max_workers),
            (_marker_rule, self.start_marker),
            (_marker_rule, self.target_marker),
        ]
        if self.max_steps is not None:
            checks.insert(0, (_max_steps_rule, self.max_steps))
        failure = first_failure(tuple(checks))
        if failure is not None:
            raise ConfigurationError(f"{failure.errors[0]}, got {failure.context['value']!r}")
        try:
            validate_node_id(self.start_id, "start_id")
            validate_node_id(self.target_id, "target_id")
        except ValidationError as e:
            raise ConfigurationError(e.args[0]) from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "WalkConfig":
        """
        Build a config from NETWALK_* variables.

        ``NETWALK_MAX_STEPS`` of ``0`` or ``none`` disables the step bound.
        Keyword overrides win over the environment.
        """
        env = os.environ if environ is None else environ
        values = {}

        raw_steps = env.get(MAX_STEPS_ENV)
        if raw_steps is not None:
            if raw_steps.strip().lower() in ("0", "none"):
                values["max_steps"] = None
            else:
                values["max_steps"] = _parse_int(MAX_STEPS_ENV, raw_steps)

        raw_workers = env.get(MAX_WORKERS_ENV)
        if raw_workers is not None:
            values["max_workers"] = _parse_int(MAX_WORKERS_ENV, raw_workers)

        values.update(overrides)
        config = cls(**values)
        logger.debug(f"Loaded configuration: {config}")
        return config


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
