"""
Network traversal: cycling instruction cursor and the walker built on it.
"""

from .cursor import InstructionCursor
from .utils import Targets, as_predicate, timer
from .walker import (
    DEFAULT_MAX_STEPS,
    NetworkWalker,
    synchronized_steps,
    take_step,
    walk,
)

__all__ = [
    "DEFAULT_MAX_STEPS",
    "InstructionCursor",
    "NetworkWalker",
    "Targets",
    "as_predicate",
    "synchronized_steps",
    "take_step",
    "timer",
    "walk",
]
