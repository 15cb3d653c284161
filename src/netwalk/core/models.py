"""
Domain models for the network walker.

This module defines the vertices of the network and the left/right control
symbols that drive a walk through it. All models are immutable once built.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator, Tuple, Union

from ..utils.validation import RegexRule, validate_dataclass
from .exceptions import EmptyInstructionsError, ParseError, ValidationError

if TYPE_CHECKING:
    from .traversal.cursor import InstructionCursor

# Node ids are three symbols drawn from uppercase letters and digits
NODE_ID_PATTERN = r"[A-Z0-9]{3}"
NodeId = str

_node_id_rule = RegexRule(NODE_ID_PATTERN, "node id must be three uppercase letters or digits")


def validate_node_id(value: str, field_name: str = "id") -> None:
    """Raise ValidationError unless value is a well-formed node id."""
    if not _node_id_rule.validate(value):
        raise ValidationError(f"{field_name} {value!r}: {_node_id_rule.error_message}")


class Instruction(Enum):
    """One directional choice applied at a traversal step."""

    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Instruction":
        """Map an ``L``/``R`` symbol to its instruction."""
        try:
            return cls(symbol)
        except ValueError:
            raise ParseError(f"unknown instruction: {symbol!r}") from None

    def __str__(self) -> str:
        return self.value


@validate_dataclass
@dataclass(frozen=True)
class Node:
    """
    A vertex of the network with exactly two labelled outgoing edges.

    Edges are id-based: ``left`` and ``right`` are resolved against the
    owning Network at traversal time, so a Node may reference an id that
    the network does not contain.

    Attributes:
        id (str): The node's own id
        left (str): Id reached on a LEFT instruction
        right (str): Id reached on a RIGHT instruction
    """

    id: str
    left: str
    right: str

    def __post_init__(self):
        validate_node_id(self.id, "id")
        validate_node_id(self.left, "left")
        validate_node_id(self.right, "right")

    def neighbor(self, instruction: Instruction) -> str:
        """Return the id reached from this node under the given instruction."""
        if instruction is Instruction.LEFT:
            return self.left
        return self.right

    def __str__(self) -> str:
        return f"{self.id} = ({self.left}, {self.right})"


@validate_dataclass
@dataclass(frozen=True)
class Instructions:
    """
    The finite, non-empty control sequence replayed cyclically by every walk.

    Attributes:
        steps (Tuple[Instruction, ...]): Instructions in order
    """

    steps: Tuple[Instruction, ...]

    def __post_init__(self):
        # Accept any iterable at construction but store a tuple
        object.__setattr__(self, "steps", tuple(self.steps))
        if not self.steps:
            raise EmptyInstructionsError("instruction sequence must not be empty")

    @classmethod
    def from_line(cls, line: str) -> "Instructions":
        """Parse a line of ``L``/``R`` symbols."""
        symbols = line.strip()
        if not symbols:
            raise EmptyInstructionsError("instruction line is empty")
        return cls(tuple(Instruction.from_symbol(symbol) for symbol in symbols))

    @classmethod
    def of(cls, steps: Iterable[Union[Instruction, str]]) -> "Instructions":
        """Build from instructions or their symbols."""
        return cls(
            tuple(
                step if isinstance(step, Instruction) else Instruction.from_symbol(step)
                for step in steps
            )
        )

    def cursor(self) -> "InstructionCursor":
        """Return a fresh cycling cursor positioned at the first instruction."""
        from .traversal.cursor import InstructionCursor

        return InstructionCursor(self)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Instruction:
        return self.steps[index]

    def __str__(self) -> str:
        return "".join(step.value for step in self.steps)
