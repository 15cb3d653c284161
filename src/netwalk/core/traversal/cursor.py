"""Cycling cursor over a fixed instruction sequence."""

from typing import TYPE_CHECKING, Iterator

from ..exceptions import EmptyInstructionsError

if TYPE_CHECKING:
    from ..models import Instruction, Instructions


class InstructionCursor:
    """
    Yields the instructions of a sequence forever, wrapping after the last.

    The position is an index taken modulo the sequence length, so the
    sequence must be non-empty; Instructions already guarantees that, the
    check here covers duck-typed sequences.
    """

    def __init__(self, instructions: "Instructions"):
        if len(instructions) == 0:
            raise EmptyInstructionsError("cannot cycle over an empty instruction sequence")
        self._instructions = instructions
        self._length = len(instructions)
        self._index = 0
        self._cycles = 0

    @property
    def position(self) -> int:
        """Index of the instruction that will be returned next."""
        return self._index

    @property
    def cycles(self) -> int:
        """Number of complete passes through the sequence so far."""
        return self._cycles

    def __iter__(self) -> Iterator["Instruction"]:
        return self

    def __next__(self) -> "Instruction":
        instruction = self._instructions[self._index]
        self._index += 1
        if self._index == self._length:
            self._index = 0
            self._cycles += 1
        return instruction
