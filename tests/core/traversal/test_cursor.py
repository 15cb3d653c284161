"""Tests for the cycling instruction cursor."""

import pytest

from netwalk.core.exceptions import EmptyInstructionsError
from netwalk.core.models import Instruction, Instructions
from netwalk.core.traversal import InstructionCursor


def test_cursor_wraps_around():
    """After the last instruction the cursor returns to the first."""
    cursor = Instructions.from_line("LLR").cursor()
    taken = [next(cursor) for _ in range(7)]
    assert "".join(str(step) for step in taken) == "LLRLLRL"


def test_cursor_tracks_position_and_cycles():
    cursor = Instructions.from_line("LR").cursor()
    assert (cursor.position, cursor.cycles) == (0, 0)
    next(cursor)
    assert (cursor.position, cursor.cycles) == (1, 0)
    next(cursor)
    assert (cursor.position, cursor.cycles) == (0, 1)


def test_cursor_single_instruction():
    cursor = Instructions.from_line("R").cursor()
    assert all(next(cursor) is Instruction.RIGHT for _ in range(5))
    assert cursor.cycles == 5


def test_cursor_rejects_empty_sequence():
    """An empty sequence cannot be cycled."""
    with pytest.raises(EmptyInstructionsError, match="empty"):
        InstructionCursor([])


def test_cursors_are_independent():
    instructions = Instructions.from_line("LR")
    first, second = instructions.cursor(), instructions.cursor()
    next(first)
    assert next(second) is Instruction.LEFT
    assert next(first) is Instruction.RIGHT
