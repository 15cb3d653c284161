"""Shared test fixtures."""

import pytest

from netwalk.core.models import Instructions
from netwalk.core.network import Network
from netwalk.core.parsing import PuzzleInput, parse_input

DIRECT_EXAMPLE = """\
RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)"""

CIRCULAR_EXAMPLE = """\
LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)
"""

SYNCHRONIZED_EXAMPLE = """\
LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""


@pytest.fixture
def direct_puzzle() -> PuzzleInput:
    """Puzzle where the target is two steps away."""
    return parse_input(DIRECT_EXAMPLE)


@pytest.fixture
def circular_puzzle() -> PuzzleInput:
    """Puzzle that needs the instructions replayed twice."""
    return parse_input(CIRCULAR_EXAMPLE)


@pytest.fixture
def synchronized_puzzle() -> PuzzleInput:
    """Puzzle with two starts ending in A and two targets ending in Z."""
    return parse_input(SYNCHRONIZED_EXAMPLE)


@pytest.fixture
def broken_network() -> Network:
    """Network whose BBB right edge points at a missing node."""
    return Network.from_mapping(
        {
            "AAA": ("BBB", "BBB"),
            "BBB": ("AAA", "QQQ"),
            "ZZZ": ("ZZZ", "ZZZ"),
        }
    )


@pytest.fixture
def dead_end_network() -> Network:
    """Well-formed network where ZZZ is unreachable from AAA."""
    return Network.from_mapping(
        {
            "AAA": ("BBB", "BBB"),
            "BBB": ("AAA", "AAA"),
            "ZZZ": ("ZZZ", "ZZZ"),
        }
    )


@pytest.fixture
def lr() -> Instructions:
    return Instructions.from_line("LR")
