"""Tests for parsing the puzzle text format."""

import pytest

from netwalk.core.exceptions import EmptyInstructionsError, ParseError
from netwalk.core.models import Instruction, Node
from netwalk.core.network import Network
from netwalk.core.parsing import parse_element, parse_input, parse_network

from conftest import CIRCULAR_EXAMPLE, DIRECT_EXAMPLE


def test_parse_circular_example():
    """Parsed puzzle matches a network built by hand."""
    puzzle = parse_input(CIRCULAR_EXAMPLE)

    assert list(puzzle.instructions) == [Instruction.LEFT, Instruction.LEFT, Instruction.RIGHT]
    assert puzzle.network == Network(
        [
            Node("AAA", "BBB", "BBB"),
            Node("BBB", "AAA", "ZZZ"),
            Node("ZZZ", "ZZZ", "ZZZ"),
        ]
    )


def test_parse_without_trailing_newline():
    puzzle = parse_input(DIRECT_EXAMPLE)
    assert len(puzzle.network) == 7
    assert str(puzzle.instructions) == "RL"


def test_parse_crlf_input():
    puzzle = parse_input(CIRCULAR_EXAMPLE.replace("\n", "\r\n"))
    assert len(puzzle.network) == 3


def test_parse_element():
    assert parse_element("11A = (11B, XXX)") == Node("11A", "11B", "XXX")


@pytest.mark.parametrize(
    "line",
    ["AAA = (BBB CCC)", "AAA=(BBB, CCC)", "AAAA = (BBB, CCC)", "aaa = (bbb, ccc)", "garbage"],
)
def test_parse_element_invalid(line):
    with pytest.raises(ParseError, match="invalid element format"):
        parse_element(line)


def test_parse_network_reports_line_number():
    text = "AAA = (BBB, BBB)\nBBB = oops\n"
    with pytest.raises(ParseError, match="on line 2"):
        parse_network(text)


def test_parse_input_line_numbers_count_header():
    text = "LR\n\nAAA = (AAA, AAA)\nbroken\n"
    with pytest.raises(ParseError, match="on line 4"):
        parse_input(text)


def test_parse_network_skips_blank_lines():
    network = parse_network("AAA = (BBB, BBB)\n\nBBB = (AAA, AAA)\n")
    assert network.node_ids() == ["AAA", "BBB"]


def test_parse_missing_separator():
    with pytest.raises(ParseError, match="invalid format"):
        parse_input("LR\nAAA = (AAA, AAA)\n")


def test_parse_unknown_instruction():
    with pytest.raises(ParseError, match="unknown instruction: 'X'"):
        parse_input("LXR\n\nAAA = (AAA, AAA)\n")


def test_parse_blank_instruction_line():
    with pytest.raises(EmptyInstructionsError):
        parse_input("   \n\nAAA = (AAA, AAA)\n")
