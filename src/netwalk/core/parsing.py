"""
Parsing of the puzzle text format.

The input is an instruction line, a blank line, then one node per line::

    RL

    AAA = (BBB, CCC)
    BBB = (DDD, EEE)
"""

import logging
import re
from dataclasses import dataclass

from .exceptions import ParseError
from .models import NODE_ID_PATTERN, Instructions, Node
from .network import Network

logger = logging.getLogger(__name__)

ELEMENT_REGEX = re.compile(
    rf"(?P<id>{NODE_ID_PATTERN}) = \((?P<left>{NODE_ID_PATTERN}), (?P<right>{NODE_ID_PATTERN})\)"
)


@dataclass(frozen=True)
class PuzzleInput:
    """A parsed puzzle: the instruction sequence and the network it drives."""

    instructions: Instructions
    network: Network


def parse_element(line: str, line_number: int = 0) -> Node:
    """Parse one ``ID = (LEFT, RIGHT)`` line."""
    match = ELEMENT_REGEX.fullmatch(line.strip())
    if match is None:
        where = f" on line {line_number}" if line_number else ""
        raise ParseError(f"invalid element format{where}: {line!r}")
    return Node(match.group("id"), match.group("left"), match.group("right"))


def parse_network(text: str, first_line_number: int = 1) -> Network:
    """Parse a block of element lines, skipping blank ones."""
    nodes = [
        parse_element(line, line_number)
        for line_number, line in enumerate(text.splitlines(), start=first_line_number)
        if line.strip()
    ]
    return Network(nodes)


def parse_input(text: str) -> PuzzleInput:
    """
    Parse a complete puzzle.

    Raises:
        ParseError: If the text is not an instruction line, a blank line and
            a block of element lines
        EmptyInstructionsError: If the instruction line is blank
    """
    normalized = text.replace("\r\n", "\n")
    head, separator, body = normalized.lstrip("\n").partition("\n\n")
    if not separator:
        raise ParseError("invalid format: expected instructions, a blank line, then the network")

    instructions = Instructions.from_line(head)

    # Line numbers in the network block are counted from the top of the input
    first_line_number = head.count("\n") + 3
    network = parse_network(body, first_line_number)
    logger.debug(f"Parsed {len(instructions)} instructions and {len(network)} nodes")
    return PuzzleInput(instructions=instructions, network=network)
