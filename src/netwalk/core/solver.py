"""
Puzzle answers computed from raw input.

Part one walks from a single start node to a single target. Part two starts
a walk on every node whose id ends in the start marker, accepts every node
whose id ends in the target marker, and synchronizes the walks.
"""

import logging
from typing import Optional

from ..config import PuzzlePart, WalkConfig
from .parsing import PuzzleInput
from .serialization import SerializationRegistry
from .traversal import NetworkWalker

logger = logging.getLogger(__name__)


def solve(puzzle: PuzzleInput, part: PuzzlePart, config: Optional[WalkConfig] = None) -> int:
    """Compute the answer for ``part`` on an already parsed puzzle."""
    config = config or WalkConfig()
    walker = NetworkWalker(
        puzzle.network,
        puzzle.instructions,
        max_steps=config.max_steps,
        max_workers=config.max_workers,
    )

    if part is PuzzlePart.ONE:
        result = walker.walk(config.start_id, {config.target_id})
    else:
        starts = puzzle.network.ids_ending_with(config.start_marker)
        targets = set(puzzle.network.ids_ending_with(config.target_marker))
        logger.info(f"Synchronizing {len(starts)} walks over {len(targets)} targets")
        result = walker.synchronized_steps(starts, targets)

    logger.info(f"Puzzle part {part.value}: {result}")
    return result


def calculate_result(
    text: str,
    part: PuzzlePart,
    config: Optional[WalkConfig] = None,
    fmt: str = "text",
) -> int:
    """Parse ``text`` in the given format and compute the answer for ``part``."""
    serializer = SerializationRegistry.get_serializer(fmt)
    puzzle = serializer.deserialize(text.encode("utf-8"))
    return solve(puzzle, part, config)
