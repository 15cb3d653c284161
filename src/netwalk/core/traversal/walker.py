"""
Instruction-driven walks through a Network.

A walk moves a token one edge per step. The edge taken at each step is chosen
by the next instruction of a sequence that is replayed cyclically, and the
walk ends on the first node accepted by a caller-supplied target test.

Several independent walks can be synchronized: the first step at which every
walk sits on an accepting node is taken to be the least common multiple of
their individual step counts. That is only correct when each walk's target
hits are perfectly periodic from step zero, i.e. the first hitting time is
also the period. This precondition is not verified; graphs built for this
kind of puzzle satisfy it, arbitrary graphs need not.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from typing import Dict, Iterable, List, Optional, Sequence

from ..exceptions import MalformedNetworkError, TargetNotReachedError, ValidationError
from ..models import Instruction, Instructions
from ..network import Network
from .utils import Targets, as_predicate, describe_targets, timer

logger = logging.getLogger(__name__)

# Constants
DEFAULT_MAX_STEPS = 10_000_000


class NetworkWalker:
    """
    Walks a network under a fixed, cyclically replayed instruction sequence.

    The walker holds no per-walk state; every call builds its own cursor and
    counter, so one walker may serve concurrent walks.

    Attributes:
        network (Network): The graph to walk
        instructions (Instructions): Control sequence shared by every walk
        max_steps (Optional[int]): Step bound per walk, None for unbounded
        max_workers (int): Thread count used by walk_all
    """

    def __init__(
        self,
        network: Network,
        instructions: Instructions,
        max_steps: Optional[int] = DEFAULT_MAX_STEPS,
        max_workers: int = 1,
    ):
        if len(instructions) == 0:
            raise ValidationError("instruction sequence must not be empty")
        if max_steps is not None and max_steps < 1:
            raise ValueError("max_steps must be a positive integer or None")
        if max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
        self.network = network
        self.instructions = instructions
        self.max_steps = max_steps
        self.max_workers = max_workers

    def take_step(self, current: str, instruction: Instruction) -> Optional[str]:
        """Follow one edge; None when ``current`` is not in the network."""
        return self.network.take_step(current, instruction)

    def walk(self, start: str, targets: Targets, include_start: bool = False) -> int:
        """
        Count the edge traversals until the walk first lands on a target.

        Args:
            start: Node the token starts on
            targets: Set of accepting ids, or a predicate over ids
            include_start: Accept ``start`` itself, returning 0

        Returns:
            Number of edges traversed; at least 1 unless include_start applies

        Raises:
            ValidationError: If targets is an empty set
            MalformedNetworkError: If the walk reaches an id missing from the network
            TargetNotReachedError: If max_steps traversals pass without a hit
        """
        accepts = as_predicate(targets)
        if include_start and accepts(start):
            logger.debug(f"Walk from {start} starts on a target")
            return 0

        current = start
        steps = 0
        cursor = self.instructions.cursor()
        with timer(f"walk from {start}"):
            for instruction in cursor:
                if self.max_steps is not None and steps >= self.max_steps:
                    raise TargetNotReachedError(
                        f"No target {describe_targets(targets)} reached from '{start}' "
                        f"within {self.max_steps} steps",
                        start=start,
                        max_steps=self.max_steps,
                    )
                next_node = self.take_step(current, instruction)
                if next_node is None:
                    raise MalformedNetworkError(
                        f"Unknown node '{current}' reached after {steps} steps from '{start}'",
                        node_id=current,
                    )
                steps += 1
                current = next_node
                if accepts(current):
                    break
                # A dangling edge is reported even when the bound runs out on this step
                if current not in self.network:
                    raise MalformedNetworkError(
                        f"Unknown node '{current}' reached after {steps} steps from '{start}'",
                        node_id=current,
                    )

        logger.debug(
            f"Walk from {start} reached {current} after {steps} steps "
            f"({cursor.cycles} full instruction cycles)"
        )
        return steps

    def walk_all(self, starts: Iterable[str], targets: Targets) -> Dict[str, int]:
        """
        Run one independent walk per start node.

        Returns:
            Mapping of start id to its step count, in the order of ``starts``
        """
        start_list: List[str] = list(starts)
        if self.max_workers > 1 and len(start_list) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                counts = list(executor.map(lambda start: self.walk(start, targets), start_list))
        else:
            counts = [self.walk(start, targets) for start in start_list]
        return dict(zip(start_list, counts))

    def synchronized_steps(self, starts: Sequence[str], targets: Targets) -> int:
        """
        First step at which every walk is on a target, assuming periodic hits.

        Each walk's first-hit count is combined by least common multiple,
        seeded with 1. See the module docstring for the periodicity
        precondition this relies on.
        """
        if not starts:
            logger.warning("No start nodes given; synchronized step count is 1")
        counts = self.walk_all(starts, targets)
        for start, count in counts.items():
            logger.info(f"Start {start}: first target after {count} steps")
        return reduce(math.lcm, counts.values(), 1)


def take_step(network: Network, current: str, instruction: Instruction) -> Optional[str]:
    """Follow one edge of ``network``; None when ``current`` is absent."""
    return network.take_step(current, instruction)


def walk(
    network: Network,
    start: str,
    targets: Targets,
    instructions: Instructions,
    max_steps: Optional[int] = DEFAULT_MAX_STEPS,
    include_start: bool = False,
) -> int:
    """Count steps from ``start`` to the first target. See NetworkWalker.walk."""
    walker = NetworkWalker(network, instructions, max_steps=max_steps)
    return walker.walk(start, targets, include_start=include_start)


def synchronized_steps(
    network: Network,
    starts: Sequence[str],
    targets: Targets,
    instructions: Instructions,
    max_steps: Optional[int] = DEFAULT_MAX_STEPS,
    max_workers: int = 1,
) -> int:
    """LCM of the independent walks from ``starts``. See NetworkWalker.synchronized_steps."""
    walker = NetworkWalker(network, instructions, max_steps=max_steps, max_workers=max_workers)
    return walker.synchronized_steps(starts, targets)
