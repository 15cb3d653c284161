"""
Network data structure keyed by node id.

The network is a read-only mapping from node id to Node. Edges are not
materialised as objects; each Node carries the ids of its left and right
neighbours and those ids are resolved by dictionary lookup when a walk takes
a step. A neighbour id with no Node behind it is therefore representable,
and it is the walker's job to surface it.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .exceptions import DuplicateResourceError, MalformedNetworkError, NodeNotFoundError
from .models import Instruction, Node

logger = logging.getLogger(__name__)


class Network:
    """
    Directed graph where every node has exactly two labelled outgoing edges.

    Attributes:
        _nodes (Mapping[str, Node]): Read-only view of id -> Node
    """

    def __init__(self, nodes: Iterable[Node] = ()):
        """
        Build a network from its nodes.

        Args:
            nodes: Nodes to index by id

        Raises:
            DuplicateResourceError: If two nodes share an id
        """
        index: Dict[str, Node] = {}
        for node in nodes:
            if node.id in index:
                raise DuplicateResourceError(f"Node '{node.id}' is declared more than once")
            index[node.id] = node
        self._nodes: Mapping[str, Node] = MappingProxyType(index)
        logger.debug(f"Built network with {len(index)} nodes")

    @classmethod
    def from_mapping(cls, edges: Mapping[str, Tuple[str, str]]) -> "Network":
        """Build a network from ``{id: (left, right)}``."""
        return cls(Node(node_id, left, right) for node_id, (left, right) in edges.items())

    def take_step(self, current: str, instruction: Instruction) -> Optional[str]:
        """
        Follow one edge out of ``current``.

        Returns:
            The left neighbour for LEFT, the right neighbour for RIGHT, or
            None if ``current`` is not in the network.
        """
        node = self._nodes.get(current)
        if node is None:
            return None
        return node.neighbor(instruction)

    def get_node(self, node_id: str) -> Node:
        """
        Get a node by id.

        Raises:
            NodeNotFoundError: If the id is not in the network
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(f"Node '{node_id}' not found") from None

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def node_ids(self) -> List[str]:
        """All node ids in sorted order."""
        return sorted(self._nodes)

    def ids_ending_with(self, marker: str) -> List[str]:
        """All node ids whose last symbol is ``marker``, sorted."""
        return [node_id for node_id in self.node_ids() if node_id.endswith(marker)]

    def dangling_references(self) -> List[Tuple[str, str]]:
        """Return (node id, missing neighbour id) pairs in id order."""
        missing: List[Tuple[str, str]] = []
        for node_id in self.node_ids():
            node = self._nodes[node_id]
            for neighbor in (node.left, node.right):
                if neighbor not in self._nodes:
                    missing.append((node_id, neighbor))
        return missing

    def validate(self) -> None:
        """
        Check that every edge resolves to a node in the network.

        Raises:
            MalformedNetworkError: On the first dangling reference
        """
        dangling = self.dangling_references()
        if dangling:
            node_id, neighbor = dangling[0]
            raise MalformedNetworkError(
                f"Node '{node_id}' references unknown node '{neighbor}'", node_id=neighbor
            )

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.node_ids())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return dict(self._nodes) == dict(other._nodes)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Network(nodes={len(self._nodes)})"
