"""
netwalk - Instruction-driven walks over left/right networks

This package parses a network of nodes with two labelled outgoing edges and a
left/right instruction sequence, then counts the steps a walk needs to reach a
target node. It includes:

- The network model and a parser for its text format
- A walker that replays instructions cyclically, with an optional step bound
- Synchronization of several walks by least common multiple
- JSON and text serializers, configuration from the environment and a CLI
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("netwalk requires Python 3.9 or higher")

# Import commonly used components for easier access
from .config import PuzzlePart, WalkConfig
from .core.models import Instruction, Instructions, Node
from .core.network import Network
from .core.solver import calculate_result, solve
from .core.traversal import NetworkWalker

__all__ = [
    "Instruction",
    "Instructions",
    "Network",
    "NetworkWalker",
    "Node",
    "PuzzlePart",
    "WalkConfig",
    "calculate_result",
    "solve",
]
