"""
Core network model and traversal.
"""

from .exceptions import (
    ConfigurationError,
    DuplicateResourceError,
    EmptyInstructionsError,
    GraphOperationError,
    MalformedNetworkError,
    NodeNotFoundError,
    ParseError,
    ResourceNotFoundError,
    TargetNotReachedError,
    ValidationError,
)
from .models import Instruction, Instructions, Node, NodeId
from .network import Network
from .parsing import PuzzleInput, parse_input
from .traversal import NetworkWalker, synchronized_steps, take_step, walk

__all__ = [
    "ConfigurationError",
    "DuplicateResourceError",
    "EmptyInstructionsError",
    "GraphOperationError",
    "MalformedNetworkError",
    "NodeNotFoundError",
    "ParseError",
    "ResourceNotFoundError",
    "TargetNotReachedError",
    "ValidationError",
    "Instruction",
    "Instructions",
    "Node",
    "NodeId",
    "Network",
    "NetworkWalker",
    "PuzzleInput",
    "parse_input",
    "synchronized_steps",
    "take_step",
    "walk",
]
