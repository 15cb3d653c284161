"""
Custom exceptions for the network walker.

This module defines the hierarchy of exceptions raised while parsing puzzle
input, building networks and walking them. Each exception type corresponds to
a specific category of failure so that callers can tell a broken network apart
from a search that simply ran out of steps.
"""

from typing import Optional


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required
    validation criteria, such as node id format checks or schema validation.

    Examples:
        * Node id that is not three uppercase letters or digits
        * Empty target set passed to a walk
        * JSON document that does not match the puzzle schema
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ParseError(ValidationError):
    """
    Raised when puzzle text cannot be parsed.

    Examples:
        * Unknown instruction symbol
        * Network line not of the form ``ID = (LEFT, RIGHT)``
        * Missing blank line between instructions and network
    """


class EmptyInstructionsError(ValidationError):
    """
    Raised when an instruction sequence is empty.

    A walk cycles through its instructions indefinitely, so an empty sequence
    is rejected when the sequence is built, before any walk begins.
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when a traversal over the network cannot produce
    a step count.

    Examples:
        * Traversal reaches a node id missing from the network
        * Target not reached within the step bound
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class MalformedNetworkError(GraphOperationError):
    """
    Raised when a traversal step points at a node absent from the network.

    This is fatal for the whole computation: it indicates a broken network,
    not an unreachable target.

    Attributes:
        node_id: The id that could not be resolved
    """

    def __init__(self, message: str, node_id: Optional[str] = None):
        super().__init__(message)
        self.node_id = node_id


class TargetNotReachedError(GraphOperationError):
    """
    Raised when a bounded walk exhausts its step budget.

    Attributes:
        start: The node the walk started from
        max_steps: The step bound that was exceeded
    """

    def __init__(self, message: str, start: Optional[str] = None, max_steps: Optional[int] = None):
        super().__init__(message)
        self.start = start
        self.max_steps = max_steps


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown ``PUZZLE_PART`` value
        * Non-numeric ``NETWALK_MAX_STEPS``
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * Node lookup by non-existent id
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to create a duplicate resource.

    Examples:
        * Two network lines declaring the same node id
    """
