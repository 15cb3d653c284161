"""
Tests for custom exceptions.
"""

from netwalk.core.exceptions import (
    EmptyInstructionsError,
    GraphOperationError,
    MalformedNetworkError,
    ParseError,
    TargetNotReachedError,
    ValidationError,
)


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_parse_errors_are_validation_errors():
    assert issubclass(ParseError, ValidationError)
    assert issubclass(EmptyInstructionsError, ValidationError)
    assert str(ParseError("bad line")) == "Validation Error: bad line"


def test_walk_errors_are_distinct():
    """A broken network and an exhausted bound are different failures."""
    malformed = MalformedNetworkError("missing", node_id="QQQ")
    exhausted = TargetNotReachedError("too far", start="AAA", max_steps=10)

    assert isinstance(malformed, GraphOperationError)
    assert isinstance(exhausted, GraphOperationError)
    assert not isinstance(malformed, TargetNotReachedError)
    assert not isinstance(exhausted, MalformedNetworkError)
    assert malformed.node_id == "QQQ"
    assert (exhausted.start, exhausted.max_steps) == ("AAA", 10)
    assert str(malformed) == "Graph Operation Error: missing"
