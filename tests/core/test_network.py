"""Tests for the Network mapping."""

import pytest

from netwalk.core.exceptions import (
    DuplicateResourceError,
    MalformedNetworkError,
    NodeNotFoundError,
    ResourceNotFoundError,
)
from netwalk.core.models import Instruction, Node
from netwalk.core.network import Network


def test_network_lookup(direct_puzzle):
    network = direct_puzzle.network
    assert len(network) == 7
    assert "AAA" in network
    assert network.has_node("ZZZ")
    assert not network.has_node("QQQ")
    assert network.get_node("CCC") == Node("CCC", "ZZZ", "GGG")


def test_get_node_missing(direct_puzzle):
    with pytest.raises(NodeNotFoundError, match="Node 'QQQ' not found") as exc_info:
        direct_puzzle.network.get_node("QQQ")
    assert isinstance(exc_info.value, ResourceNotFoundError)


def test_take_step(direct_puzzle):
    network = direct_puzzle.network
    assert network.take_step("BBB", Instruction.LEFT) == "DDD"
    assert network.take_step("BBB", Instruction.RIGHT) == "EEE"
    assert network.take_step("QQQ", Instruction.RIGHT) is None


def test_iteration_is_sorted(synchronized_puzzle):
    assert list(synchronized_puzzle.network) == [
        "11A",
        "11B",
        "11Z",
        "22A",
        "22B",
        "22C",
        "22Z",
        "XXX",
    ]


def test_ids_ending_with(synchronized_puzzle):
    network = synchronized_puzzle.network
    assert network.ids_ending_with("A") == ["11A", "22A"]
    assert network.ids_ending_with("Z") == ["11Z", "22Z"]
    assert network.ids_ending_with("Q") == []


def test_duplicate_ids_rejected():
    with pytest.raises(DuplicateResourceError, match="'AAA' is declared more than once"):
        Network([Node("AAA", "AAA", "AAA"), Node("AAA", "BBB", "BBB")])


def test_network_is_read_only(direct_puzzle):
    with pytest.raises(TypeError):
        direct_puzzle.network._nodes["QQQ"] = Node("QQQ", "QQQ", "QQQ")


def test_dangling_references(broken_network, direct_puzzle):
    assert broken_network.dangling_references() == [("BBB", "QQQ")]
    assert direct_puzzle.network.dangling_references() == []


def test_validate(broken_network, direct_puzzle):
    direct_puzzle.network.validate()
    with pytest.raises(MalformedNetworkError, match="'BBB' references unknown node 'QQQ'"):
        broken_network.validate()


def test_network_equality():
    mapping = {"AAA": ("BBB", "BBB"), "BBB": ("AAA", "AAA")}
    assert Network.from_mapping(mapping) == Network.from_mapping(dict(reversed(mapping.items())))
    assert Network.from_mapping(mapping) != Network()
