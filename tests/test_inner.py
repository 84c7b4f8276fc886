import pytest

from rippledata.format import HashPrefix, NodeType
from rippledata.hashes import Hash256
from rippledata.inner import InnerNode


def children_with(positions):
    children = [Hash256() for _ in range(16)]
    for position, value in positions.items():
        children[position] = value
    return tuple(children)


FIRST = Hash256(bytes([1]) * 32)
SECOND = Hash256(bytes([2]) * 32)


def test_empty_node():
    node = InnerNode(Hash256())
    assert node.count() == 0
    assert list(node.each()) == []


def test_each_yields_non_empty_branches_in_order():
    node = InnerNode(Hash256(), NodeType.ACCOUNT_NODE, children_with({10: SECOND, 3: FIRST}))
    assert list(node.each()) == [(3, FIRST), (10, SECOND)]
    assert node.count() == 2


def test_string_lists_children():
    node = InnerNode(Hash256(), NodeType.ACCOUNT_NODE, children_with({0: FIRST, 15: SECOND}))
    assert str(node) == f"Account Node: [{FIRST},{SECOND}]"


def test_metadata():
    ident = Hash256(bytes(range(32)))
    node = InnerNode(ident, NodeType.TRANSACTION_NODE)
    assert node.prefix is HashPrefix.INNER_NODE
    assert node.node_type is NodeType.TRANSACTION_NODE
    assert node.ledger == 0
    assert node.hash == ident
    assert node.node_id == ident


def test_wrong_number_of_children():
    with pytest.raises(ValueError):
        InnerNode(Hash256(), NodeType.UNKNOWN, tuple(Hash256() for _ in range(15)))


def test_child_of_wrong_size_rejected():
    children = list(children_with({}))
    children[2] = b"\x01" * 5
    with pytest.raises(ValueError):
        InnerNode(Hash256(), NodeType.UNKNOWN, tuple(children))