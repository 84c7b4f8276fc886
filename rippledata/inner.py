"""Inner nodes of the ledger's state and transaction trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from rippledata.format import HashPrefix, NodeType
from rippledata.hashes import Hash256

_BRANCHES = 16


def _empty_children() -> tuple[Hash256, ...]:
    return tuple(Hash256() for _ in range(_BRANCHES))


@dataclass(frozen=True)
class InnerNode:
    """A tree node with sixteen child hashes; zero hashes are empty branches."""

    id: Hash256
    type: NodeType = NodeType.UNKNOWN
    children: tuple[Hash256, ...] = field(default_factory=_empty_children)

    def __post_init__(self) -> None:
        children = tuple(Hash256(child) for child in self.children)
        if len(children) != _BRANCHES:
            raise ValueError(
                f"InnerNode: wrong number of children {len(children)} expected: {_BRANCHES}"
            )
        object.__setattr__(self, "children", children)
        object.__setattr__(self, "id", Hash256(self.id))
        object.__setattr__(self, "type", NodeType(self.type))

    @property
    def type_name(self) -> str:
        return str(self.type)

    @property
    def prefix(self) -> HashPrefix:
        return HashPrefix.INNER_NODE

    @property
    def node_type(self) -> NodeType:
        return self.type

    @property
    def ledger(self) -> int:
        return 0

    @property
    def hash(self) -> Hash256:
        return self.id

    @property
    def node_id(self) -> Hash256:
        return self.id

    def each(self) -> Iterator[tuple[int, Hash256]]:
        """Yield the position and hash of every non-empty branch."""
        for position, child in enumerate(self.children):
            if not child.is_zero():
                yield position, child

    def count(self) -> int:
        """Number of non-empty branches."""
        return sum(1 for _ in self.each())

    def __str__(self) -> str:
        hashes = ",".join(str(child) for _, child in self.each())
        return f"{self.type_name}: [{hashes}]"