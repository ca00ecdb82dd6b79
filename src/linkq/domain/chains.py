"""Chain handles and splice primitives.

A :class:`Chain` is a non-owning view of a run of nodes: its first node,
its last node, and how many nodes lie between them. The sort algorithms
take chains apart and put them back together with these primitives.

INVARIANT: Every primitive relinks existing nodes. None of them creates,
destroys, or copies a node, and none of them touches a node's value.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from linkq.domain.nodes import Node


@dataclass
class Chain:
    """First node, last node, and length of a ``None``-terminated run."""

    head: Node | None = None
    tail: Node | None = None
    size: int = 0

    @classmethod
    def empty(cls) -> Chain:
        return cls()

    @classmethod
    def single(cls, node: Node) -> Chain:
        """Wrap *node* as a one-node chain, severing its successor link."""
        node.next = None
        return cls(node, node, 1)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        for _ in range(self.size):
            assert node is not None
            yield node
            node = node.next

    def values(self) -> list[str]:
        return [node.value for node in self]


def append(chain: Chain, node: Node) -> None:
    """Splice *node* onto the end of *chain* in O(1)."""
    node.next = None
    if chain.tail is None:
        chain.head = chain.tail = node
    else:
        chain.tail.next = node
        chain.tail = node
    chain.size += 1


def concat(first: Chain, second: Chain) -> Chain:
    """Join two chains by linking *first*'s tail to *second*'s head.

    An empty side yields the other side unchanged.
    """
    if first.size == 0:
        return second
    if second.size == 0:
        return first
    assert first.tail is not None
    first.tail.next = second.head
    return Chain(first.head, second.tail, first.size + second.size)


def split(chain: Chain) -> tuple[Chain, Chain]:
    """Cut *chain* at its midpoint.

    The left half gets ``size // 2`` nodes and the right half the rest.
    Chains shorter than two nodes come back whole on the left.
    """
    if chain.size < 2:
        return chain, Chain.empty()
    left_size = chain.size // 2
    mid = chain.head
    for _ in range(left_size - 1):
        assert mid is not None
        mid = mid.next
    assert mid is not None and mid.next is not None
    right = Chain(mid.next, chain.tail, chain.size - left_size)
    mid.next = None
    return Chain(chain.head, mid, left_size), right


def merge(left: Chain, right: Chain) -> Chain:
    """Merge two sorted chains into one sorted chain.

    On equal values the left node goes first, so merging is stable.
    """
    out = Chain.empty()
    a, b = left.head, right.head
    while a is not None and b is not None:
        if a.value <= b.value:
            taken, a = a, a.next
        else:
            taken, b = b, b.next
        append(out, taken)
    rest = a if a is not None else b
    rest_tail = left.tail if a is not None else right.tail
    if rest is not None:
        remainder = Chain(rest, rest_tail, left.size + right.size - out.size)
        return concat(out, remainder)
    return out


def detach(chain: Chain, index: int) -> tuple[Node, Chain]:
    """Unlink the node at *index*, returning it and the remaining chain.

    Raises:
        IndexError: If *index* is outside ``[0, size)``.
    """
    if not 0 <= index < chain.size:
        msg = f"chain index {index} out of range for size {chain.size}"
        raise IndexError(msg)
    assert chain.head is not None
    if index == 0:
        node = chain.head
        rest = Chain(node.next, chain.tail if chain.size > 1 else None, chain.size - 1)
        node.next = None
        return node, rest

    prev = chain.head
    for _ in range(index - 1):
        assert prev.next is not None
        prev = prev.next
    node = prev.next
    assert node is not None
    prev.next = node.next
    tail = prev if node is chain.tail else chain.tail
    node.next = None
    return node, Chain(chain.head, tail, chain.size - 1)
