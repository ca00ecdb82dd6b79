"""Structural invariant checks for queues.

Reports violations as human-readable strings rather than raising, so a
caller can observe a queue before and after an operation and collect
everything that went wrong. An empty list means the queue is healthy.
"""

from __future__ import annotations

from typing import Protocol

from linkq.domain.nodes import Node


class QueueLike(Protocol):
    head: Node | None
    tail: Node | None

    def size(self) -> int: ...


def find_violations(queue: QueueLike) -> list[str]:
    """Return every broken head/tail/size invariant on *queue*.

    Walks at most ``size + 1`` hops from head, so a cycle cannot hang it.
    """
    issues: list[str] = []
    size = queue.size()
    head, tail = queue.head, queue.tail

    if size < 0:
        issues.append(f"negative size {size}")
        return issues
    if size == 0:
        if head is not None:
            issues.append("empty queue has a head")
        if tail is not None:
            issues.append("empty queue has a tail")
        return issues
    if head is None or tail is None:
        issues.append(f"queue of size {size} is missing its head or tail")
        return issues

    if tail.next is not None:
        issues.append("tail has a successor")

    seen: set[int] = set()
    node: Node | None = head
    count = 0
    last: Node | None = None
    while node is not None and count <= size:
        if id(node) in seen:
            issues.append(f"cycle detected after {count} nodes")
            return issues
        seen.add(id(node))
        last = node
        node = node.next
        count += 1

    if count != size:
        issues.append(f"size is {size} but {count} nodes are reachable")
    if last is not tail:
        issues.append("walking from head does not end at tail")
    return issues


def check_sorted(queue: QueueLike) -> bool:
    """True when values run non-decreasing from head to tail."""
    node = queue.head
    while node is not None and node.next is not None:
        if node.value > node.next.value:
            return False
        node = node.next
    return True
