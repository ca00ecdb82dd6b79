"""TextQueue — a singly-linked queue of text values.

The queue tracks its first node, its last node, and its length. Inserts
and head removal are O(1); reversal and sorting relink nodes in place.

INVARIANT: ``size == 0`` iff ``head is None`` iff ``tail is None``, and
walking ``size - 1`` hops from head lands on tail, whose successor is None.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Iterator

from linkq.config.settings import LinkqSettings, get_settings
from linkq.domain.chains import Chain
from linkq.domain.nodes import Node, NodeStore, default_store
from linkq.domain.sorting import SortAlgorithm, sort_chain

logger = logging.getLogger(__name__)


class TextQueue:
    """Ordered, mutable collection of ``str`` values.

    A destroyed queue behaves like an absent one: inserts and removals
    report failure, and everything else is a no-op.

    Usage::

        q = TextQueue()
        q.insert_tail("b")
        q.insert_tail("a")
        q.sort()
        q.to_list()  # ["a", "b"]
    """

    def __init__(
        self,
        settings: LinkqSettings | None = None,
        store: NodeStore | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._store = store or default_store()
        self._rng = random.Random(self._settings.sort.seed)
        self._destroyed = False
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0

    # ── Introspection ────────────────────────────────────────────────

    @property
    def settings(self) -> LinkqSettings:
        return self._settings

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def size(self) -> int:
        """Number of values in the queue (0 once destroyed)."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def to_list(self) -> list[str]:
        return list(self)

    def __repr__(self) -> str:
        if self._destroyed:
            return "TextQueue(<destroyed>)"
        return f"TextQueue({self.to_list()!r})"

    # ── Insert / remove ──────────────────────────────────────────────

    def insert_head(self, value: str) -> bool:
        """Link a new node holding *value* before the current head.

        Returns False, leaving the queue untouched, if the queue was
        destroyed or the node could not be allocated.
        """
        if self._destroyed:
            return False
        node = self._store.create(value)
        if node is None:
            return False
        if self._size:
            node.next = self.head
            self.head = node
        else:
            self.head = self.tail = node
        self._size += 1
        return True

    def insert_tail(self, value: str) -> bool:
        """Link a new node holding *value* after the current tail.

        Same failure conditions as :meth:`insert_head`.
        """
        if self._destroyed:
            return False
        node = self._store.create(value)
        if node is None:
            return False
        if self._size:
            assert self.tail is not None
            self.tail.next = node
            self.tail = node
        else:
            self.head = self.tail = node
        self._size += 1
        return True

    def remove_head(
        self,
        buffer: bytearray | None = None,
        bufsize: int | None = None,
    ) -> bool:
        """Destroy the head node, optionally copying its value out first.

        When *buffer* is given, the UTF-8 bytes of the removed value are
        copied into it, truncated to ``bufsize - 1`` bytes, followed by a
        zero byte. *bufsize* defaults to ``len(buffer)`` and is clamped to
        it, so the copy never runs past the buffer.

        Returns False, with the buffer untouched, on an empty or destroyed
        queue.
        """
        if self._destroyed or self._size == 0:
            return False
        node = self.head
        assert node is not None

        if buffer is not None:
            _copy_out(node.value, buffer, bufsize)

        self.head = node.next
        self._store.destroy(node)
        if self._size == 1:
            self.tail = None
        self._size -= 1
        return True

    def pop_head(self) -> str | None:
        """Remove the head and return its value, or None when empty."""
        if self._destroyed or self._size == 0:
            return None
        assert self.head is not None
        value = self.head.value
        self.remove_head()
        return value

    # ── Structural operations ────────────────────────────────────────

    def reverse(self) -> None:
        """Reverse the queue in place by flipping every successor link."""
        if self._destroyed or self._size == 0:
            return
        self.tail = self.head
        prev: Node | None = None
        cur = self.head
        while cur is not None:
            nxt = cur.next
            cur.next = prev
            prev = cur
            cur = nxt
        self.head = prev

    def sort(self, algorithm: SortAlgorithm | str | None = None) -> None:
        """Sort values ascending by relinking nodes.

        *algorithm* defaults to ``settings.sort.algorithm``. Destroyed queues
        and queues with fewer than two values are left alone without looking
        at *algorithm*.

        Raises:
            ValueError: If *algorithm* is not a known :class:`SortAlgorithm`.
        """
        if self._destroyed or self._size <= 1:
            return
        chosen = SortAlgorithm(algorithm or self._settings.sort.algorithm)

        start = time.perf_counter()
        chain = sort_chain(
            Chain(self.head, self.tail, self._size),
            chosen,
            rng=self._rng,
        )
        self.head, self.tail = chain.head, chain.tail
        logger.debug(
            "Sorted %d values with %s sort in %.2fms",
            self._size,
            chosen.value,
            (time.perf_counter() - start) * 1000,
        )

    def sort_merge(self) -> None:
        self.sort(SortAlgorithm.MERGE)

    def sort_quick(self) -> None:
        self.sort(SortAlgorithm.QUICK)

    # ── Teardown ─────────────────────────────────────────────────────

    def destroy(self) -> None:
        """Destroy every node, head to tail, then retire the handle."""
        if self._destroyed:
            return
        count = 0
        node = self.head
        while node is not None:
            following = node.next
            self._store.destroy(node)
            node = following
            count += 1
        self.head = self.tail = None
        self._size = 0
        self._destroyed = True
        logger.debug("Destroyed queue with %d nodes", count)


def _copy_out(value: str, buffer: bytearray, bufsize: int | None) -> None:
    """Write *value* into *buffer* as truncated, zero-terminated UTF-8."""
    capacity = len(buffer) if bufsize is None else min(bufsize, len(buffer))
    if capacity <= 0:
        return
    # lone surrogates are legal in str; encode them instead of failing
    encoded = value.encode("utf-8", "surrogatepass")
    data = encoded[: capacity - 1]
    if len(data) < len(encoded):
        logger.debug("Truncated removed value from %d to %d bytes", len(encoded), len(data))
    buffer[: len(data)] = data
    buffer[len(data)] = 0


def new_queue(settings: LinkqSettings | None = None) -> TextQueue | None:
    """Create an empty queue, or return None when memory is exhausted."""
    try:
        return TextQueue(settings)
    except MemoryError:
        logger.warning("Queue allocation failed")
        return None
