"""Node store — construction and destruction of individual chain nodes.

Each node owns one text value and a link to its successor. A node with no
successor terminates a chain.

INVARIANT: A node is destroyed exactly once. Destruction never follows the
successor link; tearing down a chain is the caller's loop, one node at a time.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Node:
    """A single chain node holding one text value."""

    __slots__ = ("value", "next", "_alive")

    def __init__(self, value: str) -> None:
        self.value: str = value
        self.next: Node | None = None
        self._alive = True

    @property
    def alive(self) -> bool:
        return self._alive

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class NodeStore:
    """Creates and destroys nodes, tracking how many are still live.

    Usage::

        store = NodeStore()
        node = store.create("alpha")
        if node is None:
            ...  # allocation failed, nothing to clean up
        store.destroy(node)
    """

    def __init__(self) -> None:
        self._live = 0

    @property
    def live(self) -> int:
        """Number of nodes created and not yet destroyed."""
        return self._live

    def create(self, value: str) -> Node | None:
        """Build a node holding *value*, or None when memory is exhausted.

        Raises:
            TypeError: If *value* is not a ``str``.
        """
        if not isinstance(value, str):
            msg = f"Node values must be str, got {type(value).__name__}"
            raise TypeError(msg)
        try:
            node = Node(value)
        except MemoryError:
            logger.warning("Node allocation failed (value length %d)", len(value))
            return None
        self._live += 1
        return node

    def destroy(self, node: Node) -> None:
        """Release *node* without touching whatever its successor owns.

        Raises:
            ValueError: If *node* was already destroyed.
        """
        if not node._alive:
            msg = f"{node!r} was already destroyed"
            raise ValueError(msg)
        node._alive = False
        node.next = None
        node.value = ""
        self._live -= 1


_default_store = NodeStore()


def default_store() -> NodeStore:
    """Return the process-wide store used when no store is supplied."""
    return _default_store


def create_node(value: str) -> Node | None:
    """Create a node on the default store. See :meth:`NodeStore.create`."""
    return _default_store.create(value)


def destroy_node(node: Node) -> None:
    """Destroy a node on the default store. See :meth:`NodeStore.destroy`."""
    _default_store.destroy(node)
