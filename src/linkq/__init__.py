"""linkq — a singly-linked queue of text values with in-place sorting."""

from linkq.domain.invariants import check_sorted, find_violations
from linkq.domain.nodes import Node, NodeStore, create_node, destroy_node
from linkq.domain.sorting import SortAlgorithm
from linkq.queue import TextQueue, new_queue

__version__ = "0.1.0"

__all__ = [
    "Node",
    "NodeStore",
    "SortAlgorithm",
    "TextQueue",
    "__version__",
    "check_sorted",
    "create_node",
    "destroy_node",
    "find_violations",
    "new_queue",
]
