"""Sorting over node chains — merge sort and randomized quicksort.

Both algorithms order values ascending by ``str`` comparison, which for
Python strings matches byte-wise comparison of their UTF-8 encodings.

INVARIANT: Sorting only relinks. No node is created, destroyed, or copied,
and the multiset of values is unchanged.
"""

from __future__ import annotations

import random
from enum import StrEnum

from linkq.domain.chains import Chain, append, concat, detach, merge, split
from linkq.domain.nodes import Node


class SortAlgorithm(StrEnum):
    """Sorting strategies a queue can be ordered with."""

    MERGE = "merge"
    QUICK = "quick"


def merge_sort(chain: Chain) -> Chain:
    """Stable, deterministic O(n log n) merge sort.

    Splits at the counted midpoint, sorts each half, and merges them.
    Recursion depth is ``ceil(log2(n))``.
    """
    if chain.size <= 1:
        return chain
    left, right = split(chain)
    return merge(merge_sort(left), merge_sort(right))


def partition(chain: Chain, pivot: Node) -> tuple[Chain, Chain, Chain]:
    """Relink every node of *chain* into less / equal / greater than *pivot*.

    *pivot* itself heads the equal chain. Each node is appended in O(1).
    """
    less, equal, greater = Chain.empty(), Chain.single(pivot), Chain.empty()
    node = chain.head
    for _ in range(chain.size):
        assert node is not None
        following = node.next
        if node.value < pivot.value:
            append(less, node)
        elif node.value > pivot.value:
            append(greater, node)
        else:
            append(equal, node)
        node = following
    return less, equal, greater


def quick_sort(chain: Chain, rng: random.Random | None = None) -> Chain:
    """Randomized-pivot quicksort, expected O(n log n).

    Each pass picks a pivot index uniformly from ``[0, size)``, detaches
    it, partitions the rest, and schedules ``less``, the pivot run, and
    ``greater`` in that order. Pending pieces live on an explicit stack, so
    unlucky pivots cost time but never Python stack depth.
    """
    if chain.size <= 1:
        return chain
    rng = rng or random.Random()

    result = Chain.empty()
    # (chain, already_sorted); popped LIFO so "less" is finished first.
    pending: list[tuple[Chain, bool]] = [(chain, False)]
    while pending:
        piece, done = pending.pop()
        if done or piece.size <= 1:
            result = concat(result, piece)
            continue
        pivot, rest = detach(piece, rng.randrange(piece.size))
        less, equal, greater = partition(rest, pivot)
        pending.append((greater, False))
        pending.append((equal, True))
        pending.append((less, False))
    return result


def sort_chain(
    chain: Chain,
    algorithm: SortAlgorithm | str = SortAlgorithm.MERGE,
    *,
    rng: random.Random | None = None,
) -> Chain:
    """Sort *chain* with the named *algorithm* and return the new handle.

    Raises:
        ValueError: If *algorithm* is not a known :class:`SortAlgorithm`.
    """
    algorithm = SortAlgorithm(algorithm)
    if algorithm is SortAlgorithm.QUICK:
        return quick_sort(chain, rng)
    return merge_sort(chain)
