"""Handle-tolerant functional surface over :class:`TextQueue`.

Every function accepts ``None`` in place of a queue and treats it as the
documented empty case: ``False`` for inserts and removal, ``0`` for size,
and a silent no-op for everything else. External drivers that juggle
possibly-absent handles call these instead of the methods.
"""

from __future__ import annotations

from linkq.config.settings import LinkqSettings
from linkq.domain.sorting import SortAlgorithm
from linkq.queue import TextQueue
from linkq.queue import new_queue as _new_queue

__all__ = [
    "destroy_queue",
    "insert_head",
    "insert_tail",
    "new_queue",
    "remove_head",
    "reverse",
    "size",
    "sort",
]


def new_queue(settings: LinkqSettings | None = None) -> TextQueue | None:
    """Create an empty queue, or None if it could not be allocated."""
    return _new_queue(settings)


def destroy_queue(q: TextQueue | None) -> None:
    if q is None:
        return
    q.destroy()


def insert_head(q: TextQueue | None, text: str) -> bool:
    if q is None:
        return False
    return q.insert_head(text)


def insert_tail(q: TextQueue | None, text: str) -> bool:
    if q is None:
        return False
    return q.insert_tail(text)


def remove_head(
    q: TextQueue | None,
    buffer: bytearray | None = None,
    bufsize: int | None = None,
) -> bool:
    """Remove the head of *q*; see :meth:`TextQueue.remove_head`."""
    if q is None:
        return False
    return q.remove_head(buffer, bufsize)


def size(q: TextQueue | None) -> int:
    return 0 if q is None else q.size()


def reverse(q: TextQueue | None) -> None:
    if q is None:
        return
    q.reverse()


def sort(q: TextQueue | None, algorithm: SortAlgorithm | str | None = None) -> None:
    if q is None:
        return
    q.sort(algorithm)
