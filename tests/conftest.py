"""Shared pytest fixtures and test helpers for linkq tests."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

import pytest

from linkq.config.settings import LinkqSettings, get_settings
from linkq.domain.chains import Chain, append
from linkq.domain.invariants import find_violations
from linkq.domain.nodes import NodeStore
from linkq.queue import TextQueue


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep ``LINKQ_*`` variables and cached settings out of every test."""
    for key in list(os.environ):
        if key.startswith("LINKQ_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> NodeStore:
    """A fresh node store so live counts start at zero."""
    return NodeStore()


@pytest.fixture
def queue(store: NodeStore) -> Iterator[TextQueue]:
    """Empty queue on its own store, with a fixed quicksort seed."""
    q = TextQueue(LinkqSettings(sort={"seed": 1234}), store=store)
    yield q
    q.destroy()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def fill(q: TextQueue, values: Iterable[str]) -> TextQueue:
    """Insert *values* at the tail of *q*, asserting each insert succeeds."""
    for value in values:
        assert q.insert_tail(value)
    return q


def build_chain(store: NodeStore, values: Iterable[str]) -> Chain:
    """Build a standalone chain of fresh nodes holding *values*."""
    chain = Chain.empty()
    for value in values:
        node = store.create(value)
        assert node is not None
        append(chain, node)
    return chain


def assert_healthy(q: TextQueue) -> None:
    issues = find_violations(q)
    assert issues == [], issues
