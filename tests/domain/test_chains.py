"""Tests for chain splice primitives."""

import pytest

from linkq.domain.chains import Chain, append, concat, detach, merge, split
from linkq.domain.nodes import NodeStore
from tests.conftest import build_chain


def _terminated(chain: Chain) -> bool:
    return chain.tail is None or chain.tail.next is None


class TestChain:
    def test_empty(self) -> None:
        chain = Chain.empty()
        assert chain.head is None and chain.tail is None
        assert len(chain) == 0
        assert chain.values() == []

    def test_single_severs_successor(self, store: NodeStore) -> None:
        chain = build_chain(store, ["a", "b"])
        assert chain.head is not None
        one = Chain.single(chain.head)
        assert one.values() == ["a"]
        assert one.head is one.tail
        assert _terminated(one)


class TestAppend:
    def test_onto_empty(self, store: NodeStore) -> None:
        chain = Chain.empty()
        node = store.create("x")
        assert node is not None
        append(chain, node)
        assert chain.head is node and chain.tail is node
        assert chain.size == 1

    def test_keeps_order(self, store: NodeStore) -> None:
        chain = build_chain(store, ["a", "b", "c"])
        assert chain.values() == ["a", "b", "c"]
        assert _terminated(chain)


class TestConcat:
    def test_empty_left_returns_right_unchanged(self, store: NodeStore) -> None:
        right = build_chain(store, ["a"])
        assert concat(Chain.empty(), right) is right

    def test_empty_right_returns_left_unchanged(self, store: NodeStore) -> None:
        left = build_chain(store, ["a"])
        assert concat(left, Chain.empty()) is left

    def test_links_tail_to_head(self, store: NodeStore) -> None:
        left = build_chain(store, ["a", "b"])
        right = build_chain(store, ["c", "d"])
        joined = concat(left, right)
        assert joined.values() == ["a", "b", "c", "d"]
        assert joined.head is left.head
        assert joined.tail is right.tail
        assert joined.size == 4


class TestSplit:
    @pytest.mark.parametrize(
        "count,left_size,right_size",
        [(2, 1, 1), (3, 1, 2), (4, 2, 2), (7, 3, 4)],
    )
    def test_halves(
        self, store: NodeStore, count: int, left_size: int, right_size: int
    ) -> None:
        values = [str(i) for i in range(count)]
        left, right = split(build_chain(store, values))
        assert (left.size, right.size) == (left_size, right_size)
        assert left.values() + right.values() == values
        assert _terminated(left) and _terminated(right)

    def test_short_chain_stays_whole(self, store: NodeStore) -> None:
        chain = build_chain(store, ["only"])
        left, right = split(chain)
        assert left is chain
        assert right.size == 0


class TestMerge:
    def test_interleaves_sorted_inputs(self, store: NodeStore) -> None:
        merged = merge(build_chain(store, ["a", "c", "e"]), build_chain(store, ["b", "d"]))
        assert merged.values() == ["a", "b", "c", "d", "e"]
        assert merged.size == 5
        assert _terminated(merged)

    def test_left_wins_ties(self, store: NodeStore) -> None:
        left = build_chain(store, ["k"])
        right = build_chain(store, ["k"])
        merged = merge(left, right)
        assert merged.head is left.head
        assert merged.tail is right.head

    def test_with_empty_side(self, store: NodeStore) -> None:
        right = build_chain(store, ["a", "b"])
        merged = merge(Chain.empty(), right)
        assert merged.values() == ["a", "b"]
        assert merged.tail is right.tail

    def test_remainder_keeps_tail(self, store: NodeStore) -> None:
        left = build_chain(store, ["a"])
        right = build_chain(store, ["b", "c", "d"])
        merged = merge(left, right)
        assert merged.tail is right.tail
        assert merged.size == 4


class TestDetach:
    def test_head(self, store: NodeStore) -> None:
        node, rest = detach(build_chain(store, ["a", "b", "c"]), 0)
        assert node.value == "a" and node.next is None
        assert rest.values() == ["b", "c"]

    def test_tail_moves_tail_back(self, store: NodeStore) -> None:
        node, rest = detach(build_chain(store, ["a", "b", "c"]), 2)
        assert node.value == "c"
        assert rest.tail is not None and rest.tail.value == "b"
        assert _terminated(rest)

    def test_middle(self, store: NodeStore) -> None:
        node, rest = detach(build_chain(store, ["a", "b", "c"]), 1)
        assert node.value == "b"
        assert rest.values() == ["a", "c"]

    def test_last_remaining_node(self, store: NodeStore) -> None:
        node, rest = detach(build_chain(store, ["a"]), 0)
        assert node.value == "a"
        assert rest == Chain.empty()

    def test_out_of_range(self, store: NodeStore) -> None:
        with pytest.raises(IndexError):
            detach(build_chain(store, ["a"]), 1)
