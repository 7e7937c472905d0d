# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for membership stores and per-strategy type requirements."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from dedupiter import (
    DedupiterTypeError,
    UnhashableItemError,
    UnorderableItemError,
    dedup_hashed,
    dedup_hashed_by,
    dedup_hashed_by_key,
    dedup_linear,
    dedup_linear_by,
    dedup_ordered,
    dedup_ordered_by,
    dedup_ordered_by_key,
)
from dedupiter.membership import HashedStore, LinearStore, OrderedStore, any_equivalent

pytestmark = pytest.mark.unit


class Loose:
    """Compares equal on ``key`` only; neither hashable nor orderable."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, key: int, tag: str) -> None:
        self.key = key
        self.tag = tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Loose) and other.key == self.key


@pytest.mark.parametrize("store_type", [HashedStore, OrderedStore, LinearStore])
def test_insert_if_absent_reports_new_values(store_type: type) -> None:
    store = store_type()
    assert store.insert_if_absent(3)
    assert store.insert_if_absent(1)
    assert not store.insert_if_absent(3)
    assert 1 in store
    assert 2 not in store
    assert len(store) == 2
    assert sorted(store) == [1, 3]


def test_ordered_store_keeps_values_sorted() -> None:
    store: OrderedStore[int] = OrderedStore()
    for value in (5, 1, 4, 1, 3):
        store.add(value)
    assert list(store) == [1, 3, 4, 5]
    assert repr(store) == "OrderedStore(size=4)"


def test_set_like_stores_ignore_equal_values_on_add() -> None:
    hashed: HashedStore[int] = HashedStore()
    hashed.add(1)
    hashed.add(1)
    assert len(hashed) == 1


def test_linear_store_add_appends_unconditionally() -> None:
    store: LinearStore[int] = LinearStore()
    store.add(1)
    store.add(1)
    assert list(store) == [1, 1]
    assert repr(store) == "LinearStore(size=2)"


def test_any_equivalent_scans_every_value() -> None:
    store: LinearStore[int] = LinearStore()
    for value in (1, 2, 3):
        store.add(value)
    seen: list[int] = []

    def never(stored: int, candidate: int) -> bool:
        seen.append(stored)
        return stored == candidate + 100

    assert not any_equivalent(store, 9, never)
    assert seen == [1, 2, 3]


def test_hashed_store_rejects_unhashable_values() -> None:
    store: HashedStore[object] = HashedStore()
    with pytest.raises(UnhashableItemError):
        _ = [1] in store
    with pytest.raises(UnhashableItemError) as excinfo:
        store.add(([1], 2))
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_hashed_dedup_requires_hashable_items() -> None:
    with pytest.raises(UnhashableItemError) as excinfo:
        _ = list(dedup_hashed([[1], [1]]))
    assert isinstance(excinfo.value, DedupiterTypeError)
    assert isinstance(excinfo.value, TypeError)


def test_hashed_by_still_stores_items_in_a_set() -> None:
    with pytest.raises(UnhashableItemError):
        _ = list(dedup_hashed_by([{"a": 1}], lambda a, b: a == b))


def test_hashed_by_key_only_needs_hashable_keys() -> None:
    rows = [{"id": 1}, {"id": 2}, {"id": 1}]
    assert list(dedup_hashed_by_key(rows, lambda row: row["id"])) == [{"id": 1}, {"id": 2}]


def test_hashed_by_decides_with_the_predicate_only() -> None:
    items = [(1, "x"), (2, "x"), (1, "y")]
    result = list(dedup_hashed_by(items, lambda seen, candidate: seen[1] == candidate[1]))
    assert result == [(1, "x"), (1, "y")]


@pytest.mark.parametrize("factory", [dedup_hashed_by, dedup_ordered_by])
def test_set_backed_by_variants_keep_one_copy_of_equal_items(
    factory: Callable[..., Iterator[int]],
) -> None:
    adapter = factory([1, 1, 1], lambda seen, candidate: False)
    assert list(adapter) == [1, 1, 1]
    assert repr(adapter).endswith("pulled=3, emitted=3, seen=1)")


def test_linear_by_stores_each_emitted_item() -> None:
    adapter = dedup_linear_by([1, 1, 1], lambda seen, candidate: False)
    assert list(adapter) == [1, 1, 1]
    assert repr(adapter).endswith("pulled=3, emitted=3, seen=3)")


def test_ordered_dedup_accepts_unhashable_orderable_items() -> None:
    assert list(dedup_ordered([[1, 2], [0], [1, 2], [0, 1]])) == [[1, 2], [0], [0, 1]]


def test_ordered_dedup_rejects_unorderable_items() -> None:
    with pytest.raises(UnorderableItemError) as excinfo:
        _ = list(dedup_ordered([1, "a"]))
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_ordered_by_and_by_key_need_order_on_stored_values() -> None:
    with pytest.raises(UnorderableItemError):
        _ = list(dedup_ordered_by([{"a": 1}, {"b": 2}], lambda a, b: False))
    with pytest.raises(UnorderableItemError):
        _ = list(dedup_ordered_by_key([1, 2], lambda value: object()))


def test_ordered_treats_mutually_unordered_values_as_equal() -> None:
    assert list(dedup_ordered([1.0, 1, True, 2])) == [1.0, 2]


def test_linear_dedup_needs_equality_only() -> None:
    items = [Loose(1, "a"), Loose(2, "b"), Loose(1, "c")]
    assert [item.tag for item in dedup_linear(items)] == ["a", "b"]


def test_linear_by_keeps_every_emitted_item_for_later_scans() -> None:
    items = [Loose(1, "a"), Loose(1, "b"), Loose(2, "b")]

    def same_tag(seen: Loose, candidate: Loose) -> bool:
        return seen.tag == candidate.tag

    # Loose(1, "b") equals Loose(1, "a") but is still stored, so Loose(2, "b") matches it
    assert [item.tag for item in dedup_linear_by(items, same_tag)] == ["a", "b"]
