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

"""Ordered-set-backed global deduplication.

Same contract as the hashed strategy, but seen values live in a sorted list
searched with ``bisect``. Values need a total order through ``<`` rather than a
hash, which suits orderable types that hash poorly or not at all. Output order
always follows input order.

Values that cannot be compared with the stored ones raise
``UnorderableItemError`` when pulled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from dedupiter.core.model_types import Strategy
from dedupiter.membership import OrderedStore

from .base import GlobalDedup, GlobalDedupBy, GlobalDedupByKey

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dedupiter.core.type_aliases import KeyFunc, Predicate

T = TypeVar("T")
K = TypeVar("K")


class OrderedDedup(GlobalDedup[T]):
    """Keep the first occurrence of each orderable item."""

    strategy = Strategy.ORDERED
    store_type = OrderedStore


class OrderedDedupBy(GlobalDedupBy[T]):
    """Keep items the predicate rejects against every previously kept item."""

    strategy = Strategy.ORDERED
    store_type = OrderedStore


class OrderedDedupByKey(GlobalDedupByKey[T, K]):
    """Keep the first item for each orderable key."""

    strategy = Strategy.ORDERED
    store_type = OrderedStore


def dedup_ordered(iterable: Iterable[T]) -> OrderedDedup[T]:
    """Remove all duplicates, keeping first occurrences, using an ordered set.

    Args:
        iterable: Totally ordered source items; consumed lazily, once.

    Returns:
        An iterator over the first occurrence of each item, in input order.
    """
    return OrderedDedup(iterable)


def dedup_ordered_by(
    iterable: Iterable[T],
    predicate: Predicate[T],
) -> OrderedDedupBy[T]:
    """Remove items judged equivalent by ``predicate`` to any earlier kept item.

    Args:
        iterable: Totally ordered source items; consumed lazily, once.
        predicate: Called as ``predicate(seen, candidate)``.

    Returns:
        An iterator over the kept items, in input order.
    """
    return OrderedDedupBy(iterable, predicate)


def dedup_ordered_by_key(
    iterable: Iterable[T],
    key: KeyFunc[T, K],
) -> OrderedDedupByKey[T, K]:
    """Remove items whose orderable ``key`` was already seen.

    Args:
        iterable: Source items; consumed lazily, once.
        key: Maps an item to a totally ordered value.

    Returns:
        An iterator over the first item for each key, in input order.
    """
    return OrderedDedupByKey(iterable, key)


__all__ = [
    "OrderedDedup",
    "OrderedDedupBy",
    "OrderedDedupByKey",
    "dedup_ordered",
    "dedup_ordered_by",
    "dedup_ordered_by_key",
]
