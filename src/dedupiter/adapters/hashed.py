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

"""Hash-backed global deduplication.

Duplicates anywhere in the sequence collapse onto their first occurrence::

    >>> list(dedup_hashed([10, 20, 20, 21, 30, 30, 20]))
    [10, 20, 21, 30]

The plain and by-key variants cost O(1) on average per item and require
hashable items or keys. The predicate variant scans every stored item for each
candidate (O(n) per item) and still stores items in a set, so they must be
hashable too. Unhashable values raise ``UnhashableItemError`` when pulled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from dedupiter.core.model_types import Strategy
from dedupiter.membership import HashedStore

from .base import GlobalDedup, GlobalDedupBy, GlobalDedupByKey

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

    from dedupiter.core.type_aliases import Predicate

T = TypeVar("T")
K = TypeVar("K")


class HashedDedup(GlobalDedup[T]):
    """Keep the first occurrence of each hashable item."""

    strategy = Strategy.HASHED
    store_type = HashedStore


class HashedDedupBy(GlobalDedupBy[T]):
    """Keep items the predicate rejects against every previously kept item."""

    strategy = Strategy.HASHED
    store_type = HashedStore


class HashedDedupByKey(GlobalDedupByKey[T, K]):
    """Keep the first item for each hashable key."""

    strategy = Strategy.HASHED
    store_type = HashedStore


def dedup_hashed(iterable: Iterable[T]) -> HashedDedup[T]:
    """Remove all duplicates, keeping first occurrences, using a hash set.

    Args:
        iterable: Hashable source items; consumed lazily, once.

    Returns:
        An iterator over the first occurrence of each item, in input order.
    """
    return HashedDedup(iterable)


def dedup_hashed_by(
    iterable: Iterable[T],
    predicate: Predicate[T],
) -> HashedDedupBy[T]:
    """Remove items judged equivalent by ``predicate`` to any earlier kept item.

    Args:
        iterable: Hashable source items; consumed lazily, once.
        predicate: Called as ``predicate(seen, candidate)``.

    Returns:
        An iterator over the kept items, in input order.
    """
    return HashedDedupBy(iterable, predicate)


def dedup_hashed_by_key(
    iterable: Iterable[T],
    key: Callable[[T], Hashable],
) -> HashedDedupByKey[T, Hashable]:
    """Remove items whose hashable ``key`` was already seen.

    Args:
        iterable: Source items; consumed lazily, once.
        key: Maps an item to a hashable value.

    Returns:
        An iterator over the first item for each key, in input order.
    """
    return HashedDedupByKey(iterable, key)


__all__ = [
    "HashedDedup",
    "HashedDedupBy",
    "HashedDedupByKey",
    "dedup_hashed",
    "dedup_hashed_by",
    "dedup_hashed_by_key",
]
