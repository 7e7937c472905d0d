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

"""Linear-scan global deduplication.

The fallback for values that offer only ``==``: kept items (or keys) go into a
plain list that is scanned in full for every candidate. Every variant costs
O(n) per item and O(n^2) overall.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from dedupiter.core.model_types import Strategy
from dedupiter.membership import LinearStore

from .base import GlobalDedup, GlobalDedupBy, GlobalDedupByKey

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dedupiter.core.type_aliases import KeyFunc, Predicate

T = TypeVar("T")
K = TypeVar("K")


class LinearDedup(GlobalDedup[T]):
    """Keep the first occurrence of each item, compared with ``==``."""

    strategy = Strategy.LINEAR
    store_type = LinearStore


class LinearDedupBy(GlobalDedupBy[T]):
    """Keep items the predicate rejects against every previously kept item."""

    strategy = Strategy.LINEAR
    store_type = LinearStore


class LinearDedupByKey(GlobalDedupByKey[T, K]):
    """Keep the first item for each key, compared with ``==``."""

    strategy = Strategy.LINEAR
    store_type = LinearStore


def dedup_linear(iterable: Iterable[T]) -> LinearDedup[T]:
    """Remove all duplicates, keeping first occurrences, by scanning a list.

    Args:
        iterable: Source items; consumed lazily, once.

    Returns:
        An iterator over the first occurrence of each item, in input order.
    """
    return LinearDedup(iterable)


def dedup_linear_by(
    iterable: Iterable[T],
    predicate: Predicate[T],
) -> LinearDedupBy[T]:
    """Remove items judged equivalent by ``predicate`` to any earlier kept item.

    Args:
        iterable: Source items; consumed lazily, once.
        predicate: Called as ``predicate(seen, candidate)``.

    Returns:
        An iterator over the kept items, in input order.
    """
    return LinearDedupBy(iterable, predicate)


def dedup_linear_by_key(
    iterable: Iterable[T],
    key: KeyFunc[T, K],
) -> LinearDedupByKey[T, K]:
    """Remove items whose ``key`` equals the key of an earlier kept item.

    Args:
        iterable: Source items; consumed lazily, once.
        key: Maps an item to a value compared with ``==``.

    Returns:
        An iterator over the first item for each key, in input order.
    """
    return LinearDedupByKey(iterable, key)


__all__ = [
    "LinearDedup",
    "LinearDedupBy",
    "LinearDedupByKey",
    "dedup_linear",
    "dedup_linear_by",
    "dedup_linear_by_key",
]
