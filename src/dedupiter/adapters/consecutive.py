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

"""Consecutive deduplication: collapse runs of adjacent equivalent items.

Only neighbours are compared, so memory use is constant and the item type needs
nothing beyond the comparison of the active variant. Within a run of
equivalent items the **last** one is emitted::

    >>> list(dedup_consecutive([10, 20, 20, 21, 30, 30, 20]))
    [10, 20, 21, 30, 20]

Adapters are built eagerly: the first source item is pulled at construction,
so an adapter over an empty source starts out exhausted.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from dedupiter.compat import override
from dedupiter.core.model_types import Strategy, Variant

from .base import MISSING, DedupAdapter, require_callable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dedupiter.core.type_aliases import KeyFunc, Predicate

    from .base import _Missing

T = TypeVar("T")
K = TypeVar("K")


class _ConsecutiveBase(DedupAdapter[T]):
    strategy = Strategy.CONSECUTIVE

    def __init__(self, iterable: Iterable[T]) -> None:
        super().__init__(iterable)
        self._pending: T | _Missing = self._pull()
        if self._pending is MISSING:
            self._exhaust()

    @override
    def _produce(self) -> T | _Missing:
        pending = self._pending
        if pending is MISSING:
            return MISSING
        while True:
            candidate = self._pull()
            if candidate is MISSING:
                self._pending = MISSING
                return pending
            if not self._equivalent(pending, candidate):
                self._pending = candidate
                return pending
            # last of run wins
            pending = candidate
            self._pending = pending

    @override
    def _buffered(self) -> int:
        return 0 if self._pending is MISSING else 1

    @abstractmethod
    def _equivalent(self, pending: T, candidate: T) -> bool:
        """Return True when ``candidate`` continues the run ending in ``pending``."""


class ConsecutiveDedup(_ConsecutiveBase[T]):
    """Collapse adjacent items that compare equal with ``==``."""

    variant = Variant.PLAIN

    @override
    def _equivalent(self, pending: T, candidate: T) -> bool:
        return bool(pending == candidate)


class ConsecutiveDedupBy(_ConsecutiveBase[T]):
    """Collapse adjacent items for which ``predicate(pending, candidate)`` holds."""

    variant = Variant.BY

    def __init__(self, iterable: Iterable[T], predicate: Predicate[T]) -> None:
        require_callable("predicate", predicate)
        self._predicate = predicate
        super().__init__(iterable)

    @override
    def _equivalent(self, pending: T, candidate: T) -> bool:
        return bool(self._predicate(pending, candidate))


class ConsecutiveDedupByKey(_ConsecutiveBase[T], Generic[T, K]):
    """Collapse adjacent items whose keys compare equal.

    The key of the pending item is cached, so ``key`` runs once per pulled item.
    """

    variant = Variant.BY_KEY

    def __init__(self, iterable: Iterable[T], key: KeyFunc[T, K]) -> None:
        require_callable("key", key)
        self._key = key
        super().__init__(iterable)
        self._pending_key: K | None = None if self._pending is MISSING else key(self._pending)

    @override
    def _equivalent(self, pending: T, candidate: T) -> bool:
        candidate_key = self._key(candidate)
        matches = self._pending_key == candidate_key
        # candidate becomes the pending item on either outcome
        self._pending_key = candidate_key
        return bool(matches)


def dedup_consecutive(iterable: Iterable[T]) -> ConsecutiveDedup[T]:
    """Remove adjacent duplicates, keeping the last item of each run.

    Args:
        iterable: Source items; consumed lazily, once.

    Returns:
        An iterator over the deduplicated items.
    """
    return ConsecutiveDedup(iterable)


def dedup_consecutive_by(
    iterable: Iterable[T],
    predicate: Predicate[T],
) -> ConsecutiveDedupBy[T]:
    """Remove adjacent items judged equivalent by ``predicate``.

    Args:
        iterable: Source items; consumed lazily, once.
        predicate: Called as ``predicate(pending, candidate)``.

    Returns:
        An iterator yielding the last item of each equivalent run.
    """
    return ConsecutiveDedupBy(iterable, predicate)


def dedup_consecutive_by_key(
    iterable: Iterable[T],
    key: KeyFunc[T, K],
) -> ConsecutiveDedupByKey[T, K]:
    """Remove adjacent items whose ``key`` values are equal.

    Args:
        iterable: Source items; consumed lazily, once.
        key: Maps an item to the value compared with ``==``.

    Returns:
        An iterator yielding the last item of each run of equal keys.
    """
    return ConsecutiveDedupByKey(iterable, key)


__all__ = [
    "ConsecutiveDedup",
    "ConsecutiveDedupBy",
    "ConsecutiveDedupByKey",
    "dedup_consecutive",
    "dedup_consecutive_by",
    "dedup_consecutive_by_key",
]
