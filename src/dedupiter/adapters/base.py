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

"""Base iterator machinery shared by every dedup adapter.

This module defines:

- ``DedupAdapter``: the lazy, single-pass iterator base. It owns the source
  iterator, tracks the ACTIVE/EXHAUSTED state, counts pulled and emitted items
  and logs a single debug record on exhaustion.
- ``GlobalDedup``, ``GlobalDedupBy`` and ``GlobalDedupByKey``: the three
  variants shared by the hashed, ordered and linear strategies. Concrete
  strategies only choose the membership store.
"""

from __future__ import annotations

import enum
import logging
from abc import abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Final, Generic, TypeVar

from dedupiter._internal.exceptions import InvalidCallableError
from dedupiter._internal.logging_utils import structured_extra
from dedupiter.compat import override
from dedupiter.core.model_types import AdapterState, LogComponent, Strategy, Variant
from dedupiter.membership import any_equivalent

if TYPE_CHECKING:
    from dedupiter.compat import Self
    from dedupiter.core.type_aliases import KeyFunc, Predicate
    from dedupiter.membership import SeenStore

T = TypeVar("T")
K = TypeVar("K")

logger: logging.Logger = logging.getLogger("dedupiter.adapters")


class _Missing(enum.Enum):
    MISSING = enum.auto()


MISSING: Final = _Missing.MISSING


@dataclass(slots=True, frozen=True)
class AdapterStats:
    """Snapshot of an adapter's progress.

    Attributes:
        pulled: Items taken from the source so far.
        emitted: Items handed to the caller so far.
        buffered: Items pulled but held back, neither emitted nor dropped yet.
    """

    pulled: int = 0
    emitted: int = 0
    buffered: int = 0

    @property
    def discarded(self) -> int:
        """Items pulled from the source that were dropped as duplicates."""
        return self.pulled - self.emitted - self.buffered

    def as_counts(self) -> dict[str, int]:
        return {"pulled": self.pulled, "emitted": self.emitted, "discarded": self.discarded}


def require_callable(role: str, value: object) -> None:
    """Raise ``InvalidCallableError`` unless ``value`` is callable."""
    if not callable(value):
        raise InvalidCallableError(role, value)


class DedupAdapter(Iterator[T], Generic[T]):
    """Lazy iterator that yields the deduplicated items of a source iterable.

    Subclasses implement ``_produce``, which returns the next output item or
    ``MISSING`` once the source cannot yield anything further. After the first
    ``MISSING`` the adapter is EXHAUSTED for good and never touches the source
    again.
    """

    strategy: ClassVar[Strategy]
    variant: ClassVar[Variant]

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source: Iterator[T] = iter(iterable)
        self._state = AdapterState.ACTIVE
        self._pulled = 0
        self._emitted = 0

    @property
    def state(self) -> AdapterState:
        return self._state

    @property
    def stats(self) -> AdapterStats:
        return AdapterStats(pulled=self._pulled, emitted=self._emitted, buffered=self._buffered())

    @override
    def __iter__(self) -> Self:
        return self

    @override
    def __next__(self) -> T:
        if self._state is AdapterState.EXHAUSTED:
            raise StopIteration
        item = self._produce()
        if item is MISSING:
            self._exhaust()
            raise StopIteration
        self._emitted += 1
        return item

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._state.value}, "
            f"pulled={self._pulled}, emitted={self._emitted})"
        )

    @abstractmethod
    def _produce(self) -> T | _Missing:
        """Return the next output item, or ``MISSING`` when none remains."""

    def _buffered(self) -> int:
        return 0

    def _pull(self) -> T | _Missing:
        item = next(self._source, MISSING)
        if item is not MISSING:
            self._pulled += 1
        return item

    def _exhaust(self) -> None:
        if self._state is AdapterState.EXHAUSTED:
            return
        self._state = AdapterState.EXHAUSTED
        # Release the drained source.
        self._source = iter(())
        logger.debug(
            "%s exhausted",
            type(self).__name__,
            extra=structured_extra(
                component=LogComponent.ADAPTER,
                strategy=self.strategy,
                variant=self.variant,
                counts=self.stats.as_counts(),
            ),
        )


class _GlobalBase(DedupAdapter[T]):
    """Pull until an item is admitted; shared by all global variants."""

    store_type: ClassVar[type[SeenStore[Any]]]

    def __init__(self, iterable: Iterable[T]) -> None:
        super().__init__(iterable)
        self._seen: SeenStore[Any] = self.store_type()

    @override
    def _produce(self) -> T | _Missing:
        while True:
            item = self._pull()
            if item is MISSING:
                return MISSING
            if self._admit(item):
                return item

    @abstractmethod
    def _admit(self, item: T) -> bool:
        """Return True (recording ``item``) when it is not a duplicate."""

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._state.value}, "
            f"pulled={self._pulled}, emitted={self._emitted}, seen={len(self._seen)})"
        )


class GlobalDedup(_GlobalBase[T]):
    """Keep the first occurrence of each item, using the store's native lookup."""

    variant = Variant.PLAIN

    @override
    def _admit(self, item: T) -> bool:
        return self._seen.insert_if_absent(item)


class GlobalDedupBy(_GlobalBase[T]):
    """Keep an item only if the predicate rejects it against every stored item.

    The predicate is called as ``predicate(seen, candidate)``. The store's own
    lookup is never used to decide, so each item costs a full scan.
    """

    variant = Variant.BY

    def __init__(self, iterable: Iterable[T], predicate: Predicate[T]) -> None:
        require_callable("predicate", predicate)
        super().__init__(iterable)
        self._predicate = predicate

    @override
    def _admit(self, item: T) -> bool:
        if any_equivalent(self._seen, item, self._predicate):
            return False
        self._seen.add(item)
        return True


class GlobalDedupByKey(_GlobalBase[T], Generic[T, K]):
    """Keep the first item for each key; the store holds keys, not items."""

    variant = Variant.BY_KEY

    def __init__(self, iterable: Iterable[T], key: KeyFunc[T, K]) -> None:
        require_callable("key", key)
        super().__init__(iterable)
        self._key = key

    @override
    def _admit(self, item: T) -> bool:
        return self._seen.insert_if_absent(self._key(item))


__all__ = [
    "MISSING",
    "AdapterStats",
    "DedupAdapter",
    "GlobalDedup",
    "GlobalDedupBy",
    "GlobalDedupByKey",
    "require_callable",
]
