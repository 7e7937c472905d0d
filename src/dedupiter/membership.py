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

"""Membership stores backing the global dedup strategies.

Each store records values (items or keys) that have already been emitted and
answers whether a new value is already present. The three implementations
differ only in the structure they use and therefore in what they require from
the stored values:

- ``HashedStore``: a ``set``; values must be hashable.
- ``OrderedStore``: a sorted ``list`` searched with ``bisect``; values need
  only ``<``. Two values are the same member when neither is less than the
  other.
- ``LinearStore``: an append-only ``list`` scanned with ``==``.

``any_equivalent`` implements the predicate lookup shared by every global
strategy: it always scans the stored values in full, whatever the structure.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Hashable, Iterator
from typing import Generic, Protocol, TypeVar

from dedupiter._internal.exceptions import UnhashableItemError, UnorderableItemError
from dedupiter.compat import override

V = TypeVar("V")


class SeenStore(Protocol[V]):
    """Protocol implemented by every membership store."""

    def insert_if_absent(self, value: V) -> bool:
        """Store ``value`` unless an equal value is present.

        Returns:
            True when ``value`` was absent and has been stored.
        """
        ...

    def add(self, value: V) -> None:
        """Store ``value`` after a predicate scan has already cleared it.

        Set-like stores keep the value already held when an equal one is
        present; ``LinearStore`` appends regardless.
        """
        ...

    def __contains__(self, value: object) -> bool: ...

    def __iter__(self) -> Iterator[V]: ...

    def __len__(self) -> int: ...


class HashedStore(Generic[V]):
    """Hash-set backed store with O(1) average lookups."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: set[V] = set()

    def insert_if_absent(self, value: V) -> bool:
        size = len(self._values)
        self.add(value)
        return len(self._values) != size

    def add(self, value: V) -> None:
        try:
            self._values.add(value)
        except TypeError as exc:
            raise UnhashableItemError(value) from exc

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, Hashable):
            raise UnhashableItemError(value)
        try:
            return value in self._values
        except TypeError as exc:
            raise UnhashableItemError(value) from exc

    def __iter__(self) -> Iterator[V]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @override
    def __repr__(self) -> str:
        return f"HashedStore(size={len(self._values)})"


class OrderedStore(Generic[V]):
    """Sorted-list store; lookups and insert positions cost O(log n) comparisons."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[V] = []

    def _locate(self, value: V) -> tuple[int, bool]:
        values = self._values
        try:
            index = bisect_left(values, value)  # type: ignore[type-var]
            found = index < len(values) and not value < values[index]  # type: ignore[operator]
        except TypeError as exc:
            raise UnorderableItemError(value) from exc
        return index, found

    def insert_if_absent(self, value: V) -> bool:
        index, found = self._locate(value)
        if found:
            return False
        self._values.insert(index, value)
        return True

    def add(self, value: V) -> None:
        _ = self.insert_if_absent(value)

    def __contains__(self, value: object) -> bool:
        _, found = self._locate(value)  # type: ignore[arg-type]
        return found

    def __iter__(self) -> Iterator[V]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @override
    def __repr__(self) -> str:
        return f"OrderedStore(size={len(self._values)})"


class LinearStore(Generic[V]):
    """Append-only list store; every lookup is a full ``==`` scan."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[V] = []

    def insert_if_absent(self, value: V) -> bool:
        if value in self._values:
            return False
        self._values.append(value)
        return True

    def add(self, value: V) -> None:
        self._values.append(value)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator[V]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @override
    def __repr__(self) -> str:
        return f"LinearStore(size={len(self._values)})"


def any_equivalent(
    store: SeenStore[V],
    candidate: V,
    predicate: Callable[[V, V], bool],
) -> bool:
    """Return True if ``predicate(seen, candidate)`` holds for any stored value.

    The predicate is not assumed to agree with the store's own notion of
    equality, so every stored value is tested.
    """
    return any(predicate(seen, candidate) for seen in store)


__all__ = [
    "HashedStore",
    "LinearStore",
    "OrderedStore",
    "SeenStore",
    "any_equivalent",
]
