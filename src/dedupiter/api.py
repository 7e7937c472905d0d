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

"""High-level entry point for selecting a dedup adapter at runtime.

The twelve adapters stay independently importable from ``dedupiter.adapters``;
``dedupe`` only picks one from a ``Strategy`` and the callable supplied.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final, TypeVar

from dedupiter._internal.exceptions import ConflictingEquivalenceError, UnknownStrategyError
from dedupiter._internal.logging_utils import structured_extra
from dedupiter.adapters.consecutive import (
    ConsecutiveDedup,
    ConsecutiveDedupBy,
    ConsecutiveDedupByKey,
)
from dedupiter.adapters.hashed import HashedDedup, HashedDedupBy, HashedDedupByKey
from dedupiter.adapters.linear import LinearDedup, LinearDedupBy, LinearDedupByKey
from dedupiter.adapters.ordered import OrderedDedup, OrderedDedupBy, OrderedDedupByKey
from dedupiter.config import load_settings
from dedupiter.core.model_types import LogComponent, Strategy, Variant

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dedupiter.adapters.base import DedupAdapter
    from dedupiter.core.type_aliases import KeyFunc, Predicate

T = TypeVar("T")

logger: logging.Logger = logging.getLogger("dedupiter.api")

ADAPTERS: Final[dict[tuple[Strategy, Variant], type[DedupAdapter[Any]]]] = {
    (Strategy.CONSECUTIVE, Variant.PLAIN): ConsecutiveDedup,
    (Strategy.CONSECUTIVE, Variant.BY): ConsecutiveDedupBy,
    (Strategy.CONSECUTIVE, Variant.BY_KEY): ConsecutiveDedupByKey,
    (Strategy.HASHED, Variant.PLAIN): HashedDedup,
    (Strategy.HASHED, Variant.BY): HashedDedupBy,
    (Strategy.HASHED, Variant.BY_KEY): HashedDedupByKey,
    (Strategy.ORDERED, Variant.PLAIN): OrderedDedup,
    (Strategy.ORDERED, Variant.BY): OrderedDedupBy,
    (Strategy.ORDERED, Variant.BY_KEY): OrderedDedupByKey,
    (Strategy.LINEAR, Variant.PLAIN): LinearDedup,
    (Strategy.LINEAR, Variant.BY): LinearDedupBy,
    (Strategy.LINEAR, Variant.BY_KEY): LinearDedupByKey,
}


def resolve_strategy(strategy: Strategy | str | None) -> Strategy:
    """Return the strategy to use, consulting settings when none is given.

    Args:
        strategy: Explicit strategy, its name, or ``None`` for the configured
            default.

    Returns:
        The resolved ``Strategy``.

    Raises:
        UnknownStrategyError: If ``strategy`` names no known strategy.
    """
    if strategy is None:
        return load_settings(fields=("default_strategy",)).default_strategy
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy.from_str(str(strategy))
    except ValueError as exc:
        raise UnknownStrategyError(strategy, (s.value for s in Strategy)) from exc


def dedupe(
    iterable: Iterable[T],
    strategy: Strategy | str | None = None,
    *,
    by: Predicate[T] | None = None,
    key: KeyFunc[T, Any] | None = None,
) -> DedupAdapter[T]:
    """Deduplicate ``iterable`` with the chosen strategy and equivalence.

    Args:
        iterable: Source items; consumed lazily, once.
        strategy: ``consecutive``, ``hashed``, ``ordered`` or ``linear``.
            ``None`` uses the configured default (``DEDUPITER_STRATEGY``,
            else ``hashed``).
        by: Optional equivalence predicate.
        key: Optional key function.

    Returns:
        The matching adapter instance.

    Raises:
        ConflictingEquivalenceError: If both ``by`` and ``key`` are supplied.
        UnknownStrategyError: If ``strategy`` names no known strategy.
    """
    if by is not None and key is not None:
        raise ConflictingEquivalenceError
    resolved = resolve_strategy(strategy)
    if by is not None:
        variant = Variant.BY
        adapter = ADAPTERS[resolved, variant](iterable, by)
    elif key is not None:
        variant = Variant.BY_KEY
        adapter = ADAPTERS[resolved, variant](iterable, key)
    else:
        variant = Variant.PLAIN
        adapter = ADAPTERS[resolved, variant](iterable)
    logger.debug(
        "Selected %s",
        type(adapter).__name__,
        extra=structured_extra(component=LogComponent.API, strategy=resolved, variant=variant),
    )
    return adapter


__all__ = ["ADAPTERS", "dedupe", "resolve_strategy"]
