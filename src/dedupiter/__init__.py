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

"""dedupiter - lazy deduplicating iterator adapters.

Four duplicate-detection strategies (consecutive, hashed, ordered, linear),
each available with native equality, a custom predicate, or a key function.
"""

from __future__ import annotations

from dedupiter.exceptions import (
    ConflictingEquivalenceError,
    DedupiterError,
    DedupiterTypeError,
    DedupiterValidationError,
    InvalidCallableError,
    SettingsError,
    UnhashableItemError,
    UnknownStrategyError,
    UnorderableItemError,
)

from .adapters import (
    AdapterStats,
    ConsecutiveDedup,
    ConsecutiveDedupBy,
    ConsecutiveDedupByKey,
    DedupAdapter,
    HashedDedup,
    HashedDedupBy,
    HashedDedupByKey,
    LinearDedup,
    LinearDedupBy,
    LinearDedupByKey,
    OrderedDedup,
    OrderedDedupBy,
    OrderedDedupByKey,
    dedup_consecutive,
    dedup_consecutive_by,
    dedup_consecutive_by_key,
    dedup_hashed,
    dedup_hashed_by,
    dedup_hashed_by_key,
    dedup_linear,
    dedup_linear_by,
    dedup_linear_by_key,
    dedup_ordered,
    dedup_ordered_by,
    dedup_ordered_by_key,
)
from .api import dedupe
from .config import DedupSettings, load_settings
from .core.model_types import AdapterState, Strategy, Variant
from .logging import configure_logging

__all__ = [
    "AdapterState",
    "AdapterStats",
    "ConflictingEquivalenceError",
    "ConsecutiveDedup",
    "ConsecutiveDedupBy",
    "ConsecutiveDedupByKey",
    "DedupAdapter",
    "DedupSettings",
    "DedupiterError",
    "DedupiterTypeError",
    "DedupiterValidationError",
    "HashedDedup",
    "HashedDedupBy",
    "HashedDedupByKey",
    "InvalidCallableError",
    "LinearDedup",
    "LinearDedupBy",
    "LinearDedupByKey",
    "OrderedDedup",
    "OrderedDedupBy",
    "OrderedDedupByKey",
    "SettingsError",
    "Strategy",
    "UnhashableItemError",
    "UnknownStrategyError",
    "UnorderableItemError",
    "Variant",
    "__version__",
    "configure_logging",
    "dedup_consecutive",
    "dedup_consecutive_by",
    "dedup_consecutive_by_key",
    "dedup_hashed",
    "dedup_hashed_by",
    "dedup_hashed_by_key",
    "dedup_linear",
    "dedup_linear_by",
    "dedup_linear_by_key",
    "dedup_ordered",
    "dedup_ordered_by",
    "dedup_ordered_by_key",
    "dedupe",
    "load_settings",
]

__version__ = "0.1.0"
