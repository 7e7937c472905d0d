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

"""Lazy dedup adapters, one module per duplicate-detection strategy."""

from __future__ import annotations

from .base import AdapterStats, DedupAdapter
from .consecutive import (
    ConsecutiveDedup,
    ConsecutiveDedupBy,
    ConsecutiveDedupByKey,
    dedup_consecutive,
    dedup_consecutive_by,
    dedup_consecutive_by_key,
)
from .hashed import (
    HashedDedup,
    HashedDedupBy,
    HashedDedupByKey,
    dedup_hashed,
    dedup_hashed_by,
    dedup_hashed_by_key,
)
from .linear import (
    LinearDedup,
    LinearDedupBy,
    LinearDedupByKey,
    dedup_linear,
    dedup_linear_by,
    dedup_linear_by_key,
)
from .ordered import (
    OrderedDedup,
    OrderedDedupBy,
    OrderedDedupByKey,
    dedup_ordered,
    dedup_ordered_by,
    dedup_ordered_by_key,
)

__all__ = [
    "AdapterStats",
    "ConsecutiveDedup",
    "ConsecutiveDedupBy",
    "ConsecutiveDedupByKey",
    "DedupAdapter",
    "HashedDedup",
    "HashedDedupBy",
    "HashedDedupByKey",
    "LinearDedup",
    "LinearDedupBy",
    "LinearDedupByKey",
    "OrderedDedup",
    "OrderedDedupBy",
    "OrderedDedupByKey",
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
]
