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

"""Unit tests for the strategy dispatcher."""

from __future__ import annotations

import pytest

from dedupiter import (
    ConflictingEquivalenceError,
    ConsecutiveDedup,
    ConsecutiveDedupByKey,
    DedupiterValidationError,
    HashedDedup,
    LinearDedupBy,
    OrderedDedupByKey,
    SettingsError,
    Strategy,
    UnknownStrategyError,
    Variant,
    dedupe,
)
from dedupiter.api import ADAPTERS, resolve_strategy

pytestmark = pytest.mark.unit

NUMBERS = [10, 20, 20, 21, 30, 30, 20]


def test_registry_covers_every_strategy_and_variant() -> None:
    assert len(ADAPTERS) == len(Strategy) * len(Variant)
    for (strategy, variant), adapter_type in ADAPTERS.items():
        assert adapter_type.strategy is strategy
        assert adapter_type.variant is variant


@pytest.mark.parametrize(
    ("strategy", "expected"),
    [
        (Strategy.CONSECUTIVE, [10, 20, 21, 30, 20]),
        ("hashed", [10, 20, 21, 30]),
        (" Ordered ", [10, 20, 21, 30]),
        ("LINEAR", [10, 20, 21, 30]),
    ],
)
def test_dedupe_plain(strategy: Strategy | str, expected: list[int]) -> None:
    assert list(dedupe(NUMBERS, strategy)) == expected


def test_dedupe_selects_variant_from_callable() -> None:
    assert isinstance(dedupe(NUMBERS, "linear", by=lambda a, b: a == b), LinearDedupBy)
    assert isinstance(dedupe(NUMBERS, "ordered", key=lambda n: n // 10), OrderedDedupByKey)
    by_key = dedupe(NUMBERS, "consecutive", key=lambda n: n // 10)
    assert isinstance(by_key, ConsecutiveDedupByKey)
    assert list(by_key) == [10, 21, 30, 20]


def test_dedupe_rejects_both_predicate_and_key() -> None:
    with pytest.raises(ConflictingEquivalenceError) as excinfo:
        _ = dedupe(NUMBERS, "hashed", by=lambda a, b: a == b, key=lambda n: n)
    assert isinstance(excinfo.value, DedupiterValidationError)
    assert isinstance(excinfo.value, ValueError)


def test_dedupe_rejects_unknown_strategy() -> None:
    with pytest.raises(UnknownStrategyError) as excinfo:
        _ = dedupe(NUMBERS, "bloom")
    assert excinfo.value.raw == "bloom"
    assert "consecutive, hashed, linear, ordered" in str(excinfo.value)


def test_dedupe_defaults_to_hashed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEDUPITER_STRATEGY", raising=False)
    assert isinstance(dedupe(NUMBERS), HashedDedup)


def test_dedupe_default_follows_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEDUPITER_STRATEGY", "consecutive")
    adapter = dedupe(NUMBERS)
    assert isinstance(adapter, ConsecutiveDedup)
    assert resolve_strategy(None) is Strategy.CONSECUTIVE


def test_dedupe_invalid_environment_strategy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEDUPITER_STRATEGY", "bloom")
    with pytest.raises(SettingsError):
        _ = dedupe(NUMBERS)


def test_dedupe_default_ignores_logging_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEDUPITER_STRATEGY", raising=False)
    monkeypatch.setenv("DEDUPITER_LOG_LEVEL", "verbose")
    monkeypatch.setenv("DEDUPITER_LOG_FORMAT", "xml")
    assert list(dedupe([1, 1, 2])) == [1, 2]
    assert resolve_strategy(None) is Strategy.HASHED
