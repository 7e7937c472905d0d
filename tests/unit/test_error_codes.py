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

"""Unit tests for the error code registry."""

from __future__ import annotations

import pytest

from dedupiter import (
    ConflictingEquivalenceError,
    DedupiterError,
    InvalidCallableError,
    UnhashableItemError,
    UnknownStrategyError,
    UnorderableItemError,
)
from dedupiter._internal.error_codes import error_code_catalog, error_code_for

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (DedupiterError("x"), "DD000"),
        (ConflictingEquivalenceError(), "DD110"),
        (UnknownStrategyError("bloom", ["hashed"]), "DD111"),
        (InvalidCallableError("key", 1), "DD200"),
        (UnhashableItemError([]), "DD201"),
        (UnorderableItemError(object()), "DD202"),
    ],
)
def test_error_code_for_known_exceptions(exc: BaseException, code: str) -> None:
    assert error_code_for(exc) == code


def test_error_code_for_foreign_exception_defaults() -> None:
    assert error_code_for(RuntimeError("x")) == "DD000"


def test_catalog_is_unique_and_qualified() -> None:
    catalog = error_code_catalog()
    assert len(set(catalog.values())) == len(catalog)
    assert catalog["dedupiter._internal.exceptions.UnhashableItemError"] == "DD201"


def test_exception_messages() -> None:
    assert str(InvalidCallableError("predicate", 3)) == "predicate must be callable, got int"
    assert "hashable" in str(UnhashableItemError([]))
    assert str(ConflictingEquivalenceError()) == "pass either 'by' or 'key', not both"
