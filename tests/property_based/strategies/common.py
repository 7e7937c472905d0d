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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from typing import NamedTuple

from hypothesis import strategies as st

__all__ = ["Record", "item_lists", "records", "runs"]


class Record(NamedTuple):
    """Keyed value whose ``position`` tells otherwise-equal records apart."""

    key: int
    position: int


def item_lists(max_value: int = 6, max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy yielding short integer lists with frequent repeats.

    Args:
        max_value: Largest integer drawn; a small range forces duplicates.
        max_size: Maximum list length.

    Returns:
        Hypothesis strategy producing lists of small non-negative integers.
    """
    return st.lists(st.integers(min_value=0, max_value=max_value), max_size=max_size)


def records(max_key: int = 4, max_size: int = 30) -> st.SearchStrategy[list[Record]]:
    """Return a strategy yielding records tagged with their input position."""
    keys = st.lists(st.integers(min_value=0, max_value=max_key), max_size=max_size)
    return keys.map(lambda values: [Record(key, index) for index, key in enumerate(values)])


def runs(max_value: int = 4, max_run: int = 4) -> st.SearchStrategy[list[int]]:
    """Lists built from runs of repeated values, so adjacent duplicates are common."""
    run = st.tuples(
        st.integers(min_value=0, max_value=max_value),
        st.integers(min_value=1, max_value=max_run),
    )
    return st.lists(run, max_size=10).map(
        lambda pairs: [value for value, length in pairs for _ in range(length)],
    )
