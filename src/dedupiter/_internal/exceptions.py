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

"""Common exception hierarchy for dedupiter."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "ConflictingEquivalenceError",
    "DedupiterError",
    "DedupiterTypeError",
    "DedupiterValidationError",
    "InvalidCallableError",
    "SettingsError",
    "UnhashableItemError",
    "UnknownStrategyError",
    "UnorderableItemError",
]


class DedupiterError(Exception):
    """Base error for all dedupiter exceptions."""


class DedupiterValidationError(DedupiterError, ValueError):
    """Raised when input data fails validation checks."""


class DedupiterTypeError(DedupiterError, TypeError):
    """Raised when input data has an unexpected type."""


class InvalidCallableError(DedupiterTypeError):
    """Raised when a predicate or key function is not callable."""

    def __init__(self, role: str, value: object) -> None:
        """Initialize the exception with the offending argument.

        Args:
            role: Name of the argument, e.g. ``"predicate"`` or ``"key"``.
            value: The non-callable value that was supplied.
        """
        self.role = role
        self.value = value
        super().__init__(f"{role} must be callable, got {type(value).__name__}")


class UnhashableItemError(DedupiterTypeError):
    """Raised when a hash-backed adapter meets a value it cannot hash."""

    def __init__(self, value: object) -> None:
        """Initialize the exception with the unhashable value.

        Args:
            value: Item or key that could not be hashed.
        """
        self.value = value
        super().__init__(
            f"hashed dedup requires hashable values, got {type(value).__name__}",
        )


class UnorderableItemError(DedupiterTypeError):
    """Raised when an ordered adapter meets values it cannot compare with ``<``."""

    def __init__(self, value: object) -> None:
        """Initialize the exception with the value that failed to compare.

        Args:
            value: Item or key that could not be ordered against stored values.
        """
        self.value = value
        super().__init__(
            f"ordered dedup requires totally ordered values, got {type(value).__name__}",
        )


class ConflictingEquivalenceError(DedupiterValidationError):
    """Raised when both a predicate and a key function are supplied."""

    def __init__(self) -> None:
        """Initialize the exception with a fixed message."""
        super().__init__("pass either 'by' or 'key', not both")


class UnknownStrategyError(DedupiterValidationError):
    """Raised when a strategy name does not match any known strategy."""

    def __init__(self, raw: object, allowed: Iterable[str]) -> None:
        """Initialize the exception with the rejected name and allowed values.

        Args:
            raw: The strategy value that was rejected.
            allowed: Names of the supported strategies.
        """
        self.raw = raw
        self.allowed = tuple(allowed)
        allowed_text = ", ".join(sorted(self.allowed))
        super().__init__(f"unknown strategy {raw!r}; expected one of: {allowed_text}")


class SettingsError(DedupiterValidationError):
    """Raised when settings values fail validation."""
