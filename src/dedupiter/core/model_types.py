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

"""Model types and enumerations for dedupiter.

This module defines the enumerations shared across the package:

- Strategy and variant enumerations naming each adapter
- Adapter lifecycle states
- Logging format and component enumerations
"""

from __future__ import annotations

from dedupiter.compat import StrEnum


class Strategy(StrEnum):
    """Duplicate-detection strategies.

    Attributes:
        CONSECUTIVE: Only adjacent duplicates collapse; the last of a run wins.
        HASHED: Global dedup backed by a hash set; the first occurrence wins.
        ORDERED: Global dedup backed by a sorted structure; needs only ``<``.
        LINEAR: Global dedup backed by a list scanned with ``==``.
    """

    CONSECUTIVE = "consecutive"
    HASHED = "hashed"
    ORDERED = "ordered"
    LINEAR = "linear"

    @classmethod
    def from_str(cls, raw: str) -> Strategy:
        """Create a Strategy enum from a string value.

        Args:
            raw: String representation of the strategy.

        Returns:
            Strategy enum value.

        Raises:
            ValueError: If the string does not match any Strategy value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown strategy '{raw}'"
            raise ValueError(msg) from exc

    @property
    def is_global(self) -> bool:
        """Return True when duplicates collapse across the whole sequence."""
        return self is not Strategy.CONSECUTIVE


class Variant(StrEnum):
    """Equivalence variants applied uniformly to every strategy.

    Attributes:
        PLAIN: Native equality (or hash/order) of the items themselves.
        BY: A caller-supplied binary predicate.
        BY_KEY: Native equality of keys extracted by a caller-supplied function.
    """

    PLAIN = "plain"
    BY = "by"
    BY_KEY = "by_key"

    @classmethod
    def from_str(cls, raw: str) -> Variant:
        """Create a Variant enum from a string value.

        Args:
            raw: String representation of the variant. Hyphens are accepted in
                place of underscores.

        Returns:
            Variant enum value.

        Raises:
            ValueError: If the string does not match any Variant value.
        """
        value = raw.strip().lower().replace("-", "_")
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown variant '{raw}'"
            raise ValueError(msg) from exc


class AdapterState(StrEnum):
    """Lifecycle states of a dedup adapter.

    Attributes:
        ACTIVE: More output may still be produced.
        EXHAUSTED: Terminal; every further request yields nothing.
    """

    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable components.

    Attributes:
        ADAPTER: Iterator adapters.
        API: Strategy dispatch.
        CONFIG: Settings loading.
    """

    ADAPTER = "adapter"
    API = "api"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        """Create a LogComponent enum from a string value.

        Args:
            raw: String representation of the log component.

        Returns:
            LogComponent enum value.

        Raises:
            ValueError: If the string does not match any LogComponent value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log component '{raw}'"
            raise ValueError(msg) from exc


__all__ = ["AdapterState", "LogComponent", "LogFormat", "Strategy", "Variant"]
