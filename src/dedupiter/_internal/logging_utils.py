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

"""Structured logging utilities shared across dedupiter components."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Final, Literal, cast

from dedupiter.compat import TypedDict, Unpack, override
from dedupiter.core.model_types import LogComponent, LogFormat, Strategy, Variant

ROOT_LOGGER_NAME: Final[str] = "dedupiter"
LOG_FORMAT_ENV: Final[str] = "DEDUPITER_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "DEDUPITER_LOG_LEVEL"

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = (
    "debug",
    "info",
    "warning",
    "error",
)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "strategy",
    "variant",
    "counts",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "dedupiter.adapters",
    "dedupiter.api",
    "dedupiter.config",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: Log record to serialise.

        Returns:
            JSON-formatted string containing standard and structured fields.
        """
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


_LEVELS_BY_NAME: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _resolve_settings(
    log_format: LogFormat | str | None,
    log_level: str | int | None,
) -> tuple[LogFormat, int, str]:
    # settings imports this module
    from dedupiter.config.settings import load_settings

    if isinstance(log_level, int):
        settings = load_settings(fields=("log_format",), log_format=log_format)
        return settings.log_format, log_level, logging.getLevelName(log_level).lower()
    settings = load_settings(
        fields=("log_format", "log_level"),
        log_format=log_format,
        log_level=log_level,
    )
    return settings.log_format, _LEVELS_BY_NAME[settings.log_level], settings.log_level


def _configure_handler(log_format: LogFormat) -> logging.Handler:
    handler = logging.StreamHandler()
    if log_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(TextLogFormatter())
    return handler


def _apply_child_levels(level: int, children: Iterable[str]) -> None:
    for child in children:
        logging.getLogger(child).setLevel(level)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Configure dedupiter logging according to the requested format and level.

    Args:
        log_format: Desired log output format. ``None`` takes the ``log_format``
            setting (``DEDUPITER_LOG_FORMAT``, else ``text``).
        log_level: Preferred verbosity (string or numeric). ``None`` takes the
            ``log_level`` setting (``DEDUPITER_LOG_LEVEL``, else ``info``).

    Returns:
        A ``LogConfig`` describing the selected formatter and resolved numeric
        log level, which is also applied to the root and child loggers.

    Raises:
        SettingsError: If the format or level name is not recognised.
    """
    selected_format, level_value, level_name = _resolve_settings(log_format, log_level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(_configure_handler(selected_format))
    root_logger.setLevel(level_value)
    root_logger.propagate = False

    _apply_child_levels(level_value, CHILD_LOGGERS)
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by dedupiter log records."""

    strategy: Strategy
    variant: Variant
    counts: Mapping[str, int]
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    strategy: Strategy | str
    variant: Variant | str
    counts: Mapping[str, int]
    details: Mapping[str, object]


def _normalise_strategy(value: Strategy | str | None) -> Strategy | None:
    if value is None:
        return None
    return value if isinstance(value, Strategy) else Strategy.from_str(str(value))


def _normalise_variant(value: Variant | str | None) -> Variant | None:
    if value is None:
        return None
    return value if isinstance(value, Variant) else Variant.from_str(str(value))


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (strategy, variant, counts, details).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    payload_kwargs = cast("dict[str, object]", kwargs)
    strategy = _normalise_strategy(cast("Strategy | str | None", payload_kwargs.get("strategy")))
    if strategy is not None:
        extra["strategy"] = strategy
    variant = _normalise_variant(cast("Variant | str | None", payload_kwargs.get("variant")))
    if variant is not None:
        extra["variant"] = variant
    counts = payload_kwargs.get("counts")
    if isinstance(counts, Mapping) and counts:
        extra["counts"] = {str(k): int(v) for k, v in cast("Mapping[str, int]", counts).items()}
    details = payload_kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
