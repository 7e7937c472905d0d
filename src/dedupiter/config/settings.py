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

"""Settings model and environment loading for dedupiter.

Settings are validated with pydantic. Values come from, in increasing order of
precedence:

1. Field defaults
2. ``DEDUPITER_*`` environment variables
3. Keyword overrides passed to ``load_settings``
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dedupiter._internal.exceptions import SettingsError
from dedupiter._internal.logging_utils import LOG_FORMAT_ENV, LOG_LEVEL_ENV, LOG_LEVELS, structured_extra
from dedupiter.core.model_types import LogComponent, LogFormat, Strategy

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

logger: logging.Logger = logging.getLogger("dedupiter.config")

STRATEGY_ENV: Final[str] = "DEDUPITER_STRATEGY"
_ENV_FIELDS: Final[dict[str, str]] = {
    STRATEGY_ENV: "default_strategy",
    LOG_FORMAT_ENV: "log_format",
    LOG_LEVEL_ENV: "log_level",
}


class DedupSettings(BaseModel):
    """Validated runtime settings.

    Attributes:
        default_strategy: Strategy used by ``dedupe`` when none is given.
        log_format: Format passed to ``configure_logging``.
        log_level: Level name passed to ``configure_logging``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_strategy: Strategy = Strategy.HASHED
    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"

    @field_validator("default_strategy", mode="before")
    @classmethod
    def _coerce_strategy(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Strategy):
            return Strategy.from_str(value)
        return value

    @field_validator("log_format", mode="before")
    @classmethod
    def _coerce_log_format(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, LogFormat):
            return LogFormat.from_str(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            msg = f"log_level must be one of: {allowed}"
            raise ValueError(msg)
        return level


def _values_from_env(
    environ: Mapping[str, str],
    fields: Collection[str] | None,
) -> dict[str, object]:
    values: dict[str, object] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        if fields is not None and field_name not in fields:
            continue
        raw = environ.get(env_name)
        if raw is not None and raw.strip():
            values[field_name] = raw
    return values


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    fields: Collection[str] | None = None,
    **overrides: object,
) -> DedupSettings:
    """Build ``DedupSettings`` from the environment and explicit overrides.

    Args:
        environ: Mapping to read ``DEDUPITER_*`` variables from. ``None`` uses
            ``os.environ``.
        fields: Settings fields to read from the environment. Other fields
            keep their defaults, so unrelated variables are never validated.
            ``None`` reads every field.
        **overrides: Field values that take precedence over the environment.
            ``None`` values are ignored.

    Returns:
        Validated settings.

    Raises:
        SettingsError: If any value fails validation.
    """
    env = os.environ if environ is None else environ
    values = _values_from_env(env, fields)
    values.update({name: value for name, value in overrides.items() if value is not None})
    try:
        settings = DedupSettings.model_validate(values)
    except ValidationError as exc:
        raise SettingsError(str(exc)) from exc
    logger.debug(
        "Loaded settings",
        extra=structured_extra(
            component=LogComponent.CONFIG,
            strategy=settings.default_strategy,
            details={"sources": sorted(values)},
        ),
    )
    return settings


__all__ = ["STRATEGY_ENV", "DedupSettings", "load_settings"]
