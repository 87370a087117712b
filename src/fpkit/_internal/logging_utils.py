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



"""Structured logging utilities shared across fpkit components.

Library modules only obtain loggers; handlers are installed exclusively by
`configure_logging`, which applications call once at start-up.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final, Literal

from fpkit.compat import NotRequired, TypedDict, override
from fpkit.core.model_types import LogComponent, LogFormat

ROOT_LOGGER_NAME: Final[str] = "fpkit"
LOG_FORMAT_ENV: Final[str] = "FPKIT_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "FPKIT_LOG_LEVEL"
TEXT_LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"

LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = (
    "debug",
    "info",
    "warning",
    "error",
)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = ("component", "function", "path", "details")
CHILD_LOGGERS: Final[tuple[str, ...]] = ("fpkit.arrays", "fpkit.config")


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render each record as one JSON object, lifting fpkit's structured extras."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
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


def _resolve_format(log_format: LogFormat | str | None) -> LogFormat:
    raw = os.getenv(LOG_FORMAT_ENV) if log_format is None else log_format
    if not raw:
        return LogFormat.TEXT
    return raw if isinstance(raw, LogFormat) else LogFormat.from_str(raw)


def _resolve_level(log_level: str | int | None) -> int:
    raw = os.getenv(LOG_LEVEL_ENV) if log_level is None else log_level
    if isinstance(raw, int):
        return raw
    # Unknown or empty names keep the library at INFO.
    return logging.getLevelNamesMapping().get((raw or "").strip().upper(), logging.INFO)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install a single stream handler on the ``fpkit`` logger.

    Args:
        log_format: ``text`` or ``json``. ``None`` reads ``FPKIT_LOG_FORMAT``
            and falls back to ``text``.
        log_level: Level name or number. ``None`` reads ``FPKIT_LOG_LEVEL``
            and falls back to ``info``.

    Returns:
        The resolved format and level, which are also applied to every
        ``fpkit`` child logger.

    Raises:
        ValueError: If ``log_format`` names an unknown format.
    """
    selected_format = _resolve_format(log_format)
    level = _resolve_level(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONLogFormatter() if selected_format is LogFormat.JSON else logging.Formatter(TEXT_LOG_FORMAT),
    )
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(level)

    return LogConfig(format=selected_format, level=level, level_name=logging.getLevelName(level).lower())


class StructuredLogExtra(TypedDict):
    """Structured logging extras accepted by fpkit log records."""

    component: LogComponent
    function: NotRequired[str]
    path: NotRequired[str]
    details: NotRequired[dict[str, object]]


def structured_extra(
    component: LogComponent,
    *,
    function: str | Callable[..., object] | None = None,
    path: str | os.PathLike[str] | None = None,
    details: Mapping[str, object] | None = None,
) -> StructuredLogExtra:
    """Build the ``extra=`` payload for an fpkit log record.

    Callables are recorded by qualified name and paths as strings. Fields
    left as ``None``, and empty ``details``, are omitted.
    """
    extra: StructuredLogExtra = {"component": component}
    if function is not None:
        name = function if isinstance(function, str) else getattr(function, "__qualname__", None)
        extra["function"] = name or str(function)
    if path is not None:
        extra["path"] = os.fspath(path)
    if details:
        extra["details"] = dict(details)
    return extra


__all__ = [
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
