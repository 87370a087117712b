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


"""Configuration models and validation for fpkit.

Settings are validated with Pydantic models so TOML input is type-checked and
rejected with structured errors. The defaults reproduce the behaviour of the
helper signatures exactly; loading settings is only needed to derive helpers
with different formatting or truncation limits.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fpkit._internal.exceptions import FpkitValidationError
from fpkit._internal.logging_utils import LOG_LEVELS, LogConfig, configure_logging
from fpkit.core.model_types import LogFormat

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0


class ConfigValidationError(FpkitValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid fpkit configuration in {path}: {error}")


class FollowerFormat(BaseModel):
    """Rendering rules for follower counts.

    Counts below ``threshold`` are kept as numbers; larger counts are divided by
    ``divisor`` and rendered with ``precision`` decimals followed by ``unit``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: int = Field(default=1000, ge=0)
    divisor: int = Field(default=10000, gt=0)
    precision: int = Field(default=1, ge=0)
    unit: str = "万"

    def render(self, number: float) -> str:
        """Render ``number`` in units of ``divisor``.

        The quotient is rounded half up from its exact binary value, so
        ``12500`` renders as ``"1.3万"`` while ``14500`` (stored as
        ``1.4499...``) renders as ``"1.4万"``.

        Args:
            number: The raw count.

        Returns:
            The scaled count with a fixed number of decimals and the unit suffix.
        """
        scaled = Decimal(number / self.divisor).quantize(
            Decimal(1).scaleb(-self.precision),
            rounding=ROUND_HALF_UP,
        )
        return f"{scaled:f}{self.unit}"

    def formatter(self) -> Callable[[float], str]:
        """Return `render` as a standalone callable suitable for `add_followers`."""
        return self.render


class TruncationDefaults(BaseModel):
    """Limits for sequence and string truncation.

    These feed the default arguments of `make_trunc` and `trunc_str`. Values
    loaded from a file are not applied globally; pass them to those helpers.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_items: int = Field(default=36, ge=0)
    max_chars: int = Field(default=12, ge=0)
    ellipsis: str = "..."


class LoggingSettings(BaseModel):
    """Logging format and verbosity applied by `Settings.apply_logging`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: LogFormat = LogFormat.TEXT
    level: str = "info"

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, LogFormat):
            return LogFormat.from_str(value)
        return value

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        normalised = value.strip().lower()
        if normalised not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            message = f"level must be one of: {allowed}"
            raise ValueError(message)
        return normalised


class Settings(BaseModel):
    """Top-level fpkit settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    config_version: int = CONFIG_VERSION
    followers: FollowerFormat = Field(default_factory=FollowerFormat)
    truncation: TruncationDefaults = Field(default_factory=TruncationDefaults)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("config_version")
    @classmethod
    def _validate_version(cls, value: int) -> int:
        if value != CONFIG_VERSION:
            message = f"Unsupported config_version {value}; expected {CONFIG_VERSION}"
            raise ValueError(message)
        return value

    def apply_logging(self) -> LogConfig:
        """Install the configured log handler on the ``fpkit`` logger."""
        return configure_logging(self.logging.format, log_level=self.logging.level)


DEFAULT_SETTINGS: Final[Settings] = Settings()

__all__ = [
    "CONFIG_VERSION",
    "DEFAULT_SETTINGS",
    "ConfigReadError",
    "ConfigValidationError",
    "FollowerFormat",
    "InvalidConfigFileError",
    "LoggingSettings",
    "Settings",
    "TruncationDefaults",
]
