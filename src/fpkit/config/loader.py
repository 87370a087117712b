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


"""Settings discovery and loading for fpkit.

Settings live either in a standalone ``fpkit.toml`` / ``.fpkit.toml`` file or
under ``[tool.fpkit]`` in ``pyproject.toml``. Standalone files take precedence
because they come first in the search order.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from fpkit._internal.logging_utils import structured_extra
from fpkit.core.model_types import LogComponent

from .models import DEFAULT_SETTINGS, ConfigReadError, InvalidConfigFileError, Settings

logger: logging.Logger = logging.getLogger("fpkit.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("fpkit.toml", ".fpkit.toml", "pyproject.toml")


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source path.

    Attributes:
        settings: Validated settings instance.
        path: File the settings were read from, or None when defaults are used.
    """

    settings: Settings
    path: Path | None


def load_settings(explicit_path: Path | None = None) -> Settings:
    """Load fpkit settings from a TOML file or fall back to defaults.

    Helper defaults are bound to ``DEFAULT_SETTINGS`` at import time, so loaded
    values only take effect where the caller passes them in, for example
    ``make_trunc(4, settings.truncation.max_items)``,
    ``trunc_str(text, settings.truncation.max_chars, settings.truncation.ellipsis)``
    or ``add_followers(items, settings.followers.formatter(),
    threshold=settings.followers.threshold)``.

    Args:
        explicit_path: Optional configuration file, or a directory to search.
            ``None`` searches the current working directory.

    Returns:
        The validated settings.
    """
    return load_settings_with_metadata(explicit_path).settings


def load_settings_with_metadata(explicit_path: Path | None = None) -> LoadedSettings:
    """Load fpkit settings together with the path they came from.

    When ``explicit_path`` names a file, only that file is read and it must
    exist. Otherwise ``fpkit.toml``, ``.fpkit.toml`` and ``pyproject.toml`` are
    tried in order inside the directory, and the first one carrying fpkit
    settings wins.

    Args:
        explicit_path: Optional configuration file or directory.

    Returns:
        LoadedSettings: Parsed settings and their source path.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If the fpkit section fails validation.
    """
    for candidate in _search_order(explicit_path):
        loaded = _load_candidate(candidate, explicit=candidate == explicit_path)
        if loaded is not None:
            logger.debug(
                "Loaded fpkit settings from %s",
                candidate,
                extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
            )
            return loaded
    logger.debug(
        "No fpkit settings found; using defaults",
        extra=structured_extra(component=LogComponent.CONFIG),
    )
    return LoadedSettings(settings=DEFAULT_SETTINGS, path=None)


def _search_order(explicit_path: Path | None) -> list[Path]:
    base = Path.cwd() if explicit_path is None else explicit_path
    if explicit_path is not None and not base.is_dir():
        return [base]
    return [base / name for name in CONFIG_FILENAMES]


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedSettings | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(candidate))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        return None
    try:
        settings = Settings.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc
    return LoadedSettings(settings=settings, path=candidate.resolve())


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_section = raw_map.get("tool")
    if isinstance(tool_section, dict):
        section = cast("dict[str, object]", tool_section).get("fpkit")
        if section is not None and not isinstance(section, dict):
            message = "[tool.fpkit] must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    if candidate.name == "pyproject.toml":
        return None
    return {key: value for key, value in raw_map.items() if key != "tool"}


__all__ = ["CONFIG_FILENAMES", "LoadedSettings", "load_settings", "load_settings_with_metadata"]
