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


"""Configuration models and loading for fpkit."""

from __future__ import annotations

from .loader import LoadedSettings, load_settings, load_settings_with_metadata
from .models import (
    DEFAULT_SETTINGS,
    ConfigReadError,
    ConfigValidationError,
    FollowerFormat,
    InvalidConfigFileError,
    LoggingSettings,
    Settings,
    TruncationDefaults,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "ConfigReadError",
    "ConfigValidationError",
    "FollowerFormat",
    "InvalidConfigFileError",
    "LoadedSettings",
    "LoggingSettings",
    "Settings",
    "TruncationDefaults",
    "load_settings",
    "load_settings_with_metadata",
]
