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


"""String helpers."""

from __future__ import annotations

from fpkit.config.models import DEFAULT_SETTINGS


def trunc_str(
    text: str | None,
    max_len: int = DEFAULT_SETTINGS.truncation.max_chars,
    ellipsis: str = DEFAULT_SETTINGS.truncation.ellipsis,
) -> str | None:
    """Shorten ``text`` to ``max_len`` characters followed by ``ellipsis``.

    Falsy input and text no longer than ``max_len`` are returned unchanged.
    """
    if text and len(text) > max_len:
        return f"{text[:max_len]}{ellipsis}"
    return text


__all__ = ["trunc_str"]
