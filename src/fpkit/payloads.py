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


"""Payload composers for feed-style records (groups, tabs, followers)."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, Final

import toolz

from fpkit._internal.validation import coerce_number
from fpkit.config.models import DEFAULT_SETTINGS
from fpkit.core.values import Computed

from .keys import make_add_key_for_list, make_add_key_for_obj

GROUP_ID_KEY: Final[str] = "_groupId"
TAB_CONTENT_KEY: Final[str] = "tabContent"
FOLLOWERS_KEY: Final[str] = "followers"
NEXT_DATA_PATH: Final[str] = "next.nextData"
FOLLOW_COUNT_PATH: Final[str] = "next.followStatus.followCount"


def get_in(record: object, path: str | Sequence[Hashable], default: Any = None) -> Any:
    """Read a nested value, returning ``default`` when any segment is missing.

    Args:
        record: Mapping or sequence to read from.
        path: Dotted string (``"next.nextData"``) or a sequence of keys and
            integer indices.
        default: Value returned when the path cannot be resolved.

    Returns:
        The nested value or ``default``.
    """
    keys = path.split(".") if isinstance(path, str) else list(path)
    return toolz.get_in(keys, record, default)


def add_group_id(data: Any, field: str = "list") -> Any:
    """Tag every item of ``data[field]`` with the payload's ``groupId``.

    Returns a new payload when ``data[field]`` is a list or tuple, otherwise
    ``data`` itself.
    """
    if not isinstance(data, Mapping):
        return data
    items = data.get(field)
    if not isinstance(items, list | tuple):
        return data
    grouped = make_add_key_for_list(GROUP_ID_KEY, data.get("groupId"))(items)
    return make_add_key_for_obj(field, grouped)(data)


def add_content_for_tabs(
    tabs: Sequence[Any] | None,
    content_handler: Callable[[list[Any]], Any] | None = None,
) -> list[Any]:
    """Attach each tab's grouped ``next.nextData.list`` as ``tabContent``.

    Args:
        tabs: Tab records; ``None`` is treated as an empty list.
        content_handler: Optional transformation applied to each tab's list.

    Returns:
        New tab records carrying ``tabContent``.
    """

    def tab_content(item: Any, _index: int, _items: Sequence[Any]) -> Any:
        next_data = add_group_id(get_in(item, NEXT_DATA_PATH, {}))
        content = get_in(next_data, "list", [])
        return content if content_handler is None else content_handler(content)

    return make_add_key_for_list(TAB_CONTENT_KEY, Computed(tab_content))(tabs)


def format_followers(number: float) -> str:
    """Render a follower count in units of ten thousand (``12345 -> "1.2万"``)."""
    return DEFAULT_SETTINGS.followers.render(number)


def add_followers(
    items: Sequence[Any] | None,
    fmt: Callable[[float], str] = format_followers,
    *,
    threshold: int = DEFAULT_SETTINGS.followers.threshold,
) -> list[Any]:
    """Attach a display-ready ``followers`` value to every item.

    The count is read from ``next.followStatus.followCount`` and coerced to a
    number (missing or unparseable counts become 0). Counts below
    ``threshold`` are kept as numbers; the rest are rendered with ``fmt``.

    Args:
        items: Records to annotate; ``None`` is treated as an empty list.
        fmt: Formatter for counts at or above ``threshold``.
        threshold: Smallest count rendered through ``fmt``.

    Returns:
        New records carrying ``followers``.
    """

    def followers(item: Any, _index: int, _items: Sequence[Any]) -> int | float | str:
        count = coerce_number(get_in(item, FOLLOW_COUNT_PATH, 0))
        return count if count < threshold else fmt(count)

    return make_add_key_for_list(FOLLOWERS_KEY, Computed(followers))(items)


__all__ = [
    "FOLLOWERS_KEY",
    "GROUP_ID_KEY",
    "TAB_CONTENT_KEY",
    "add_content_for_tabs",
    "add_followers",
    "add_group_id",
    "format_followers",
    "get_in",
]
