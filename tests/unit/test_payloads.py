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


"""Unit tests for payload composers."""

from __future__ import annotations

import pytest

from fpkit.payloads import (
    add_content_for_tabs,
    add_followers,
    add_group_id,
    format_followers,
    get_in,
)

pytestmark = pytest.mark.unit


def _follower(count: object) -> dict[str, object]:
    return {"next": {"followStatus": {"followCount": count}}}


def test_get_in_reads_dotted_and_sequence_paths() -> None:
    payload = {"a": {"b": [10, 20]}}
    assert get_in(payload, "a.b") == [10, 20]
    assert get_in(payload, ["a", "b", 1]) == 20


def test_get_in_falls_back_on_missing_segments() -> None:
    assert get_in({"a": None}, "a.b", "fallback") == "fallback"
    assert get_in({"a": {}}, "a.b.c") is None
    assert get_in(None, "a", 0) == 0


def test_add_group_id_tags_list_items() -> None:
    data = {"groupId": 7, "list": [{"id": 1}, {"id": 2}]}
    result = add_group_id(data)
    assert result == {
        "groupId": 7,
        "list": [{"id": 1, "_groupId": 7}, {"id": 2, "_groupId": 7}],
    }
    assert data["list"] == [{"id": 1}, {"id": 2}]


def test_add_group_id_supports_custom_field_and_tuples() -> None:
    data = {"groupId": "g", "items": ({"a": 1},)}
    assert add_group_id(data, field="items")["items"] == [{"a": 1, "_groupId": "g"}]


def test_add_group_id_uses_none_when_group_is_missing() -> None:
    assert add_group_id({"list": [{}]}) == {"list": [{"_groupId": None}]}


@pytest.mark.parametrize("data", [{"groupId": 1, "list": "text"}, {"groupId": 1}, None, []])
def test_add_group_id_returns_input_without_list(data: object) -> None:
    assert add_group_id(data) is data


def test_add_content_for_tabs_attaches_grouped_list() -> None:
    tabs = [
        {"name": "a", "next": {"nextData": {"groupId": 3, "list": [{"id": 1}]}}},
        {"name": "b"},
    ]
    result = add_content_for_tabs(tabs)
    assert result[0]["tabContent"] == [{"id": 1, "_groupId": 3}]
    assert result[1] == {"name": "b", "tabContent": []}
    assert "tabContent" not in tabs[0]


def test_add_content_for_tabs_applies_handler() -> None:
    tabs = [
        {"next": {"nextData": {"list": [{"id": 1}, {"id": 2}]}}},
        {"next": {}},
    ]
    result = add_content_for_tabs(tabs, len)
    assert [tab["tabContent"] for tab in result] == [2, 0]


def test_add_followers_keeps_small_counts_numeric() -> None:
    result = add_followers([_follower("500")])
    assert result[0]["followers"] == 500
    assert isinstance(result[0]["followers"], int)


def test_add_followers_formats_large_counts() -> None:
    assert add_followers([_follower("12345")])[0]["followers"] == "1.2万"
    assert add_followers([_follower(1000)])[0]["followers"] == "0.1万"


@pytest.mark.parametrize(("count", "expected"), [(None, 0), ("", 0), ("n/a", 0), (999, 999), (12.0, 12)])
def test_add_followers_coerces_counts(count: object, expected: int) -> None:
    assert add_followers([_follower(count)])[0]["followers"] == expected


def test_add_followers_defaults_missing_count_to_zero() -> None:
    assert add_followers([{}]) == [{"followers": 0}]
    assert add_followers(None) == []


def test_add_followers_accepts_custom_formatter_and_threshold() -> None:
    result = add_followers([_follower(2500), _follower(50)], lambda n: f"{n // 1000}k", threshold=100)
    assert [item["followers"] for item in result] == ["2k", 50]


def test_format_followers_uses_ten_thousand_units() -> None:
    assert format_followers(12345) == "1.2万"
    assert format_followers(15000) == "1.5万"


@pytest.mark.parametrize(
    ("count", "expected"),
    [(12500, "1.3万"), (32500, "3.3万"), (14500, "1.4万"), (1050, "0.1万")],
)
def test_format_followers_rounds_ties_up(count: int, expected: str) -> None:
    assert format_followers(count) == expected
    assert add_followers([_follower(count)])[0]["followers"] == expected
