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


"""Property-based tests for key injection and ordering helpers."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fpkit.keys import make_add_key_for_list, make_add_key_for_obj
from fpkit.ordering import join_string, make_comparator
from fpkit.strings import trunc_str
from tests.property_based.strategies import flat_records, int_lists, scalar_values

pytestmark = pytest.mark.property

INJECTED_KEY = "injected"


@given(st.lists(flat_records(), max_size=8), scalar_values())
def test_add_key_for_list_preserves_other_keys(records: list[dict[str, Any]], value: object) -> None:
    result = make_add_key_for_list(INJECTED_KEY, value)(records)
    assert len(result) == len(records)
    for new, old in zip(result, records, strict=True):
        assert new[INJECTED_KEY] == value
        assert {key: item for key, item in new.items() if key != INJECTED_KEY} == old
        assert INJECTED_KEY not in old


@given(flat_records(), scalar_values())
def test_add_key_for_obj_without_overwrite_keeps_identity(record: dict[str, Any], value: object) -> None:
    present = {**record, INJECTED_KEY: "original"}
    assert make_add_key_for_obj(INJECTED_KEY, value, overwritten=False)(present) is present


@given(st.integers(), st.integers())
def test_comparator_is_antisymmetric(left: int, right: int) -> None:
    compare = make_comparator(lambda value: value > 0)
    assert compare(left, right) == -compare(right, left)


@given(int_lists(), st.booleans())
def test_comparator_partitions_by_predicate(items: list[int], is_pre: bool) -> None:
    ordered = sorted(items, key=cmp_to_key(make_comparator(lambda value: value % 3 == 0, is_pre)))
    hits = [value for value in items if value % 3 == 0]
    misses = [value for value in items if value % 3 != 0]
    assert ordered == (hits + misses if is_pre else misses + hits)


@given(int_lists(), st.sampled_from([",", "-", " | ", ""]))
def test_join_string_matches_str_join(items: list[int], sign: str) -> None:
    assert join_string(items, str, sign) == sign.join(str(item) for item in items)


@given(st.text(max_size=30), st.integers(min_value=0, max_value=20))
def test_trunc_str_bounds_length(text: str, max_len: int) -> None:
    result = trunc_str(text, max_len)
    assert result is not None
    assert len(result) <= max(len(text), max_len + 3)
    assert result.startswith(text[:max_len])
