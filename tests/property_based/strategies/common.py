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


"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

__all__ = [
    "flat_records",
    "int_lists",
    "record_keys",
    "scalar_values",
]


def scalar_values() -> st.SearchStrategy[Any]:
    """Return a strategy for JSON-like leaf values."""
    return st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=8))


def record_keys(max_size: int = 6) -> st.SearchStrategy[str]:
    """Return a strategy that yields short record keys."""
    return st.text(alphabet="abcdefgh_", min_size=1, max_size=max_size)


def flat_records(max_size: int = 5) -> st.SearchStrategy[dict[str, Any]]:
    """Strategy emitting flat records with scalar values.

    Args:
        max_size: Maximum number of keys per record.

    Returns:
        Hypothesis strategy producing ``dict[str, object]`` records.
    """
    return st.dictionaries(record_keys(), scalar_values(), max_size=max_size)


def int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy that yields bounded lists of integers."""
    return st.lists(st.integers(), max_size=max_size)
