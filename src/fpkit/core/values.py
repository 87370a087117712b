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


"""Tagged value sources for key injection.

A value injected into a record is either a literal (`Const`) or computed from
the record being updated (`Computed`). The caller picks the variant; helpers
never guess by inspecting whether a value happens to be callable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Const(Generic[T]):
    """Literal value injected as-is, even when it is itself callable."""

    value: T


@dataclass(slots=True, frozen=True)
class Computed(Generic[T]):
    """Value derived from the record being updated.

    Attributes:
        fn: Called as ``fn(item, index, items)`` by list injection and as
            ``fn(record)`` by single-record injection.
    """

    fn: Callable[..., T]


ValueSource: TypeAlias = Const[Any] | Computed[Any]


def as_value_source(value: object) -> ValueSource:
    """Return ``value`` as a tagged source, wrapping bare values in `Const`."""
    if isinstance(value, Const | Computed):
        return value
    return Const(value)


__all__ = ["Computed", "Const", "ValueSource", "as_value_source"]
