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


"""Typed aliases used across fpkit."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

Predicate: TypeAlias = Callable[[Any], object]
Transformer: TypeAlias = Callable[[Any], object]
Comparator: TypeAlias = Callable[[Any, Any], int]
JoinReducer: TypeAlias = Callable[[str, Any, int, Sequence[Any]], str]

__all__ = [
    "Comparator",
    "JoinReducer",
    "Predicate",
    "Transformer",
]
