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


"""Key-injection helpers.

Both factories return a function that adds (or overwrites) one key on a
record, or on every record in a list. Inputs are never mutated: updated
records are shallow copies, untouched records keep their identity.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from toolz import assoc

from fpkit.core.values import Computed, Const, ValueSource, as_value_source


def _resolve(source: ValueSource, *args: Any) -> Any:
    match source:
        case Const(value=value):
            return value
        case Computed(fn=fn):
            return fn(*args)


def make_add_key_for_list(
    key: str,
    value: ValueSource | object,
    overwritten: bool = True,
) -> Callable[[Sequence[Any] | None], list[Any]]:
    """Build a function that sets ``key`` on every record of a list.

    Args:
        key: Name of the key to set.
        value: `Const` literal or `Computed` source; a `Computed` function is
            called as ``fn(item, index, items)``. Bare values act as `Const`.
        overwritten: When false, records that already contain ``key`` are
            kept as they are.

    Returns:
        A function mapping a list of records (``None`` meaning empty) to a new
        list. Items that are not mappings are treated as empty records.
    """
    source = as_value_source(value)

    def add_key(items: Sequence[Any] | None = None) -> list[Any]:
        records: Sequence[Any] = [] if items is None else items
        result: list[Any] = []
        for index, item in enumerate(records):
            is_record = isinstance(item, Mapping)
            if not overwritten and is_record and key in item:
                result.append(item)
                continue
            base: Mapping[str, Any] = item if is_record else {}
            result.append(assoc(base, key, _resolve(source, item, index, records)))
        return result

    return add_key


def make_add_key_for_obj(
    key: str,
    value: ValueSource | object,
    overwritten: bool = True,
) -> Callable[[Any], Any]:
    """Build a function that sets ``key`` on a single record.

    Args:
        key: Name of the key to set.
        value: `Const` literal or `Computed` source; a `Computed` function is
            called as ``fn(record)``. Bare values act as `Const`.
        overwritten: When false, a record that already contains ``key`` is
            returned as is.

    Returns:
        A function returning a shallow copy with ``key`` set, or its input
        unchanged when the input is not a mapping or must not be overwritten.
    """
    source = as_value_source(value)

    def add_key(record: Any) -> Any:
        if not isinstance(record, Mapping):
            return record
        if not overwritten and key in record:
            return record
        return assoc(record, key, _resolve(source, record))

    return add_key


__all__ = ["make_add_key_for_list", "make_add_key_for_obj"]
