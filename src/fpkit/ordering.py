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


"""Comparator, reducer, and predicate factories."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

import toolz

from fpkit._internal.validation import require_callable
from fpkit.core.type_aliases import Comparator, JoinReducer, Predicate, Transformer

DEFAULT_CONNECT_SIGN = ","


def make_comparator(compare_fn: Predicate, is_pre: bool = False) -> Comparator:
    """Build a two-argument comparator from a one-argument predicate.

    Values satisfying ``compare_fn`` sort after the others, or before them when
    ``is_pre`` is true. Values with the same predicate outcome compare equal,
    so only the satisfying/non-satisfying split is ordered. Wrap the result in
    `functools.cmp_to_key` to sort with it.

    Args:
        compare_fn: Predicate classifying each value.
        is_pre: Place satisfying values first instead of last.

    Returns:
        Comparator returning -1, 0, or 1.

    Raises:
        InvalidArgumentError: If ``compare_fn`` is not callable.
    """
    predicate = require_callable(compare_fn, function="make_comparator", argument="compare_fn")
    first_hit_order = -1 if is_pre else 1

    def compare(v1: Any, v2: Any) -> int:
        hit1 = bool(predicate(v1))
        hit2 = bool(predicate(v2))
        if hit1 == hit2:
            return 0
        return first_hit_order if hit1 else -first_hit_order

    return compare


def make_sort_key(compare_fn: Predicate, is_pre: bool = False) -> Callable[[Any], bool]:
    """Build a ``key=`` function with the same ordering as `make_comparator`.

    Raises:
        InvalidArgumentError: If ``compare_fn`` is not callable.
    """
    predicate = require_callable(compare_fn, function="make_sort_key", argument="compare_fn")
    flip = bool(is_pre)
    return lambda value: bool(predicate(value)) != flip


def make_join_string_reducer(
    transformer: Transformer,
    connect_sign: str = DEFAULT_CONNECT_SIGN,
) -> JoinReducer:
    """Build a reduction step that joins transformed items with a separator.

    The step has the signature ``(acc, cur, index, items)``: it appends
    ``transformer(cur)`` to ``acc`` followed by ``connect_sign`` unless ``cur``
    sits at the last position of ``items``. `join_string` drives it over a
    whole sequence.

    Raises:
        InvalidArgumentError: If ``transformer`` is not callable.
    """
    transform = require_callable(transformer, function="make_join_string_reducer", argument="transformer")

    def join_step(acc: str, cur: Any, index: int, items: Sequence[Any]) -> str:
        separator = "" if index == len(items) - 1 else connect_sign
        return f"{acc}{transform(cur)}{separator}"

    return join_step


def join_string(
    items: Iterable[Any],
    transformer: Transformer = str,
    connect_sign: str = DEFAULT_CONNECT_SIGN,
    initial: str = "",
) -> str:
    """Fold ``items`` left to right through `make_join_string_reducer`."""
    step = make_join_string_reducer(transformer, connect_sign)
    sequence = list(items)
    acc = initial
    for index, item in enumerate(sequence):
        acc = step(acc, item, index, sequence)
    return acc


def _lookup(item: Any, prop: Any) -> Any:
    if isinstance(item, Mapping | Sequence) and not isinstance(item, str):
        return toolz.get_in([prop], item)
    if isinstance(prop, str):
        return getattr(item, prop, None)
    return None


def make_property_filter(filter_every: bool, *props: Any) -> Callable[[Any], bool]:
    """Build a predicate over the truthiness of ``props`` on an item.

    Args:
        filter_every: Require every property to be truthy; otherwise any one.
        *props: Keys (mapping or sequence items) or attribute names.

    Returns:
        The predicate. With no ``props`` it is always true for ``filter_every``
        and always false otherwise.
    """
    combine = all if filter_every else any

    def matches(item: Any) -> bool:
        return combine(_lookup(item, prop) for prop in props)

    return matches


__all__ = [
    "join_string",
    "make_comparator",
    "make_join_string_reducer",
    "make_property_filter",
    "make_sort_key",
]
