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


"""Sequence helpers: safe slicing, immutable index updates, and truncation.

Every helper returns a new ``list`` and leaves its input untouched. Indices
follow Python slice semantics, so out-of-range positions degrade to empty
ranges instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Final, TypeVar

import toolz

from fpkit._internal.logging_utils import structured_extra
from fpkit.config.models import DEFAULT_SETTINGS
from fpkit.core.model_types import LogComponent

T = TypeVar("T")


def get_first(items: Sequence[Any] | None) -> Any:
    """Return the first element, or a new empty dict when there is none."""
    return toolz.get_in([0], items, {})


def get_first_n(items: Sequence[T] | None, n: int | None = None) -> list[T]:
    """Return the first ``n`` elements (all of them when ``n`` is None)."""
    if not items:
        return []
    return list(items[:n])


def replace_at(items: Sequence[T], index: int, replacer: T) -> list[T]:
    """Return a copy of ``items`` with the element at ``index`` replaced."""
    return [*items[:index], replacer, *items[index + 1 :]]


def add_at(items: Sequence[T], index: int, *adders: T) -> list[T]:
    """Return a copy of ``items`` with ``adders`` inserted before ``index``."""
    return [*items[:index], *adders, *items[index:]]


def delete_at(items: Sequence[T], index: int = 0) -> list[T]:
    """Return a copy of ``items`` without the element at ``index``."""
    return [*items[:index], *items[index + 1 :]]


class _ArrayUpdater:
    """Namespace grouping the index update helpers under short names."""

    __slots__ = ()

    replace = staticmethod(replace_at)
    add = staticmethod(add_at)
    delete = staticmethod(delete_at)


array_updater: Final[_ArrayUpdater] = _ArrayUpdater()


def _empty(items: Sequence[Any] | None = None) -> list[Any]:
    return []


def make_trunc(
    trunc: int,
    max_size: int = DEFAULT_SETTINGS.truncation.max_items,
    *,
    logger: logging.Logger | None = None,
) -> Callable[[Sequence[T] | None], list[T]]:
    """Build a function that truncates sequences to whole blocks of ``trunc``.

    The returned function first caps the sequence at ``max_size`` elements and
    then keeps ``len(items) // trunc * trunc`` of them. The block count comes
    from the length of the original sequence, not of the capped one, so a
    ``max_size`` that is not a multiple of ``trunc`` can leave a partial block.
    That configuration is reported as a warning when the function is built.

    Args:
        trunc: Block size.
        max_size: Upper bound on the number of elements kept.
        logger: Destination for configuration warnings. Defaults to the
            ``fpkit.arrays`` logger.

    Returns:
        The truncating function; ``None`` input is treated as empty. A zero
        ``trunc`` produces a function that always returns ``[]``. A negative
        ``trunc`` floors towards a count past the end, so only ``max_size``
        applies.
    """
    log = logging.getLogger(__name__) if logger is None else logger
    details = {"trunc": trunc, "max_size": max_size}
    if trunc == 0:
        log.warning(
            "make_trunc() block size is zero; every result will be empty",
            extra=structured_extra(component=LogComponent.ARRAYS, function=make_trunc, details=details),
        )
        return _empty
    if max_size % trunc != 0:
        log.warning(
            "make_trunc() max_size %s is not a multiple of block size %s",
            max_size,
            trunc,
            extra=structured_extra(component=LogComponent.ARRAYS, function=make_trunc, details=details),
        )

    def truncate(items: Sequence[T] | None = None) -> list[T]:
        if items is None:
            return []
        multiple = len(items) // trunc
        return list(items[:max_size][: multiple * trunc])

    return truncate


def reverse_array(items: Sequence[T] | None) -> list[T]:
    """Return a reversed copy of ``items``."""
    if items is None:
        return []
    return list(reversed(items))


__all__ = [
    "add_at",
    "array_updater",
    "delete_at",
    "get_first",
    "get_first_n",
    "make_trunc",
    "replace_at",
    "reverse_array",
]
