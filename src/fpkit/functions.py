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


"""Function binding and composition helpers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from types import MethodType
from typing import Any

import toolz

from fpkit._internal.validation import require_callable


def bind_right(func: Callable[..., Any], this_arg: object = None, *partials: Any) -> Callable[..., Any]:
    """Pre-bind trailing arguments and call with the full argument list reversed.

    The bound function calls ``func(*reversed(partials + args))``, so the
    call-time arguments come first, last one leading, followed by the
    pre-bound ``partials`` in reverse. When ``this_arg`` is not None, ``func``
    is bound to it as a method and receives it as its first parameter.

    Args:
        func: Function to call.
        this_arg: Receiver bound to ``func``, or None for a plain call.
        *partials: Arguments fixed at bind time.

    Returns:
        The bound function.
    """
    target = func if this_arg is None else MethodType(func, this_arg)

    @functools.wraps(func)
    def bound(*args: Any) -> Any:
        return target(*reversed((*partials, *args)))

    return bound


def _require_callables(funcs: tuple[Any, ...], *, function: str) -> None:
    for position, candidate in enumerate(funcs):
        require_callable(candidate, function=function, argument=f"funcs[{position}]")


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``.

    ``compose()`` is the identity function.

    Raises:
        InvalidArgumentError: If any argument is not callable.
    """
    _require_callables(funcs, function="compose")
    return toolz.compose(*funcs)


def compose_left(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions left to right: ``compose_left(f, g)(x) == g(f(x))``.

    Raises:
        InvalidArgumentError: If any argument is not callable.
    """
    _require_callables(funcs, function="compose_left")
    return toolz.compose_left(*funcs)


__all__ = ["bind_right", "compose", "compose_left"]
