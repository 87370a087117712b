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


"""Helpers for validating and coercing loosely typed inputs."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from fpkit._internal.exceptions import InvalidArgumentError


def require_callable(value: object, *, function: str, argument: str) -> Callable[..., Any]:
    """Return ``value`` unchanged when it is callable.

    Args:
        value: Candidate callable.
        function: Name of the helper performing the check, for the error message.
        argument: Name of the checked parameter, for the error message.

    Returns:
        The validated callable.

    Raises:
        InvalidArgumentError: If ``value`` is not callable.
    """
    if not callable(value):
        raise InvalidArgumentError(function, argument)
    return value


def coerce_number(value: object, default: int | float = 0) -> int | float:
    """Coerce a value to an int or float.

    Integers pass through, integral floats collapse to ``int``, and numeric
    strings are parsed after stripping whitespace. ``None``, blank strings,
    non-finite results and anything unparseable produce ``default``.

    Args:
        value: The value to convert.
        default: Number returned when conversion is not possible.

    Returns:
        The coerced number.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return _collapse_float(value, default)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        digits = text[1:] if text[0] in "+-" else text
        if digits.isdecimal():
            return int(text)
        try:
            return _collapse_float(float(text), default)
        except ValueError:
            return default
    return default


def _collapse_float(value: float, default: int | float) -> int | float:
    if not math.isfinite(value):
        return default
    return int(value) if value.is_integer() else value


__all__ = ["coerce_number", "require_callable"]
