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


"""Compatibility layer for typing features newer than the supported floor.

Python 3.12 introduced `typing.override`; earlier interpreters get it from
`typing_extensions`. The remaining names are re-exported so modules have a
single import location regardless of interpreter version.

Notes:
    - When type checking (`TYPE_CHECKING` is true), all names are imported
      from `typing_extensions` to give type checkers a consistent API.
    - At runtime, stdlib versions are preferred where available.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import (
        NotRequired,
        TypedDict,
        override,
    )
else:
    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    from typing import NotRequired

__all__ = [
    "NotRequired",
    "TypedDict",
    "override",
]
