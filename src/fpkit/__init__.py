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


"""fpkit - functional helpers for records and sequences.

Provides pure helpers for injecting keys into records, updating sequences
without mutation, truncating sequences and strings, and building comparators,
reducers, and predicates.
"""

from __future__ import annotations

from ._internal.logging_utils import configure_logging
from .arrays import (
    add_at,
    array_updater,
    delete_at,
    get_first,
    get_first_n,
    make_trunc,
    replace_at,
    reverse_array,
)
from .config import FollowerFormat, Settings, load_settings
from .core.values import Computed, Const
from .exceptions import (
    ConfigReadError,
    ConfigValidationError,
    FpkitError,
    FpkitTypeError,
    FpkitValidationError,
    InvalidArgumentError,
)
from .functions import bind_right, compose, compose_left
from .keys import make_add_key_for_list, make_add_key_for_obj
from .ordering import (
    join_string,
    make_comparator,
    make_join_string_reducer,
    make_property_filter,
    make_sort_key,
)
from .payloads import add_content_for_tabs, add_followers, add_group_id, format_followers, get_in
from .strings import trunc_str

__all__ = [
    "Computed",
    "ConfigReadError",
    "ConfigValidationError",
    "Const",
    "FollowerFormat",
    "FpkitError",
    "FpkitTypeError",
    "FpkitValidationError",
    "InvalidArgumentError",
    "Settings",
    "__version__",
    "add_at",
    "add_content_for_tabs",
    "add_followers",
    "add_group_id",
    "array_updater",
    "bind_right",
    "compose",
    "compose_left",
    "configure_logging",
    "delete_at",
    "format_followers",
    "get_first",
    "get_first_n",
    "get_in",
    "join_string",
    "load_settings",
    "make_add_key_for_list",
    "make_add_key_for_obj",
    "make_comparator",
    "make_join_string_reducer",
    "make_property_filter",
    "make_sort_key",
    "make_trunc",
    "replace_at",
    "reverse_array",
    "trunc_str",
]

__version__ = "0.1.0"
