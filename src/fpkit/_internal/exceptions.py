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


"""Common exception hierarchy for fpkit."""

from __future__ import annotations

__all__ = [
    "FpkitError",
    "FpkitTypeError",
    "FpkitValidationError",
    "InvalidArgumentError",
]


class FpkitError(Exception):
    """Base error for all fpkit exceptions."""


class FpkitValidationError(FpkitError, ValueError):
    """Raised when input data fails validation checks."""


class FpkitTypeError(FpkitError, TypeError):
    """Raised when input data has an unexpected type."""


class InvalidArgumentError(FpkitTypeError):
    """Raised when a factory is configured with an unusable argument."""

    def __init__(self, function: str, argument: str, expected: str = "a callable") -> None:
        """Initialize the exception with the offending call site.

        Args:
            function: Name of the helper that rejected the argument.
            argument: Name of the rejected parameter.
            expected: Description of what the parameter must be.
        """
        self.function = function
        self.argument = argument
        self.expected = expected
        super().__init__(f"{function}() argument '{argument}' must be {expected}")
