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


"""Unit tests for the error code registry."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from fpkit._internal.error_codes import error_code_catalog, error_code_for
from fpkit.exceptions import (
    ConfigReadError,
    ConfigValidationError,
    FpkitError,
    FpkitTypeError,
    FpkitValidationError,
    InvalidArgumentError,
)

pytestmark = pytest.mark.unit


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(FpkitError("x")) == "FP000"
    assert error_code_for(FpkitValidationError("x")) == "FP100"
    assert error_code_for(FpkitTypeError("x")) == "FP101"
    assert error_code_for(InvalidArgumentError("make_comparator", "compare_fn")) == "FP102"
    assert error_code_for(ConfigValidationError("x")) == "FP200"
    assert error_code_for(ConfigReadError(Path("fpkit.toml"), OSError("denied"))) == "FP201"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "FP000"


def test_invalid_argument_error_message() -> None:
    error = InvalidArgumentError("compose", "funcs[0]")
    assert str(error) == "compose() argument 'funcs[0]' must be a callable"
    assert isinstance(error, TypeError)


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(set(codes)) == len(codes)
    assert catalog["fpkit._internal.exceptions.FpkitError"] == "FP000"


def test_error_code_documentation_is_in_sync() -> None:
    catalog = error_code_catalog()
    repo_root = Path(__file__).resolve().parents[2]
    content = (repo_root / "docs" / "EXCEPTIONS.md").read_text(encoding="utf-8")
    documented_codes = set(re.findall(r"FP\d{3}", content))
    assert set(catalog.values()) == documented_codes
