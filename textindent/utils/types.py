# Recidiviz - a data platform for criminal justice reform
# Copyright (C) 2026 Recidiviz, Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Call-boundary argument checks shared by the text utilities."""

from typing import Any, Optional, Type, TypeVar

T = TypeVar("T")


def non_optional(v: Optional[T], *, arg_name: str) -> T:
    """Converts the type of a value from optional to non-optional, throwing if it is
    None.
    """
    if v is None:
        raise ValueError(f"Expected non-null value for [{arg_name}].")
    return v


def assert_type(v: Optional[Any], expected_type: Type[T], *, arg_name: str) -> T:
    """Asserts that |v| is an instance of |expected_type|, throwing if it is None or
    of any other type. Booleans are rejected where an int is expected, even though
    bool is a subclass of int.
    """
    non_optional_v: Any = non_optional(v, arg_name=arg_name)
    if isinstance(non_optional_v, bool) and expected_type is not bool:
        raise ValueError(
            f"Expected type [{expected_type.__name__}] for [{arg_name}], found "
            f"bool [{v}]."
        )
    if not isinstance(non_optional_v, expected_type):
        raise ValueError(
            f"Expected type [{expected_type.__name__}] for [{arg_name}], found "
            f"[{type(v).__name__}]."
        )
    return non_optional_v
