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
"""Tests for types.py"""
import unittest

from textindent.utils.types import assert_type, non_optional


class TestTypes(unittest.TestCase):
    """Tests for non_optional and assert_type"""

    def test_non_optional(self) -> None:
        self.assertEqual("", non_optional("", arg_name="text"))
        self.assertEqual(0, non_optional(0, arg_name="level"))
        with self.assertRaisesRegex(ValueError, r"\[text\]"):
            non_optional(None, arg_name="text")

    def test_assert_type(self) -> None:
        self.assertEqual("abc", assert_type("abc", str, arg_name="text"))
        self.assertEqual(-3, assert_type(-3, int, arg_name="delta"))
        self.assertTrue(assert_type(True, bool, arg_name="flag"))

    def test_assert_type_wrong_type(self) -> None:
        with self.assertRaisesRegex(ValueError, r"Expected type \[str\] for \[text\]"):
            assert_type(3, str, arg_name="text")
        with self.assertRaisesRegex(ValueError, r"found bool"):
            assert_type(False, int, arg_name="delta")
        with self.assertRaises(ValueError):
            assert_type(None, int, arg_name="delta")
