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
"""Helpers related to formatting string text"""
from textindent.utils.indentation import indent, split_lines
from textindent.utils.types import assert_type


def _strip_blank_edge_lines(s: str) -> str:
    lines = split_lines(s)
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines).rstrip()


def fix_indent(s: str, *, indent_level: int) -> str:
    """Updates the input string to reset the indentation level to the provided
    |indent_level| while maintaining all relative indents between lines.

    Also drops blank lines at the start and end of the string, so that a
    triple-quoted query or code template can be written on its own lines.
    """
    s = assert_type(s, str, arg_name="s")
    return indent(_strip_blank_edge_lines(s), indent_level)
