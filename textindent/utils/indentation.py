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
"""Helpers for changing the indentation of a multi-line string while preserving the
relative indentation between its lines.

The "common indentation level" of a string is the smallest number of leading
whitespace characters found on any of its non-blank lines. For example, in:

      Hello
     World

the common indentation level is 1, because " World" has the least leading
whitespace. Re-leveling the string replaces that baseline with a new one and keeps
every line's offset from it, so the string above indented to level 3 becomes:

       Hello
      World

Blank lines carry no indentation: they never affect the common level and are always
emitted as empty lines.
"""
import logging
import re
from typing import List

import attr

from textindent.utils.types import assert_type

INDENTATION_CHAR = " "
DEFAULT_MARGIN_PREFIX = "|"

_LINE_BOUNDARY_REGEX = re.compile(r"\r\n|\r|\n")
_LEADING_WHITESPACE_REGEX = re.compile(r"^\s+")


@attr.define(frozen=True, kw_only=True)
class Line:
    """One line of an input string, split into the length of its leading whitespace
    run and the rest of the line.
    """

    indentation_level: int
    content: str

    @property
    def is_blank(self) -> bool:
        return not self.content


def _is_blank(text: str) -> bool:
    return not text or not text.strip()


def split_lines(text: str) -> List[str]:
    """Splits |text| on \\r\\n, \\r and \\n. A separator at the very end of the
    string terminates the last line rather than starting a new empty one.
    """
    lines = _LINE_BOUNDARY_REGEX.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _process_lines(text: str) -> List[Line]:
    if _is_blank(text):
        return []

    processed = []
    for line in split_lines(text):
        match = _LEADING_WHITESPACE_REGEX.match(line)
        indentation_level = len(match.group(0)) if match else 0
        processed.append(
            Line(
                indentation_level=indentation_level,
                content=line[indentation_level:],
            )
        )
    return processed


def _find_common_indentation_level(lines: List[Line]) -> int:
    levels = [line.indentation_level for line in lines if not line.is_blank]
    return min(levels, default=0)


def _indent(
    lines: List[Line], current_indentation_level: int, desired_indentation_level: int
) -> str:
    """Re-levels |lines| from |current_indentation_level| to
    |desired_indentation_level|. Any line whose new indentation would be negative
    gets no indentation at all.
    """
    if not lines:
        return ""

    # Lines at the common level have the smallest offset (0), so only a negative
    # target can produce negative indentation.
    if desired_indentation_level < 0:
        logging.debug(
            "Requested indentation level [%s] would give some lines negative "
            "indentation, clamping those lines to 0.",
            desired_indentation_level,
        )

    rendered_lines = []
    for line in lines:
        if line.is_blank:
            rendered_lines.append("")
            continue
        offset = line.indentation_level - current_indentation_level
        new_level = max(0, desired_indentation_level + offset)
        rendered_lines.append(INDENTATION_CHAR * new_level + line.content)

    result = "\n".join(rendered_lines)
    # A trailing blank line is still a line of the input, so it keeps its terminator.
    if lines[-1].is_blank:
        result += "\n"
    return result


def get_indentation_level(text: str) -> int:
    """Returns the common indentation level of |text|: the least amount of leading
    whitespace on any of its non-blank lines. Returns 0 if |text| has no non-blank
    lines.
    """
    text = assert_type(text, str, arg_name="text")
    return _find_common_indentation_level(_process_lines(text))


def indent(text: str, indentation_level: int) -> str:
    """Returns |text| re-leveled so that its common indentation level becomes
    |indentation_level|, while preserving the relative indentation of every line.

    If the current common level is higher than |indentation_level|, the text is
    unindented accordingly. A negative |indentation_level| is allowed; lines that
    would end up with negative indentation get none.
    """
    text = assert_type(text, str, arg_name="text")
    indentation_level = assert_type(
        indentation_level, int, arg_name="indentation_level"
    )
    lines = _process_lines(text)
    return _indent(lines, _find_common_indentation_level(lines), indentation_level)


def unindent(text: str) -> str:
    """Returns |text| with all common indentation stripped while preserving relative
    indentation. Equivalent to indent(text, 0).
    """
    return indent(text, 0)


def indent_by(text: str, delta: int) -> str:
    """Returns |text| with its common indentation level changed by |delta|, which may
    be negative to decrease the indentation.
    """
    text = assert_type(text, str, arg_name="text")
    delta = assert_type(delta, int, arg_name="delta")
    lines = _process_lines(text)
    current_indentation_level = _find_common_indentation_level(lines)
    return _indent(lines, current_indentation_level, current_indentation_level + delta)


def trim_margin(text: str, margin_prefix: str = DEFAULT_MARGIN_PREFIX) -> str:
    """Returns |text| with leading whitespace followed by |margin_prefix| removed from
    every line. Lines that do not start with |margin_prefix| (after their leading
    whitespace) are left untouched.

    The first and last lines are dropped if they are blank, which allows writing:

        trim_margin(
            '''
            |   Hello
            | there
            '''
        )

    to get "   Hello\\n there".
    """
    text = assert_type(text, str, arg_name="text")
    margin_prefix = assert_type(margin_prefix, str, arg_name="margin_prefix")
    if _is_blank(text):
        return text

    lines = split_lines(text)
    last_index = len(lines) - 1
    trimmed_lines = []
    for i, line in enumerate(lines):
        if i in (0, last_index) and _is_blank(line):
            continue

        left_trimmed_line = line.lstrip()
        if left_trimmed_line.startswith(margin_prefix):
            trimmed_lines.append(left_trimmed_line[len(margin_prefix) :])
        else:
            trimmed_lines.append(line)

    return "\n".join(trimmed_lines)
