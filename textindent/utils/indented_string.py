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
"""Method-call wrapper around the helpers in indentation.py."""
import attr

from textindent.utils import indentation


@attr.define(frozen=True)
class IndentedString:
    """Wraps a string so the indentation helpers can be chained as method calls, e.g.
    IndentedString(template).trim_margin() or IndentedString(query).indent(4).

    Every method returns a new value; the wrapped text is never modified.
    """

    text: str = attr.ib(validator=attr.validators.instance_of(str))

    def __str__(self) -> str:
        return self.text

    def get_indentation_level(self) -> int:
        return indentation.get_indentation_level(self.text)

    def indent(self, indentation_level: int) -> str:
        return indentation.indent(self.text, indentation_level)

    def unindent(self) -> str:
        return indentation.unindent(self.text)

    def indent_by(self, delta: int) -> str:
        return indentation.indent_by(self.text, delta)

    def trim_margin(
        self, margin_prefix: str = indentation.DEFAULT_MARGIN_PREFIX
    ) -> str:
        return indentation.trim_margin(self.text, margin_prefix)
