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
"""Packaging for the textindent library.

REQUIRED_PACKAGES are the external packages the library code imports. TEST_PACKAGES
are only needed to run the tests under textindent/tests.
"""
import setuptools

REQUIRED_PACKAGES = [
    "attrs",
]

TEST_PACKAGES = [
    "parameterized",
    "pytest",
]

setuptools.setup(
    name="textindent",
    version="1.0.0",
    description="Change the indentation of multi-line strings while preserving "
    "relative indentation.",
    python_requires=">=3.9",
    install_requires=REQUIRED_PACKAGES,
    extras_require={"test": TEST_PACKAGES},
    packages=setuptools.find_packages(include=["textindent", "textindent.*"]),
    package_data={"textindent.tests.utils": ["fixtures/*.unit"]},
)
