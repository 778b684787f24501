#
# ----------------------------------------------------------------------------------------------------
#
# Copyright (c) 2026, 2026, Oracle and/or its affiliates. All rights reserved.
# DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER.
#
# This code is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License version 2 only, as
# published by the Free Software Foundation.
#
# This code is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# version 2 for more details (a copy is included in the LICENSE file that
# accompanied this code).
#
# You should have received a copy of the GNU General Public License version
# 2 along with this work; if not, write to the Free Software Foundation,
# Inc., 51 Franklin St, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Please contact Oracle, 500 Oracle Parkway, Redwood Shores, CA 94065 USA
# or visit www.oracle.com if you need additional information or have any
# questions.
#
# ----------------------------------------------------------------------------------------------------
#
"""
Environment variables and platform checks.
"""

__all__ = ["env_flag", "exe_suffix", "is_continuous_integration", "is_windows", "java_home_from_environment"]

import os
import sys
from typing import Optional

# Checked in this order, the first non-empty one wins
JAVA_HOME_VARIABLES = ("MXJMOD_JAVA_HOME", "JAVA_HOME")

_false_values = ("", "0", "false", "no", "off")


def env_flag(name: str) -> bool:
    """
    Returns whether the environment variable `name` is set to something other than
    an empty string, ``0``, ``false``, ``no`` or ``off`` (ignoring case).
    """
    return os.environ.get(name, "").strip().lower() not in _false_values


def is_continuous_integration() -> bool:
    return env_flag("CI") or env_flag("CONTINUOUS_INTEGRATION")


def java_home_from_environment() -> Optional[str]:
    for name in JAVA_HOME_VARIABLES:
        value = os.environ.get(name)
        if value:
            return value
    return None


def is_windows() -> bool:
    return sys.platform.startswith("win32")


def exe_suffix(name: str) -> str:
    return name + ".exe" if is_windows() else name
