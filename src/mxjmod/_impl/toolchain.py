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
Locating the jmod executable.

The JDK is taken from the ``--java-home`` option, the ``MXJMOD_JAVA_HOME``
environment variable or ``JAVA_HOME``, in that order. Without any of those,
``jmod`` is looked up on the ``PATH``.
"""

from __future__ import annotations

__all__ = ["JDKConfig", "find_jmod_executable"]

import shutil
from os.path import exists, isabs, join, realpath
from typing import Optional

from .errors import ToolNotFoundError
from .support.environment import exe_suffix, java_home_from_environment
from .support.logging import logv
from .support.options import _opts


class JDKConfig:
    """
    A JDKConfig object encapsulates info about an installed JDK.
    """

    def __init__(self, home: str):
        self.home = realpath(home)
        self.jmod = self.exe_path("jmod")
        if not exists(self.jmod):
            raise ToolNotFoundError("jmod executable does not exist: " + self.jmod)

    def exe_path(self, name: str, sub_dir: str = "bin") -> str:
        """
        Gets the full path to the executable in this JDK whose base name is `name`
        and is located in `sub_dir` (relative to self.home).
        """
        return exe_suffix(join(self.home, sub_dir, name))

    def __repr__(self):
        return "JDK " + self.home


def _java_home() -> Optional[str]:
    if getattr(_opts, "java_home", None):
        return _opts.java_home
    return java_home_from_environment()


def find_jmod_executable() -> str:
    """
    Gets the absolute path of the jmod executable.

    :raises ToolNotFoundError: if no JDK is configured and jmod is not on the PATH
    """
    home = _java_home()
    if home:
        if not isabs(home):
            home = realpath(home)
        return JDKConfig(home).jmod
    jmod = shutil.which("jmod")
    if jmod is None:
        raise ToolNotFoundError("Unable to find jmod command: set JAVA_HOME, use --java-home or put jmod on the PATH")
    logv(f"[found jmod on the PATH: {jmod}]")
    return realpath(jmod)
