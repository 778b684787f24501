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
Exceptions raised by the jmod goals.

Library code raises these; the command line layer turns them into an exit
status with :func:`abort`.
"""

__all__ = [
    "ERROR_ARTIFACT_CONFLICT",
    "ERROR_TOOL_NOT_FOUND",
    "JModError",
    "ConfigurationError",
    "ToolNotFoundError",
    "ModuleResolutionError",
    "ExecutionError",
    "ArtifactDeletionError",
    "ArtifactConflictError",
]

ERROR_ARTIFACT_CONFLICT = 3
ERROR_TOOL_NOT_FOUND = 127


class JModError(Exception):
    exit_code = 1


class ConfigurationError(JModError):
    """
    An invalid parameter value or a missing input directory or archive.
    """


class ToolNotFoundError(JModError):
    """
    The jmod executable could not be located or launched.
    """

    exit_code = ERROR_TOOL_NOT_FOUND


class ModuleResolutionError(JModError):
    """
    Describing the main module or one of the candidates failed.
    Callers degrade to best effort instead of aborting.
    """


class ExecutionError(JModError):
    def __init__(self, returncode: int, message: str):
        JModError.__init__(self, message)
        self.returncode = returncode

    @property
    def exit_code(self):
        return self.returncode


class ArtifactDeletionError(JModError):
    pass


class ArtifactConflictError(JModError):
    exit_code = ERROR_ARTIFACT_CONFLICT
