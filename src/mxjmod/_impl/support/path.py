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
"""
File system helpers for the jmod goals.
"""

__all__ = ["delete_if_exists", "ensure_dir_exists", "join_path_list"]

import os
from os.path import isfile
from typing import Iterable

from ..errors import ArtifactDeletionError


def ensure_dir_exists(path: str) -> str:
    """
    Creates the directory `path` and its missing parents.
    """
    os.makedirs(path, exist_ok=True)
    return path


def delete_if_exists(path: str, buildlog) -> None:
    """
    Deletes the regular file at `path` if there is one.

    :raises ArtifactDeletionError: if the file exists but cannot be deleted
    """
    if isfile(path):
        buildlog.debug(f"Deleting the existing {path} file.")
        try:
            os.remove(path)
        except OSError as e:
            message = f"Failure during deleting of file {path}"
            buildlog.error(message)
            raise ArtifactDeletionError(message) from e


def join_path_list(paths: Iterable[str]) -> str:
    """
    Joins `paths` with the platform path separator.
    """
    return os.pathsep.join(paths)
