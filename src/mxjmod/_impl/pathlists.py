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
Resolution of the optional directory parameters of ``jmod create``.

Each of the six categories (commands, configs, libraries, header files, legal
notices and man pages) is either configured explicitly or falls back to a
conventional directory below the project base directory. A configured list
always wins, the conventional directory is only used when it exists.
"""

from __future__ import annotations

__all__ = [
    "PathListSpec",
    "resolve_path_list",
    "validate_path_lists",
    "DEFAULT_CMD_DIRECTORY",
    "DEFAULT_CONFIG_DIRECTORY",
    "DEFAULT_LIB_DIRECTORY",
    "DEFAULT_HEADER_FILES_DIRECTORY",
    "DEFAULT_LEGAL_NOTICES_DIRECTORY",
    "DEFAULT_MAN_PAGES_DIRECTORY",
]

from os.path import abspath, isabs, isdir, join
from typing import Iterable, List, NamedTuple, Optional, Sequence

from .errors import ConfigurationError

DEFAULT_CMD_DIRECTORY = "src/main/cmds"
DEFAULT_CONFIG_DIRECTORY = "src/main/configs"
DEFAULT_LIB_DIRECTORY = "src/main/libs"
DEFAULT_HEADER_FILES_DIRECTORY = "src/main/headerfiles"
DEFAULT_LEGAL_NOTICES_DIRECTORY = "src/main/legalnotices"
DEFAULT_MAN_PAGES_DIRECTORY = "src/main/manpages"


class PathListSpec(NamedTuple):
    """
    A configured list of directories together with the conventional directory used
    when nothing is configured. `name` is the parameter name used in error messages.
    """

    configured: Optional[Sequence[str]]
    default: str
    name: str

    def resolve(self, base_dir: str) -> List[str]:
        return resolve_path_list(self.configured, self.default, base_dir)


def _absolute(path: str, base_dir: str) -> str:
    if isabs(path):
        return path
    return join(abspath(base_dir), path)


def resolve_path_list(configured: Optional[Sequence[str]], default_relative_dir: str, base_dir: str) -> List[str]:
    """
    Returns `configured` if it is not empty, otherwise a single element list with
    `default_relative_dir` if that directory exists below `base_dir`, otherwise an
    empty list. All entries are made absolute against `base_dir`.
    """
    if configured:
        entries = list(configured)
    elif isdir(join(base_dir, default_relative_dir)):
        entries = [default_relative_dir]
    else:
        entries = []
    return [_absolute(e, base_dir) for e in entries]


def validate_path_lists(specs: Iterable[PathListSpec], base_dir: str, buildlog=None) -> None:
    """
    Checks that every entry of every resolved list is an existing directory.

    :raises ConfigurationError: for the first entry that is not
    """
    for spec in specs:
        for location in spec.resolve(base_dir):
            if not isdir(location):
                message = f"The directory {location} for {spec.name} parameter does not exist or is not a directory."
                if buildlog:
                    buildlog.error(message)
                raise ConfigurationError(message)
