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

from __future__ import annotations

__all__ = ["ArchiveRequest", "WARN_IF_RESOLVED_VALUES"]

from typing import List, Optional

from .errors import ConfigurationError
from .pathlists import (
    DEFAULT_CMD_DIRECTORY,
    DEFAULT_CONFIG_DIRECTORY,
    DEFAULT_HEADER_FILES_DIRECTORY,
    DEFAULT_LEGAL_NOTICES_DIRECTORY,
    DEFAULT_LIB_DIRECTORY,
    DEFAULT_MAN_PAGES_DIRECTORY,
    PathListSpec,
)

WARN_IF_RESOLVED_VALUES = ("deprecated", "deprecated-for-removal", "incubating")


class ArchiveRequest:  # pylint: disable=too-many-instance-attributes
    """
    The parameters of one ``jmod create`` invocation.

    The six directory lists are either configured explicitly or left empty, in which
    case the conventional ``src/main/...`` directory is used if it exists.
    """

    def __init__(
        self,
        module_version: Optional[str] = None,
        main_class: Optional[str] = None,
        target_platform: Optional[str] = None,
        warn_if_resolved: Optional[str] = None,
        do_not_resolve_by_default: bool = False,
        excludes: Optional[List[str]] = None,
        cmds: Optional[List[str]] = None,
        configs: Optional[List[str]] = None,
        libs: Optional[List[str]] = None,
        header_files: Optional[List[str]] = None,
        man_pages: Optional[List[str]] = None,
        legal_notices: Optional[List[str]] = None,
    ):  # pylint: disable=too-many-arguments
        self.module_version = module_version
        self.main_class = main_class
        self.target_platform = target_platform
        self.warn_if_resolved = warn_if_resolved
        self.do_not_resolve_by_default = do_not_resolve_by_default
        self.excludes = excludes or []
        self.cmds = cmds or []
        self.configs = configs or []
        self.libs = libs or []
        self.header_files = header_files or []
        self.man_pages = man_pages or []
        self.legal_notices = legal_notices or []

    def cmds_spec(self) -> PathListSpec:
        return PathListSpec(self.cmds, DEFAULT_CMD_DIRECTORY, "cmd")

    def configs_spec(self) -> PathListSpec:
        return PathListSpec(self.configs, DEFAULT_CONFIG_DIRECTORY, "config")

    def libs_spec(self) -> PathListSpec:
        return PathListSpec(self.libs, DEFAULT_LIB_DIRECTORY, "lib")

    def header_files_spec(self) -> PathListSpec:
        return PathListSpec(self.header_files, DEFAULT_HEADER_FILES_DIRECTORY, "headerFile")

    def legal_notices_spec(self) -> PathListSpec:
        return PathListSpec(self.legal_notices, DEFAULT_LEGAL_NOTICES_DIRECTORY, "legalNotice")

    def man_pages_spec(self) -> PathListSpec:
        return PathListSpec(self.man_pages, DEFAULT_MAN_PAGES_DIRECTORY, "manPage")

    def path_list_specs(self) -> List[PathListSpec]:
        """
        The directory lists in the order they are validated.
        """
        return [
            self.cmds_spec(),
            self.configs_spec(),
            self.libs_spec(),
            self.header_files_spec(),
            self.legal_notices_spec(),
            self.man_pages_spec(),
        ]

    def check_warn_if_resolved(self, buildlog=None) -> None:
        """
        :raises ConfigurationError: if `warn_if_resolved` is set to an unknown value
        """
        if self.warn_if_resolved is None:
            return
        if self.warn_if_resolved.lower().strip() not in WARN_IF_RESOLVED_VALUES:
            message = (
                "The parameter warnIfResolved does not contain a valid value. "
                "Valid values are 'deprecated', 'deprecated-for-removal' or 'incubating'."
            )
            if buildlog:
                buildlog.error(message)
            raise ConfigurationError(message)

    def __repr__(self):
        return f"ArchiveRequest({vars(self)})"
