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
Assembly of the ``jmod`` command lines.

The order of the ``create`` options is fixed; the jmod option parser accepts
them in any order but reproducible command lines are easier to compare.
Paths on the class path and module path are joined with the platform path
separator and backslashes are doubled since jmod unescapes them.
"""

from __future__ import annotations

__all__ = ["CommandLine", "build_create_command", "build_describe_command", "build_list_command", "JMODS"]

from os.path import abspath, isdir, isfile, join
from typing import List, Sequence, Tuple

from .classifier import ClassifiedPaths
from .errors import ConfigurationError
from .request import ArchiveRequest
from .support.path import join_path_list

JMODS = "jmods"


class CommandLine:
    """
    An executable and its arguments. Instances are immutable.
    """

    __slots__ = ("_executable", "_arguments")

    def __init__(self, executable: str, arguments: Sequence[str]):
        object.__setattr__(self, "_executable", executable)
        object.__setattr__(self, "_arguments", tuple(arguments))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def arguments(self) -> Tuple[str, ...]:
        return self._arguments

    def as_list(self) -> List[str]:
        return [self._executable] + list(self._arguments)

    def __eq__(self, other):
        return isinstance(other, CommandLine) and self.as_list() == other.as_list()

    def __hash__(self):
        return hash((self._executable, self._arguments))

    def __repr__(self):
        return f"CommandLine({self._executable!r}, {list(self._arguments)!r})"


def _escaped(paths: Sequence[str]) -> str:
    return join_path_list(paths).replace("\\", "\\\\")


def build_create_command(
    request: ArchiveRequest,
    classified: ClassifiedPaths,
    output_dir: str,
    dest_archive: str,
    java_home: str,
    base_dir: str,
    executable: str = "jmod",
) -> CommandLine:  # pylint: disable=too-many-arguments
    """
    Builds the ``jmod create`` command line for `request`.

    :param str output_dir: the directory with the compiled classes, appended to the class path if it exists
    :param str dest_archive: the .jmod file to create
    :param str java_home: the JDK whose jmods directory completes the module path
    :param str base_dir: the project base directory the directory lists are resolved against
    """
    args = ["create"]
    if request.module_version is not None:
        args.append("--module-version=" + request.module_version)

    classpath = list(classified.classpath)
    if isdir(output_dir):
        classpath.append(abspath(output_dir))
    args.append("--class-path=" + _escaped(classpath))

    if request.excludes:
        args.append("--exclude=" + ",".join(request.excludes).replace("\\", "\\\\"))

    configs = request.configs_spec().resolve(base_dir)
    if configs:
        args.append("--config=" + join_path_list(configs))

    if request.main_class and request.main_class.strip():
        args.append("--main-class=" + request.main_class)

    for option, spec in (
        ("--cmds=", request.cmds_spec()),
        ("--libs=", request.libs_spec()),
        ("--header-files=", request.header_files_spec()),
        ("--legal-notices=", request.legal_notices_spec()),
        ("--man-pages=", request.man_pages_spec()),
    ):
        entries = spec.resolve(base_dir)
        if entries:
            args.append(option + join_path_list(entries))

    modulepath = list(classified.modulepath)
    modulepath.append(abspath(join(java_home, JMODS)))
    args.append("--module-path=" + _escaped(modulepath))

    if request.target_platform is not None:
        args.append("--target-platform=" + request.target_platform)
    if request.warn_if_resolved is not None:
        args.append("--warn-if-resolved=" + request.warn_if_resolved)
    if request.do_not_resolve_by_default:
        args.append("--do-not-resolve-by-default")

    args.append(abspath(dest_archive))
    return CommandLine(executable, args)


def _build_inspect_command(operation: str, archive: str, executable: str) -> CommandLine:
    if not isfile(archive):
        raise ConfigurationError("Unable to find " + abspath(archive))
    return CommandLine(executable, [operation, abspath(archive)])


def build_describe_command(archive: str, executable: str = "jmod") -> CommandLine:
    return _build_inspect_command("describe", archive, executable)


def build_list_command(archive: str, executable: str = "jmod") -> CommandLine:
    return _build_inspect_command("list", archive, executable)
