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
The ``create``, ``describe`` and ``list`` goals.

Each goal locates the jmod executable, checks its inputs and runs a single
jmod process. Failures are raised as :class:`JModError` subclasses.
"""

from __future__ import annotations

__all__ = ["create", "describe", "list_", "AUTOMATIC_MODULES_MESSAGE"]

from os.path import dirname, isdir, join
from typing import Optional

from .classifier import classify, find_module_descriptor
from .commandline import JMODS, build_create_command, build_describe_command, build_list_command
from .javamodules import ModuleResolver
from .mavenproject import JModProject
from .pathlists import validate_path_lists
from .request import ArchiveRequest
from .support.logging import BuildLog, write_boxed_warning
from .support.path import delete_if_exists, ensure_dir_exists
from .support.processes import ReturnCode, execute
from .toolchain import find_jmod_executable

AUTOMATIC_MODULES_MESSAGE = "Required filename-based automodules detected. Please don't publish this project to a public artifact repository!"
RESOLUTION_FAILED_MESSAGE = "Module resolution failed. The class path and module path are left empty!"


def _java_home(jmod: str) -> str:
    # <java home>/bin/jmod
    return dirname(dirname(jmod))


def _working_directory(project: JModProject) -> str:
    if isdir(project.build_directory):
        return project.build_directory
    return project.base_dir


def create(
    project: JModProject,
    request: ArchiveRequest,
    resolver: Optional[ModuleResolver] = None,
    jmod_executable: Optional[str] = None,
    buildlog: Optional[BuildLog] = None,
) -> str:
    """
    Creates ``<build dir>/jmods/<artifactId>.jmod`` from the compiled classes and the
    dependencies of `project` and attaches it as the project artifact.

    :return: the path of the created archive
    """
    buildlog = buildlog or BuildLog()
    jmod = jmod_executable or find_jmod_executable()
    buildlog.debug(f"Toolchain: jmod [ {jmod} ]")
    java_home = _java_home(jmod)
    buildlog.debug("Parent: " + java_home)
    buildlog.debug("jmodsFolder: " + join(java_home, JMODS))

    request.check_warn_if_resolved(buildlog)
    validate_path_lists(request.path_list_specs(), project.base_dir, buildlog)
    project.check_no_artifact()

    classified = classify(
        project.output_directory,
        project.dependencies,
        module_descriptor=find_module_descriptor(project.output_directory),
        resolver=resolver,
        jdk_home=java_home,
        buildlog=buildlog,
    )
    if classified.resolution_error is not None:
        write_boxed_warning(buildlog, RESOLUTION_FAILED_MESSAGE)
    if classified.uses_automatic_modules:
        if classified.exports_declared:
            write_boxed_warning(buildlog, AUTOMATIC_MODULES_MESSAGE)
        else:
            buildlog.info(AUTOMATIC_MODULES_MESSAGE)
        buildlog.info("First filename-based automodule: " + classified.automatic_modules[0])

    jmod_file = project.default_jmod_file()
    delete_if_exists(jmod_file, buildlog)
    ensure_dir_exists(project.jmods_directory)

    cmd = build_create_command(
        request,
        classified,
        project.output_directory,
        jmod_file,
        java_home,
        project.base_dir,
        executable=jmod,
    )
    execute(cmd, project.build_directory, buildlog)
    project.attach_artifact(jmod_file)
    return jmod_file


def describe(
    project: JModProject,
    jmod_file: Optional[str] = None,
    jmod_executable: Optional[str] = None,
    buildlog: Optional[BuildLog] = None,
) -> ReturnCode:
    """
    Prints the module descriptor stored in `jmod_file`, by default the archive ``create`` produces.
    """
    buildlog = buildlog or BuildLog()
    jmod = jmod_executable or find_jmod_executable()
    jmod_file = jmod_file or project.default_jmod_file()
    cmd = build_describe_command(jmod_file, executable=jmod)
    buildlog.info("The following information is contained in the module file " + cmd.arguments[-1])
    return execute(cmd, _working_directory(project), buildlog)


def list_(
    project: JModProject,
    jmod_file: Optional[str] = None,
    jmod_executable: Optional[str] = None,
    buildlog: Optional[BuildLog] = None,
) -> ReturnCode:
    """
    Prints the names of all entries in `jmod_file`, by default the archive ``create`` produces.
    """
    buildlog = buildlog or BuildLog()
    jmod = jmod_executable or find_jmod_executable()
    cmd = build_list_command(jmod_file or project.default_jmod_file(), executable=jmod)
    return execute(cmd, _working_directory(project), buildlog)
