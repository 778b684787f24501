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
The mxjmod package.

Creates, describes and lists JDK module (jmod) files by driving the JDK's
``jmod`` tool, in the manner of the maven-jmod-plugin.

DO NOT WRITE IMPLEMENTATION CODE HERE.
"""

from ._impl.errors import *
from ._impl.classifier import ClassifiedPaths, classify, find_module_descriptor
from ._impl.commandline import CommandLine, build_create_command, build_describe_command, build_list_command
from ._impl.goals import create, describe, list_
from ._impl.javamodules import JavaModuleDescriptor, JdkModuleResolver, ModuleNameSource, ModuleResolver, ResolvedPaths
from ._impl.mavenproject import JModProject, request_from_configuration
from ._impl.pathlists import PathListSpec, resolve_path_list, validate_path_lists
from ._impl.request import ArchiveRequest
from ._impl.support.logging import BuildLog
from ._impl.support.processes import execute
from ._impl.toolchain import JDKConfig, find_jmod_executable

from ._impl import errors as _errors

__all__ = [
    "ClassifiedPaths",
    "classify",
    "find_module_descriptor",
    "CommandLine",
    "build_create_command",
    "build_describe_command",
    "build_list_command",
    "create",
    "describe",
    "list_",
    "JavaModuleDescriptor",
    "JdkModuleResolver",
    "ModuleNameSource",
    "ModuleResolver",
    "ResolvedPaths",
    "JModProject",
    "request_from_configuration",
    "PathListSpec",
    "resolve_path_list",
    "validate_path_lists",
    "ArchiveRequest",
    "BuildLog",
    "execute",
    "JDKConfig",
    "find_jmod_executable",
]
__all__ += _errors.__all__
