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

__all__ = ["ClassifiedPaths", "classify", "find_module_descriptor", "MODULE_INFO_CLASS"]

from os.path import dirname, isdir, isfile, join
from typing import List, Optional, Sequence

from .errors import ModuleResolutionError
from .javamodules import JdkModuleResolver, ModuleNameSource, ModuleResolver
from .support.logging import BuildLog

MODULE_INFO_CLASS = "module-info.class"


class ClassifiedPaths:
    """
    Class path and module path entries for ``jmod create``.

    :param list classpath: class path entries in order
    :param list modulepath: module path directories in order
    :param list automatic_modules: module path entries whose module name was derived from
             their file name, in the order the resolver reported them
    :param bool exports_declared: whether the main module descriptor exports any package
    :param ModuleResolutionError resolution_error: the error that made the classification
             fall back to empty paths, if any
    """

    def __init__(
        self,
        classpath: List[str],
        modulepath: List[str],
        automatic_modules: Optional[List[str]] = None,
        exports_declared: bool = False,
        resolution_error: Optional[ModuleResolutionError] = None,
    ):
        self.classpath = classpath
        self.modulepath = modulepath
        self.automatic_modules = automatic_modules if automatic_modules else []
        self.exports_declared = exports_declared
        self.resolution_error = resolution_error

    @property
    def uses_automatic_modules(self) -> bool:
        return len(self.automatic_modules) != 0

    def __repr__(self):
        return f"ClassifiedPaths(classpath={self.classpath}, modulepath={self.modulepath})"


def _candidates(output_dir: str, dependency_artifacts: Sequence[str]) -> List[str]:
    result = []
    if isdir(output_dir):
        result.append(output_dir)
    result.extend(dependency_artifacts)
    return result


def classify(
    output_dir: str,
    dependency_artifacts: Sequence[str],
    module_descriptor: Optional[str] = None,
    resolver: Optional[ModuleResolver] = None,
    jdk_home: Optional[str] = None,
    buildlog: Optional[BuildLog] = None,
) -> ClassifiedPaths:
    """
    Decides which of the compiled classes in `output_dir` and the `dependency_artifacts`
    go on the class path and which on the module path.

    Without a `module_descriptor` everything is put on the class path. Otherwise the
    partitioning is done by `resolver`, by default a :class:`JdkModuleResolver` for
    `jdk_home`. A resolver failure is reported as a warning and yields empty paths so
    that the archive can still be created.
    """
    buildlog = buildlog or BuildLog()
    candidates = _candidates(output_dir, dependency_artifacts)

    if module_descriptor is None:
        return ClassifiedPaths(list(candidates), [])

    if resolver is None:
        resolver = JdkModuleResolver(jdk_home)
    try:
        resolved = resolver.resolve(candidates, module_descriptor, jdk_home)
    except ModuleResolutionError as e:
        buildlog.warn(str(e))
        return ClassifiedPaths([], [], resolution_error=e)

    automatic_modules = []
    for path, source in resolved.modulepath.items():
        buildlog.debug(f"File: {path} {source.name}")
        if source is ModuleNameSource.FILENAME:
            automatic_modules.append(path)

    classpath = []
    for path in resolved.classpath:
        buildlog.debug(f"classpathElements: File: {path}")
        classpath.append(path)

    modulepath = []
    for path in resolved.modulepath:
        buildlog.debug(f"modulepathElements: File: {path}")
        # jmod only accepts directories on its module path
        modulepath.append(path if isdir(path) else dirname(path))

    return ClassifiedPaths(
        classpath,
        modulepath,
        automatic_modules=automatic_modules,
        exports_declared=len(resolved.main_descriptor.exports) != 0,
    )


def find_module_descriptor(output_dir: str) -> Optional[str]:
    """
    Returns the path of the compiled module descriptor in `output_dir`, if there is one.
    """
    module_info = join(output_dir, MODULE_INFO_CLASS)
    if isfile(module_info):
        return module_info
    return None
