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
Module resolution for the ``create`` goal.

The jmod tool needs named modules on its module path and everything else on
its class path. Deciding which dependency goes where is delegated to a
:class:`ModuleResolver`. :class:`JdkModuleResolver` implements it with the
JDK's own ``javap`` and ``jar`` tools: the main module descriptor is described
with ``javap``, modular jars with ``jar --describe-module``, and the
``requires`` graph of the main module decides which candidates are needed as
modules.
"""

from __future__ import annotations

__all__ = [
    "ModuleNameSource",
    "JavaModuleDescriptor",
    "ResolvedPaths",
    "ModuleResolver",
    "JdkModuleResolver",
    "get_automatic_module_name",
    "parse_module_description",
    "parse_javap_module_info",
]

import enum
import os
import re
import zipfile
from abc import ABCMeta, abstractmethod
from collections import OrderedDict, deque
from os.path import basename, exists, isdir, isfile, join
from typing import Dict, List, Optional, Sequence

from .errors import ModuleResolutionError
from .support.logging import logv
from .support.processes import LinesOutputCapture, list_to_cmd_line, run
from .support.environment import exe_suffix


class ModuleNameSource(enum.Enum):
    """
    Where the name of a module on the module path comes from.
    """

    MODULEDESCRIPTOR = "MODULEDESCRIPTOR"
    MANIFEST = "MANIFEST"
    FILENAME = "FILENAME"


class JavaModuleDescriptor:
    """
    Describes a Java module. This class mirrors the parts of ``java.lang.module.ModuleDescriptor``
    needed to place modules on the module path.

    :param str name: the name of the module
    :param dict exports: dict from a package defined by this module to the modules it's exported to. An
             empty list denotes an unqualified export.
    :param dict requires: dict from a module dependency to the modifiers of the dependency
    :param bool automatic: specifies if this is an automatic module
    """

    def __init__(self, name, exports=None, requires=None, automatic=False, version=None):
        self.name = name
        self.exports = exports if exports else {}
        self.requires = requires if requires else {}
        self.automatic = automatic
        self.version = version

    def __str__(self):
        return "module:" + self.name

    def __repr__(self):
        return self.__str__()

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        return isinstance(other, JavaModuleDescriptor) and self.name == other.name


class ResolvedPaths:
    """
    The result of a module resolution.

    :param list classpath: entries to be put on the class path, in candidate order
    :param OrderedDict modulepath: entries to be put on the module path, in candidate order,
             mapped to the :class:`ModuleNameSource` of their module name
    :param JavaModuleDescriptor main_descriptor: the descriptor of the module being packaged
    """

    def __init__(self, classpath: List[str], modulepath: Dict[str, ModuleNameSource], main_descriptor: JavaModuleDescriptor):
        self.classpath = classpath
        self.modulepath = modulepath
        self.main_descriptor = main_descriptor


class ModuleResolver(metaclass=ABCMeta):
    @abstractmethod
    def resolve(self, candidates: Sequence[str], descriptor: str, jdk_home: Optional[str]) -> ResolvedPaths:
        """
        Partitions `candidates` into class path and module path entries for the module
        whose compiled descriptor is `descriptor`.

        :param jdk_home: the JDK providing the resolution context, if known
        :raises ModuleResolutionError: if a descriptor or a candidate cannot be read
        """


def get_automatic_module_name(modulejar: str) -> str:
    """
    Derives the name of an automatic module from an automatic module jar according to
    specification of ``java.lang.module.ModuleFinder.of(Path... entries)``.

    :param str modulejar: the path to a jar file treated as an automatic module
    :return: the name of the automatic module derived from `modulejar`
    """
    # Drop directory prefix and .jar (or .zip) suffix
    name = os.path.basename(modulejar)[0:-4]

    # Find first occurrence of -${NUMBER}. or -${NUMBER}$
    m = re.search(r"-(\d+(\.|$))", name)
    if m:
        name = name[0 : m.start()]

    # Finally clean up the module name (see jdk.internal.module.ModulePath.cleanModuleName())
    name = re.sub(r"[^A-Za-z0-9]", ".", name)  # replace non-alphanumeric
    name = re.sub(r"(\.)(\1)+", ".", name)  # collapse repeating dots
    name = re.sub(r"^\.", "", name)  # drop leading dots
    return re.sub(r"\.$", "", name)  # drop trailing dots


def parse_module_description(lines: Sequence[str]) -> JavaModuleDescriptor:
    """
    Parses the output of ``jar --describe-module`` or ``java --describe-module``.

    The first line of the description is ``<name>[@<version>] <location>`` where the location
    is ``automatic`` for automatic modules. Lines preceding it (such as the ``releases:``
    line of a multi-release jar or the note about a derived automatic module) are skipped.
    """
    header = None
    body = []
    for line in lines:
        parts = line.strip().split()
        if not parts:
            continue
        if header is None:
            if len(parts) == 2 and (parts[1] == "automatic" or ":" in parts[1]):
                header = parts
            continue
        body.append(parts)
    if header is None:
        raise ModuleResolutionError("Cannot find module name in module description:\n" + "\n".join(lines))

    name, _, version = header[0].partition("@")
    requires = {}
    exports = {}
    for parts in body:
        if parts[0:2] == ["qualified", "exports"] or parts[0:2] == ["qualified", "opens"]:
            parts = parts[1:]
        a = parts[0]
        if a == "requires":
            requires[parts[1]] = set(parts[2:])
        elif a == "exports":
            if len(parts) > 2:
                if parts[2] != "to":
                    raise ModuleResolutionError("Cannot parse module descriptor line: " + str(parts))
                exports[parts[1]] = parts[3:]
            else:
                exports[parts[1]] = []
        elif a in ("opens", "uses", "provides", "contains", "main-class"):
            pass
        else:
            raise ModuleResolutionError("Cannot parse module descriptor line: " + str(parts))
    return JavaModuleDescriptor(name, exports, requires, automatic=header[1] == "automatic", version=version or None)


_javap_module_re = re.compile(r"^(open\s+)?module\s+([\w.$]+)(@(\S+))?\s*\{$")


def parse_javap_module_info(lines: Sequence[str]) -> JavaModuleDescriptor:
    """
    Parses the output of ``javap module-info.class``.
    """
    name = None
    version = None
    requires = {}
    exports = {}
    for line in lines:
        line = line.strip()
        if not line or line == "}" or line.startswith("Compiled from"):
            continue
        m = _javap_module_re.match(line)
        if m:
            name = m.group(2)
            version = m.group(4)
            continue
        if name is None:
            continue
        parts = line.rstrip(";").replace(",", " ").split()
        a = parts[0]
        if a == "requires":
            # javap puts the modifiers before the module name
            requires[parts[-1]] = set(parts[1:-1])
        elif a == "exports":
            if len(parts) > 2:
                if parts[2] != "to":
                    raise ModuleResolutionError("Cannot parse module descriptor line: " + str(parts))
                exports[parts[1]] = parts[3:]
            else:
                exports[parts[1]] = []
    if name is None:
        raise ModuleResolutionError("Cannot find module declaration in javap output:\n" + "\n".join(lines))
    return JavaModuleDescriptor(name, exports, requires, version=version)


_module_info_re = re.compile(r"^(META-INF/versions/[1-9][0-9]*/)?module-info\.class$")


class JdkModuleResolver(ModuleResolver):
    """
    Resolves module paths with the ``javap`` and ``jar`` tools of a JDK.

    :param str default_jdk_home: the JDK used when :meth:`resolve` is not given one
    """

    def __init__(self, default_jdk_home: Optional[str] = None):
        self.default_jdk_home = default_jdk_home

    def _tool(self, jdk_home: Optional[str], name: str) -> str:
        home = jdk_home or self.default_jdk_home
        if not home:
            raise ModuleResolutionError(f"No JDK available to run {name}")
        return exe_suffix(join(home, "bin", name))

    def _run_tool(self, args: List[str]) -> List[str]:
        out = LinesOutputCapture()
        err = LinesOutputCapture()
        try:
            rc = run(args, out, err)
        except OSError as e:
            raise ModuleResolutionError(f"Error executing: {list_to_cmd_line(args)}{os.linesep}{e}") from e
        if rc != 0:
            out_lines = "\n".join(out.lines)
            err_lines = "\n".join(err.lines)
            raise ModuleResolutionError(f"{list_to_cmd_line(args)} failed with exit code {rc}.\nstdout:\n{out_lines}\nstderr:\n{err_lines}")
        return out.lines

    def describe_module_info(self, module_info: str, jdk_home: Optional[str]) -> JavaModuleDescriptor:
        return parse_javap_module_info(self._run_tool([self._tool(jdk_home, "javap"), module_info]))

    def describe_jar(self, jarpath: str, jdk_home: Optional[str]):
        """
        Describes the module defined by the jar at `jarpath`.

        :return: a tuple of the descriptor and the :class:`ModuleNameSource` of its name
        """
        try:
            with zipfile.ZipFile(jarpath, "r") as zf:
                modular = any(_module_info_re.match(n) for n in zf.namelist())
                automatic_name = None if modular else _read_automatic_module_name(zf)
        except (zipfile.BadZipFile, OSError) as e:
            raise ModuleResolutionError(f"Error reading {jarpath}: {e}") from e

        if modular:
            lines = self._run_tool([self._tool(jdk_home, "jar"), "--describe-module", "--file=" + jarpath])
            return parse_module_description(lines), ModuleNameSource.MODULEDESCRIPTOR
        if automatic_name:
            return JavaModuleDescriptor(automatic_name, automatic=True), ModuleNameSource.MANIFEST
        return JavaModuleDescriptor(get_automatic_module_name(jarpath), automatic=True), ModuleNameSource.FILENAME

    def _describe_candidate(self, candidate: str, jdk_home: Optional[str]):
        if isdir(candidate):
            module_info = join(candidate, "module-info.class")
            if exists(module_info):
                return self.describe_module_info(module_info, jdk_home), ModuleNameSource.MODULEDESCRIPTOR
            return None, None
        if isfile(candidate) and candidate.endswith((".jar", ".zip")):
            return self.describe_jar(candidate, jdk_home)
        return None, None

    def resolve(self, candidates: Sequence[str], descriptor: str, jdk_home: Optional[str]) -> ResolvedPaths:
        main = self.describe_module_info(descriptor, jdk_home)
        described = []
        by_name = {}
        for candidate in candidates:
            jmd, source = self._describe_candidate(candidate, jdk_home)
            described.append((candidate, jmd, source))
            if jmd is not None and jmd.name != main.name and jmd.name not in by_name:
                by_name[jmd.name] = jmd

        # Walk the requires graph starting at the main module. Modules that are
        # not among the candidates are provided by the JDK.
        required = set()
        worklist = deque(main.requires.keys())
        while worklist:
            name = worklist.popleft()
            if name in required or name not in by_name:
                continue
            required.add(name)
            worklist.extend(by_name[name].requires.keys())

        classpath = []
        modulepath = OrderedDict()
        for candidate, jmd, source in described:
            if jmd is not None and jmd.name in required and by_name[jmd.name] is jmd:
                logv(f"[{basename(candidate)} is module {jmd.name} ({source.name})]")
                modulepath[candidate] = source
            else:
                classpath.append(candidate)
        return ResolvedPaths(classpath, modulepath, main)


def _read_automatic_module_name(zf: zipfile.ZipFile) -> Optional[str]:
    try:
        manifest = zf.read("META-INF/MANIFEST.MF").decode("utf-8", errors="replace")
    except KeyError:
        return None
    # Continuation lines start with a single space
    manifest = manifest.replace("\r\n", "\n").replace("\n ", "")
    for line in manifest.split("\n"):
        key, sep, value = line.partition(":")
        if sep and key.strip() == "Automatic-Module-Name":
            return value.strip()
    return None
