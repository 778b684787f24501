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
"""Reading the project to package from a Maven ``pom.xml``.

A project directory does not need a ``pom.xml``: without one the artifact id
is the directory name and the standard Maven layout is assumed (``target``
as build directory, ``target/classes`` for the compiled classes). With one,
the coordinates and the build directories are taken from it, together with the
``<configuration>`` of the ``maven-jmod-plugin``, so that a project built with
Maven can be packaged with the same settings::

    <plugin>
      <artifactId>maven-jmod-plugin</artifactId>
      <configuration>
        <mainClass>com.example.Main</mainClass>
        <cmds><cmd>src/main/bin</cmd></cmds>
      </configuration>
    </plugin>

Dependencies are not resolved; only ``system`` scoped dependencies, which name
their jar with ``<systemPath>``, are taken from the pom. All other artifacts
have to be passed on the command line.
"""

from __future__ import annotations

import re
from os.path import abspath, basename, exists, isfile, join
from typing import Callable, Dict, List, Optional, cast
from xml.etree.ElementTree import Element

from defusedxml.ElementTree import parse as etreeParse

from .errors import ArtifactConflictError, ConfigurationError
from .request import ArchiveRequest
from .support.logging import logv

__all__ = [
    "ETMavenPOM",
    "JModProject",
    "PropertySubstitution",
    "request_from_configuration",
]

JMOD_PLUGIN_ARTIFACT_ID = "maven-jmod-plugin"


class ETMavenPOM:
    """
    A convenience wrapper around ElementTree Elements for
    use with Maven's pom.xml files.
    """

    DefaultNamespace = "http://maven.apache.org/POM/4.0.0"

    def __init__(self, path: str):
        self._path = path
        try:
            self._pom = etreeParse(path)
        except Exception as e:  # pylint: disable=broad-except
            # defusedxml raises its own exceptions for forbidden constructs
            raise ConfigurationError(f"Cannot parse {path}: {e}") from e
        self._element: Element = self._pom.getroot()
        self._namespaces = {"": self.DefaultNamespace} if self._element.tag.startswith("{") else None

    @property
    def path(self) -> str:
        return self._path

    @property
    def text(self) -> Optional[str]:
        return self._element.text

    def get_text(self, path: str, default: str = "") -> str:
        """
        Return the text content of the child element named 'path', or the default if that element does not exist.
        """
        try:
            return cast(str, self[path].text or "").strip()
        except KeyError:
            return default

    def get(self, path: str, default: None | ETMavenPOM = None) -> None | ETMavenPOM:
        """
        Get an existing child element or return the default argument.
        """
        try:
            return self[path]
        except KeyError:
            return default

    def getall(self, path: str) -> list[ETMavenPOM]:
        """
        Get all child elements matching 'path'.
        """
        return [self._wrap(e) for e in self._element.findall(path, namespaces=self._namespaces)]

    def children(self) -> list[ETMavenPOM]:
        return [self._wrap(e) for e in self._element]

    @property
    def localname(self) -> str:
        return self._element.tag.rpartition("}")[2]

    def _wrap(self, e: Element) -> ETMavenPOM:
        result = self.__class__.__new__(self.__class__)
        result._path = self._path  # pylint: disable=protected-access
        result._pom = self._pom  # pylint: disable=protected-access
        result._element = e  # pylint: disable=protected-access
        result._namespaces = self._namespaces  # pylint: disable=protected-access
        return result

    def __getitem__(self, path: str) -> ETMavenPOM:
        if (e := self._element.find(path, namespaces=self._namespaces)) is not None:
            return self._wrap(e)
        raise KeyError(path)


class PropertySubstitution:
    """
    Replaces ``${name}`` references with registered values. Unknown references
    are left untouched.
    """

    def __init__(self):
        self._subst: Dict[str, str | Callable[[], Optional[str]]] = {}

    def register(self, var: str, value) -> None:
        self._subst[var] = value

    def _replace(self, m) -> str:
        var = m.group(1)
        if var in self._subst:
            value = self._subst[var]
            if callable(value):
                value = value()
            if value is not None:
                return value
        return m.group(0)

    def substitute(self, string: Optional[str]) -> Optional[str]:
        if string is None:
            return None
        return re.sub(r"\$\{([\w.\-]+)\}", self._replace, string)


class JModProject:  # pylint: disable=too-many-instance-attributes
    """
    The project being packaged: its coordinates, directories and dependency artifacts.
    A project has at most one artifact attached; ``create`` attaches the archive it produced.
    """

    def __init__(
        self,
        base_dir: str,
        artifact_id: str,
        version: Optional[str] = None,
        group_id: Optional[str] = None,
        build_directory: Optional[str] = None,
        output_directory: Optional[str] = None,
        dependencies: Optional[List[str]] = None,
        pom: Optional[ETMavenPOM] = None,
    ):  # pylint: disable=too-many-arguments
        self.base_dir = abspath(base_dir)
        self.artifact_id = artifact_id
        self.version = version
        self.group_id = group_id
        self.build_directory = join(self.base_dir, build_directory or "target")
        self.output_directory = join(self.base_dir, output_directory or join(self.build_directory, "classes"))
        self.dependencies = list(dependencies or [])
        self.pom = pom
        self.artifact_file: Optional[str] = None
        self.substitutions = PropertySubstitution()
        self.substitutions.register("project.artifactId", lambda: self.artifact_id)
        self.substitutions.register("project.groupId", lambda: self.group_id)
        self.substitutions.register("project.version", lambda: self.version)
        self.substitutions.register("project.basedir", lambda: self.base_dir)
        self.substitutions.register("basedir", lambda: self.base_dir)
        self.substitutions.register("project.build.directory", lambda: self.build_directory)
        self.substitutions.register("project.build.outputDirectory", lambda: self.output_directory)

    def __str__(self):
        return f"{self.group_id or '<none>'}:{self.artifact_id}:{self.version or '<none>'}"

    @staticmethod
    def load(base_dir: str) -> JModProject:
        """
        Creates the project for the directory `base_dir`, reading its ``pom.xml`` if there is one.
        """
        pom_path = join(base_dir, "pom.xml")
        if not exists(pom_path):
            logv(f"[no pom.xml in {base_dir}, assuming the standard layout]")
            return JModProject(base_dir, basename(abspath(base_dir)))

        pom = ETMavenPOM(pom_path)
        artifact_id = pom.get_text("artifactId")
        if not artifact_id:
            raise ConfigurationError(f"{pom_path} does not define an artifactId")
        parent = pom.get("parent")
        group_id = pom.get_text("groupId") or (parent.get_text("groupId") if parent else "") or None
        version = pom.get_text("version") or (parent.get_text("version") if parent else "") or None

        project = JModProject(base_dir, artifact_id, version=version, group_id=group_id, pom=pom)
        if (properties := pom.get("properties")) is not None:
            for prop in properties.children():
                project.substitutions.register(prop.localname, (prop.text or "").strip())

        build = pom.get("build")
        if build is not None:
            if build_directory := build.get_text("directory"):
                project.build_directory = join(project.base_dir, project.substitutions.substitute(build_directory))
                project.output_directory = join(project.build_directory, "classes")
            if output_directory := build.get_text("outputDirectory"):
                project.output_directory = join(project.base_dir, project.substitutions.substitute(output_directory))

        if (dependencies := pom.get("dependencies")) is not None:
            for dependency in dependencies.getall("dependency"):
                system_path = dependency.get_text("systemPath")
                if dependency.get_text("scope") == "system" and system_path:
                    project.dependencies.append(join(project.base_dir, project.substitutions.substitute(system_path)))
                else:
                    logv(f"[ignoring unresolved dependency {dependency.get_text('groupId')}:{dependency.get_text('artifactId')}]")

        # a jar (or other archive) already built for this project is its main artifact
        packaging = pom.get_text("packaging", "jar")
        if packaging != "jmod":
            final_name = (build.get_text("finalName") if build is not None else "") or (
                f"{artifact_id}-{version}" if version else artifact_id
            )
            main_artifact = join(project.build_directory, f"{project.substitutions.substitute(final_name)}.{packaging}")
            if isfile(main_artifact):
                logv(f"[project artifact: {main_artifact}]")
                project.artifact_file = main_artifact
        return project

    def jmod_plugin_configuration(self) -> Optional[ETMavenPOM]:
        """
        Gets the ``<configuration>`` element of the maven-jmod-plugin in the pom, if any.
        """
        if self.pom is None:
            return None
        for plugin in self.pom.getall("build/plugins/plugin"):
            if plugin.get_text("artifactId") == JMOD_PLUGIN_ARTIFACT_ID:
                return plugin.get("configuration")
        return None

    @property
    def jmods_directory(self) -> str:
        return join(self.build_directory, "jmods")

    def default_jmod_file(self) -> str:
        return join(self.jmods_directory, self.artifact_id + ".jmod")

    def has_artifact(self) -> bool:
        return self.artifact_file is not None and isfile(self.artifact_file)

    def check_no_artifact(self) -> None:
        """
        :raises ArtifactConflictError: if an artifact is already attached to this project
        """
        if self.has_artifact():
            raise ArtifactConflictError(
                "You have to use a classifier to attach supplemental artifacts to the project instead of replacing them."
            )

    def attach_artifact(self, path: str) -> None:
        self.check_no_artifact()
        self.artifact_file = path


def _list_parameter(configuration: ETMavenPOM, name: str, substitutions: PropertySubstitution) -> List[str]:
    section = configuration.get(name)
    if section is None:
        return []
    return [cast(str, substitutions.substitute((e.text or "").strip())) for e in section.children() if (e.text or "").strip()]


def _scalar_parameter(configuration: Optional[ETMavenPOM], name: str, substitutions: PropertySubstitution) -> Optional[str]:
    if configuration is None:
        return None
    element = configuration.get(name)
    if element is None or element.text is None:
        return None
    return substitutions.substitute(element.text.strip())


def request_from_configuration(project: JModProject) -> ArchiveRequest:
    """
    Creates the archive request configured for `project` in its pom.

    ``moduleVersion`` defaults to the project version as in the maven-jmod-plugin.
    """
    configuration = project.jmod_plugin_configuration()
    subst = project.substitutions
    module_version = _scalar_parameter(configuration, "moduleVersion", subst)
    if module_version is None:
        module_version = project.version
    request = ArchiveRequest(
        module_version=module_version,
        main_class=_scalar_parameter(configuration, "mainClass", subst),
        target_platform=_scalar_parameter(configuration, "targetPlatform", subst),
        warn_if_resolved=_scalar_parameter(configuration, "warnIfResolved", subst),
        do_not_resolve_by_default=(_scalar_parameter(configuration, "doNotResolveByDefault", subst) or "false").lower() == "true",
    )
    if configuration is not None:
        request.excludes = _list_parameter(configuration, "excludes", subst)
        request.cmds = _list_parameter(configuration, "cmds", subst)
        request.configs = _list_parameter(configuration, "configs", subst)
        request.libs = _list_parameter(configuration, "libs", subst)
        request.header_files = _list_parameter(configuration, "headerFiles", subst)
        request.man_pages = _list_parameter(configuration, "manPages", subst)
        request.legal_notices = _list_parameter(configuration, "legalNotices", subst)
    return request
