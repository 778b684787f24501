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
The mxjmod command line.

Global options are parsed by :class:`ArgParser`; everything after the command
name is handed to the command, which parses its own arguments. Options given on
the command line take precedence over the ``maven-jmod-plugin`` configuration
in the project's ``pom.xml``.
"""

from __future__ import annotations

__all__ = ["ArgParser", "main", "version"]

import os
import sys
from argparse import REMAINDER, ArgumentParser, HelpFormatter, Namespace
from os.path import abspath
from typing import List, Optional

from . import goals
from .commands import command, jmod_commands
from .errors import JModError
from .mavenproject import JModProject, request_from_configuration
from .request import WARN_IF_RESOLVED_VALUES, ArchiveRequest
from .support.logging import abort, log
from .support.options import _opts, update_opts

version = "1.0.0"


class ArgParser(ArgumentParser):
    # Override parent to append the list of available commands
    def format_help(self):
        return (
            ArgumentParser.format_help(self)
            + """
environment variables:
  JAVA_HOME             JDK containing the jmod executable. Can be overridden with --java-home option.
  MXJMOD_JAVA_HOME      Takes precedence over JAVA_HOME.
  CI                    Print a stack trace when aborting.
"""
            + jmod_commands.format_commands()
        )

    def __init__(self):
        ArgumentParser.__init__(
            self, prog="mxjmod", formatter_class=lambda prog: HelpFormatter(prog, max_help_position=32, width=120)
        )
        self.add_argument("-v", action="store_true", dest="verbose", help="enable verbose output")
        self.add_argument("-V", action="store_true", dest="very_verbose", help="enable very verbose output")
        self.add_argument("--no-warning", action="store_false", dest="warn", help="disable warning messages")
        self.add_argument("--quiet", action="store_true", help="disable log messages")
        self.add_argument("--java-home", help="JDK directory containing bin/jmod", metavar="<path>")
        self.add_argument("-p", "--project-dir", help="set the project directory", metavar="<path>")
        self.add_argument("--version", action="store_true", help="print version and exit")
        self.add_argument("commandAndArgs", nargs=REMAINDER, metavar="command args...")

    def parse_cmd_line(self, args: List[str]) -> List[str]:
        """
        Parses the global options into the global option namespace and returns the command and its arguments.
        """
        opts = self.parse_args(args, namespace=Namespace())
        command_and_args = opts.__dict__.pop("commandAndArgs")
        update_opts(opts)
        return command_and_args


_argParser = ArgParser()


def _load_project() -> JModProject:
    return JModProject.load(_opts.project_dir or os.getcwd())


def _add_jmod_file_argument(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--jmod-file",
        dest="jmod_file",
        help="the jmod file to read (default <build dir>/jmods/<artifactId>.jmod)",
        metavar="<file>",
    )


def _apply_overrides(request: ArchiveRequest, parsed: Namespace) -> None:
    for name in ("module_version", "main_class", "target_platform", "warn_if_resolved"):
        value = getattr(parsed, name)
        if value is not None:
            setattr(request, name, value)
    if parsed.do_not_resolve_by_default:
        request.do_not_resolve_by_default = True
    for name in ("excludes", "cmds", "configs", "libs", "header_files", "legal_notices", "man_pages"):
        values = getattr(parsed, name)
        if values:
            setattr(request, name, values)


@command("create", "[options]")
def create(args):
    """create a jmod file from the compiled classes and dependencies of the project"""
    parser = ArgumentParser(prog="mxjmod create")
    parser.add_argument("--module-version", help="the module version recorded in the jmod file", metavar="<version>")
    parser.add_argument("--main-class", help="the main class of the module", metavar="<class>")
    parser.add_argument("--target-platform", help="the target platform, e.g. linux-x64", metavar="<platform>")
    parser.add_argument(
        "--warn-if-resolved",
        help="emit a warning if the module is resolved (" + ", ".join(WARN_IF_RESOLVED_VALUES) + ")",
        metavar="<reason>",
    )
    parser.add_argument("--do-not-resolve-by-default", action="store_true", help="exclude the module from the default root set")
    parser.add_argument("--exclude", action="append", dest="excludes", default=[], help="exclude files matching the pattern", metavar="<pattern>")
    parser.add_argument("--cmd", action="append", dest="cmds", default=[], help="directory with native commands", metavar="<dir>")
    parser.add_argument("--config", action="append", dest="configs", default=[], help="directory with user editable configuration files", metavar="<dir>")
    parser.add_argument("--lib", action="append", dest="libs", default=[], help="directory with native libraries", metavar="<dir>")
    parser.add_argument("--header-file", action="append", dest="header_files", default=[], help="directory with header files", metavar="<dir>")
    parser.add_argument("--legal-notice", action="append", dest="legal_notices", default=[], help="directory with legal notices", metavar="<dir>")
    parser.add_argument("--man-page", action="append", dest="man_pages", default=[], help="directory with man pages", metavar="<dir>")
    parser.add_argument("--dependency", action="append", default=[], help="a dependency jar or directory", metavar="<path>")
    parser.add_argument("--cp", help="dependencies separated by '" + os.pathsep + "'", metavar="<path list>")
    parser.add_argument("--classes", help="directory with the compiled classes (default <build dir>/classes)", metavar="<dir>")
    parser.add_argument("--artifact-id", help="the artifact id naming the jmod file", metavar="<id>")
    parsed = parser.parse_args(args)

    project = _load_project()
    if parsed.artifact_id:
        project.artifact_id = parsed.artifact_id
    if parsed.classes:
        project.output_directory = abspath(parsed.classes)
    dependencies = list(parsed.dependency)
    if parsed.cp:
        dependencies += [e for e in parsed.cp.split(os.pathsep) if e]
    project.dependencies += [abspath(d) for d in dependencies]

    request = request_from_configuration(project)
    _apply_overrides(request, parsed)
    goals.create(project, request)


@command("describe", "[--jmod-file <file>]")
def describe(args):
    """print the module descriptor of a jmod file"""
    parser = ArgumentParser(prog="mxjmod describe")
    _add_jmod_file_argument(parser)
    parsed = parser.parse_args(args)
    return goals.describe(_load_project(), jmod_file=parsed.jmod_file)


@command("list", "[--jmod-file <file>]")
def list_(args):
    """list the entries of a jmod file"""
    parser = ArgumentParser(prog="mxjmod list")
    _add_jmod_file_argument(parser)
    parsed = parser.parse_args(args)
    return goals.list_(_load_project(), jmod_file=parsed.jmod_file)


@command("help", "[command]")
def help_(args):
    """show detailed help for mxjmod or a given command

With no arguments, print a list of commands and short help for each command.

Given a command name, print help for that command."""
    if len(args) == 0:
        _argParser.print_help()
        return
    log(jmod_commands.command_function(args[0]).get_doc())


def main(args: Optional[List[str]] = None) -> None:
    if args is None:
        args = sys.argv[1:]
    # make sure logv, logvv and warn work as early as possible
    _opts.__dict__["verbose"] = "-v" in args or "-V" in args
    _opts.__dict__["very_verbose"] = "-V" in args
    _opts.__dict__["warn"] = "--no-warning" not in args
    _opts.__dict__["quiet"] = "--quiet" in args

    commandAndArgs = _argParser.parse_cmd_line(args)
    if _opts.version:
        print("mxjmod version " + version)
        return

    if len(commandAndArgs) == 0:
        _argParser.print_help()
        return

    c = jmod_commands.command_function(commandAndArgs[0])
    try:
        retcode = c(commandAndArgs[1:])
    except JModError as e:
        abort(e.exit_code, context=str(e))
    except KeyboardInterrupt:
        # no need to show the stack trace when the user presses CTRL-C
        abort(1)
    if retcode is not None and retcode != 0:
        abort(retcode)


def _main_wrapper():
    main()


if __name__ == "__main__":
    _main_wrapper()
