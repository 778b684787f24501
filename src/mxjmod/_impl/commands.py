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

__all__ = ["JModCommands", "JModCommand", "command", "jmod_commands"]

from typing import Callable, Dict, List, Optional


class JModCommands:
    def __init__(self, prog: str):
        self._prog = prog
        self._commands: Dict[str, JModCommand] = {}

    @property
    def prog(self) -> str:
        return self._prog

    def commands(self) -> Dict[str, JModCommand]:
        return self._commands.copy()

    def list_commands(self, names: List[str]) -> str:
        msg = ""
        for cmd in names:
            doc = self._commands[cmd].command_function.__doc__
            if doc is None:
                doc = ""
            doc_lines = doc.split("\n", 1)[0]
            msg += f" {cmd:<20} {doc_lines}\n"
        return msg

    def format_commands(self) -> str:
        return "\navailable commands:\n" + self.list_commands(sorted(self._commands.keys())) + "\n"

    def command_function(self, name: str, fatal_if_missing: bool = True) -> Optional[JModCommand]:
        """
        Return the command named `name`. A unique prefix of a command name selects that command.
        If no such command, abort if `fatal_if_missing` is True, else return None
        """
        if name in self._commands:
            return self._commands[name]
        hits = [c for c in self._commands if c.startswith(name)]
        if len(hits) == 1:
            return self._commands[hits[0]]
        if fatal_if_missing:
            from .support.logging import abort

            if len(hits) == 0:
                abort(f"{self._prog}: unknown command '{name}'\n{self.format_commands()}use \"{self._prog} help\" for more options")
            abort(f"{self._prog}: command '{name}' is ambiguous\n    {' '.join(hits)}")
        return None

    def add_commands(self, new_commands: List[JModCommand]) -> None:
        for jmod_command in new_commands:
            assert jmod_command.command not in self._commands, jmod_command.command
            self._commands[jmod_command.command] = jmod_command


class JModCommand:
    def __init__(self, jmod_commands: JModCommands, command_function: Callable, command: str, usage_msg: str = ""):
        self._jmod_commands = jmod_commands
        self._command_function = command_function
        self.command = command
        self.usage_msg = usage_msg

    @property
    def command_function(self) -> Callable:
        return self._command_function

    def get_doc(self) -> str:
        doc = self._jmod_commands.prog + " {0} {1}"
        msg = "<no documentation>"
        if self.command_function.__doc__ or self.usage_msg:
            msg = ""
            if self.usage_msg:
                msg += self.usage_msg
            if self.command_function.__doc__:
                msg += "\n\n" + self.command_function.__doc__
        return doc.format(self.command, msg)

    def __call__(self, *args, **kwargs):
        return self.command_function(*args, **kwargs)


jmod_commands = JModCommands("mxjmod")


def command(command_name: str, usage_msg: str = "", auto_add: bool = True):
    """
    Decorator for making a function an mxjmod command.

    The annotated function should have a single parameter typed List[String].

    :param command_name: the command name. Will be used in the shell command.
    :param usage_msg: message to display usage.
    :param auto_add: automatically add it to the commands.
    :return: the decorator factory for the function.
    """

    def jmod_command_decorator_factory(command_func):
        jmod_command = JModCommand(jmod_commands, command_func, command_name, usage_msg)
        if auto_add:
            jmod_commands.add_commands([jmod_command])
        return jmod_command

    return jmod_command_decorator_factory
