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
Console output.

Everything printed goes through the functions of this module so that the
global options apply uniformly: ``--quiet`` silences all but errors, ``-v``
and ``-V`` enable the verbose levels, ``--no-warning`` drops warnings.
Errors and warnings go to stderr and are colored when it is a terminal.
"""

from __future__ import annotations

__all__ = [
    "abort",
    "log",
    "logv",
    "logvv",
    "log_error",
    "colorize",
    "warn",
    "BuildLog",
    "write_boxed_warning",
]

import sys
import traceback
from typing import NoReturn, Optional

from .environment import is_continuous_integration, is_windows
from .options import _opts

# https://en.wikipedia.org/wiki/ANSI_escape_code#Colors
_ansi_colors = {"red": 31, "green": 32, "yellow": 33, "magenta": 35, "cyan": 36}


def colorize(msg: Optional[str], color="red", bright=True, stream=None) -> Optional[str]:
    """
    Wraps `msg` in the ANSI escape sequences for `color` if `stream` (default stderr)
    is a terminal that understands them.
    """
    if msg is None:
        return None
    stream = stream or sys.stderr
    if is_windows() or not (hasattr(stream, "isatty") and stream.isatty()):
        return msg
    code = f"{_ansi_colors[color]};1" if bright else str(_ansi_colors[color])
    return f"\033[{code}m{msg}\033[0m"


def _emit(msg: Optional[str], file, end: str) -> None:
    print("" if msg is None else msg, end=end, file=file or sys.stdout)


def _context_message(context) -> str:
    return context() if callable(context) else str(context)


def log(msg: Optional[str] = None, end: str = "\n", file=None) -> None:
    """
    Write a message to the console unless ``--quiet`` is given.
    """
    if not _opts.quiet:
        _emit(msg, file, end)


def logv(msg: Optional[str] = None, end: str = "\n") -> None:
    if _opts.verbose:
        log(msg, end=end)


def logvv(msg: Optional[str] = None, end: str = "\n") -> None:
    if _opts.very_verbose:
        log(msg, end=end)


def log_error(msg: Optional[str] = None, end: str = "\n") -> None:
    _emit(colorize(msg, stream=sys.stderr), sys.stderr, end)


def warn(msg: str, context=None) -> None:
    if not _opts.warn or _opts.quiet:
        return
    if context is not None:
        msg = _context_message(context) + ":\n" + msg
    _emit(colorize("WARNING: " + msg, color="magenta", stream=sys.stderr), sys.stderr, "\n")


def abort(codeOrMessage: str | int, context=None) -> NoReturn:
    """
    Aborts the program with a SystemExit exception.

    An integer `codeOrMessage` is the exit status. Anything else is printed as an
    error and the exit status is 1. `context`, or its result if it is callable,
    is printed before the message.
    """
    sys.stdout.flush()
    if _opts.very_verbose or is_continuous_integration():
        traceback.print_stack()
    context_message = _context_message(context) if context is not None else ""
    if isinstance(codeOrMessage, int):
        error_message, error_code = context_message, codeOrMessage
    else:
        error_message = f"{context_message}:\n{codeOrMessage}" if context_message else codeOrMessage
        error_code = 1
    if error_message:
        log_error(error_message)
    raise SystemExit(error_code)


class BuildLog:
    """
    The log sink handed to the goals and their components.

    Maps the usual build log levels onto the console functions above: debug
    output is only shown with ``-v``, warnings honour ``--no-warning``.
    """

    def debug(self, msg: str) -> None:
        logv(msg)

    def info(self, msg: str) -> None:
        log(msg)

    def warn(self, msg: str) -> None:
        warn(msg)

    def error(self, msg: str) -> None:
        log_error(msg)


def write_boxed_warning(buildlog: BuildLog, message: str) -> None:
    line = "*" * (len(message) + 4)
    buildlog.warn(line)
    buildlog.warn("* " + message + " *")
    buildlog.warn(line)
