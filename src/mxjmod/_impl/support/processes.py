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

__all__ = ["LinesOutputCapture", "execute", "list_to_cmd_line", "run", "waitOn"]

import os, shlex, signal, subprocess, time
from threading import Thread
from typing import Callable, List, Sequence

from .logging import logvv
from .environment import is_windows
from ..errors import ExecutionError, ToolNotFoundError

Args = Sequence[str]
ReturnCode = int
OutputCallback = Callable[[str], None]


class LinesOutputCapture:
    def __init__(self):
        self.lines = []

    def __call__(self, data):
        self.lines.append(data.rstrip())

    def __repr__(self):
        return os.linesep.join(self.lines)


def list_to_cmd_line(args: Args) -> str:
    return subprocess.list2cmdline(args) if is_windows() else " ".join(shlex.quote(arg) for arg in args)


def waitOn(p: subprocess.Popen) -> ReturnCode:
    if is_windows():
        # on windows use a poll loop, otherwise signal does not get handled
        retcode = None
        while retcode is None:
            retcode = p.poll()
            time.sleep(0.05)
    else:
        retcode = p.wait()
    return retcode


def run(args: List[str], out: OutputCallback, err: OutputCallback, cwd=None, env=None) -> ReturnCode:
    """
    Run a command in a subprocess, wait for it to complete and return the exit status of the process.

    Both output streams are drained by separate threads while the process runs, calling
    `out` and `err` once per line as the lines arrive.

    :raises OSError: if the process cannot be launched
    """
    assert isinstance(args, list), "'args' must be a list: " + str(args)
    for idx, arg in enumerate(args):
        assert isinstance(arg, str), f"Type of argument {idx} is not str but {type(arg).__name__}: {arg}"

    def redirect(stream, f):
        for line in iter(stream.readline, b""):
            f(line.decode(errors="replace"))
        stream.close()

    p = subprocess.Popen(args, cwd=cwd, env=env, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    logvv(f"[{os.getpid()}: started subprocess {p.pid}: {args}]")
    joiners = []
    for stream, f in ((p.stdout, out), (p.stderr, err)):
        t = Thread(target=redirect, args=(stream, f))
        # Don't make the reader thread a daemon otherwise output can be dropped
        t.start()
        joiners.append(t)
    while True:
        try:
            retcode = waitOn(p)
            break
        except KeyboardInterrupt:
            if is_windows():
                p.terminate()
            else:
                # Propagate SIGINT to the subprocess. If it does not
                # handle the signal, it terminates and this loop exits.
                os.kill(p.pid, signal.SIGINT)
    while any(t.is_alive() for t in joiners):
        # Need to use timeout otherwise all signals (including CTRL-C) are blocked
        for t in joiners:
            t.join(10)
    return retcode


def execute(cmd, cwd, buildlog) -> ReturnCode:
    """
    Executes `cmd` (a :class:`CommandLine`) in the directory `cwd`.

    Standard output is reported to `buildlog` at info level and standard error at error
    level while the process runs.

    :raises ToolNotFoundError: if the executable cannot be launched
    :raises ExecutionError: if the process exits with a non-zero status
    """
    args = cmd.as_list()
    cmd_line = list_to_cmd_line(args)
    buildlog.debug("Executing: " + cmd_line)
    err = LinesOutputCapture()

    def _out(line):
        buildlog.info(line.rstrip())

    def _err(line):
        err(line)
        buildlog.error(line.rstrip())

    try:
        retcode = run(args, _out, _err, cwd=cwd)
    except OSError as e:
        raise ToolNotFoundError(f"Unable to find jmod command: {e}") from e
    if retcode != 0:
        msg = f"Exit code: {retcode}"
        if err.lines:
            msg += " - " + "\n".join(err.lines)
        msg += f"\nCommand line was: {cmd_line}"
        buildlog.error(f"[exit code: {retcode}]")
        raise ExecutionError(retcode, msg)
    return retcode
