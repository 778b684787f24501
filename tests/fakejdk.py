import json
import os
import stat
import sys
from os.path import join

import pytest

needs_posix = pytest.mark.skipif(sys.platform == "win32", reason="fake tools are shebang scripts")

_FAKE_TOOL = """#!{python}
import json
import os
import sys

here = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(here, "invocations.jsonl"), "a") as f:
    f.write(json.dumps({{"argv": sys.argv[1:], "cwd": os.getcwd()}}) + "\\n")

behaviour = {{}}
if os.path.exists(os.path.join(here, "behaviour.json")):
    with open(os.path.join(here, "behaviour.json")) as f:
        behaviour = json.load(f)

for line in behaviour.get("stdout", []):
    print(line)
for line in behaviour.get("stderr", []):
    print(line, file=sys.stderr)
if behaviour.get("exit", 0) == 0 and len(sys.argv) > 1 and sys.argv[1] == "create":
    with open(sys.argv[-1], "w") as f:
        f.write("jmod")
sys.exit(behaviour.get("exit", 0))
"""


def make_fake_jdk(home, behaviour=None):
    """
    Creates ``<home>/bin/jmod`` as a script that records its invocations and
    ``<home>/jmods``. Returns the path of the fake jmod.
    """
    home = os.path.realpath(home)
    os.makedirs(join(home, "jmods"), exist_ok=True)
    jmod = add_fake_tool(home, "jmod")
    if behaviour is not None:
        set_behaviour(home, behaviour)
    return jmod


def add_fake_tool(home, name):
    """
    Creates ``<home>/bin/<name>`` as a recording script sharing the invocation log of
    the fake jmod.
    """
    os.makedirs(join(home, "bin"), exist_ok=True)
    tool = join(os.path.realpath(home), "bin", name)
    with open(tool, "w") as f:
        f.write(_FAKE_TOOL.format(python=sys.executable))
    os.chmod(tool, os.stat(tool).st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool


def set_behaviour(home, behaviour):
    with open(join(home, "bin", "behaviour.json"), "w") as f:
        json.dump(behaviour, f)


def invocations(home):
    path = join(home, "bin", "invocations.jsonl")
    if not os.path.exists(path):
        return []
    with open(path) as f:
        return [json.loads(line) for line in f if line.strip()]


class RecordingLog:
    """
    A build log that keeps what is logged per level.
    """

    def __init__(self):
        self.messages = {"debug": [], "info": [], "warn": [], "error": []}

    def debug(self, msg):
        self.messages["debug"].append(msg)

    def info(self, msg):
        self.messages["info"].append(msg)

    def warn(self, msg):
        self.messages["warn"].append(msg)

    def error(self, msg):
        self.messages["error"].append(msg)
