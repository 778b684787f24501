import os
import tempfile
from os.path import basename, join

from mxjmod._impl.main import main, version
from mxjmod._impl.support.options import _opts
from mxjmod._impl.toolchain import find_jmod_executable
from fakejdk import invocations, make_fake_jdk, needs_posix


def _run_main(args):
    """
    Runs the command line and restores the global options afterwards.
    Returns the exit status.
    """
    saved = dict(vars(_opts))
    try:
        main(args)
        return 0
    except SystemExit as e:
        return e.code
    finally:
        _opts.__dict__.clear()
        _opts.__dict__.update(saved)


def test_version(capsys):
    assert _run_main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "mxjmod version " + version


def test_help(capsys):
    assert _run_main(["help", "create"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("mxjmod create [options]")
    assert "create a jmod file" in out

    assert _run_main([]) == 0
    out = capsys.readouterr().out
    assert "available commands:" in out
    assert " describe " in out
    assert "MXJMOD_JAVA_HOME" in out


def test_unknown_command(capsys):
    assert _run_main(["frobnicate"]) == 1
    assert "unknown command 'frobnicate'" in capsys.readouterr().err


@needs_posix
def test_create_and_list():
    with tempfile.TemporaryDirectory() as tmp:
        tmp = os.path.realpath(tmp)
        home = join(tmp, "jdk")
        make_fake_jdk(home)
        base = join(tmp, "hello")
        os.makedirs(join(base, "bin"))
        jmod_file = join(base, "target", "jmods", "hello.jmod")

        status = _run_main(
            [
                "--quiet",
                "--java-home",
                home,
                "-p",
                base,
                "create",
                "--main-class",
                "hello.Main",
                "--module-version=2.0",
                "--dependency",
                "/repo/a.jar",
                "--cp",
                os.pathsep.join(["/repo/b.jar", "/repo/c.jar"]),
                "--cmd",
                join(base, "bin"),
                "--exclude",
                "*.txt",
            ]
        )
        assert status == 0
        assert os.path.exists(jmod_file)
        assert invocations(home)[0]["argv"] == [
            "create",
            "--module-version=2.0",
            "--class-path=/repo/a.jar:/repo/b.jar:/repo/c.jar",
            "--exclude=*.txt",
            "--main-class=hello.Main",
            "--cmds=" + join(base, "bin"),
            f"--module-path={home}/jmods",
            jmod_file,
        ]

        assert _run_main(["--quiet", "--java-home", home, "-p", base, "list"]) == 0
        assert _run_main(["--quiet", "--java-home", home, "-p", base, "describe", "--jmod-file", jmod_file]) == 0
        assert [i["argv"] for i in invocations(home)[1:]] == [["list", jmod_file], ["describe", jmod_file]]


@needs_posix
def test_exit_statuses():
    with tempfile.TemporaryDirectory() as tmp:
        tmp = os.path.realpath(tmp)
        home = join(tmp, "jdk")
        make_fake_jdk(home, {"exit": 5, "stderr": ["Error: broken"]})
        base = join(tmp, "project")
        os.makedirs(base)

        # jmod exit status is propagated
        assert _run_main(["--quiet", "--java-home", home, "-p", base, "create"]) == 5
        # missing archive
        assert _run_main(["--quiet", "--java-home", home, "-p", base, "describe"]) == 1
        # missing configured directory
        assert _run_main(["--quiet", "--java-home", home, "-p", base, "create", "--lib", "nope"]) == 1
        # invalid warnIfResolved
        assert _run_main(["--quiet", "--java-home", home, "-p", base, "create", "--warn-if-resolved", "always"]) == 1
        # no jmod in the JDK
        assert _run_main(["--quiet", "--java-home", tmp, "-p", base, "list"]) == 127
        assert len(invocations(home)) == 1


@needs_posix
def test_java_home_from_environment():
    with tempfile.TemporaryDirectory() as tmp:
        tmp = os.path.realpath(tmp)
        jmod = make_fake_jdk(join(tmp, "jdk"))
        other = make_fake_jdk(join(tmp, "other"))
        saved = {k: os.environ.get(k) for k in ("JAVA_HOME", "MXJMOD_JAVA_HOME")}
        try:
            os.environ["JAVA_HOME"] = join(tmp, "jdk")
            os.environ.pop("MXJMOD_JAVA_HOME", None)
            assert find_jmod_executable() == jmod
            os.environ["MXJMOD_JAVA_HOME"] = join(tmp, "other")
            assert find_jmod_executable() == other
            assert basename(find_jmod_executable()) == "jmod"
        finally:
            for k, v in saved.items():
                if v is None:
                    os.environ.pop(k, None)
                else:
                    os.environ[k] = v
