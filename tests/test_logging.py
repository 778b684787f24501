from mxjmod import BuildLog
from mxjmod._impl.support.logging import abort, write_boxed_warning
from mxjmod._impl.support.options import _opts
from fakejdk import RecordingLog


def test_boxed_warning():
    log = RecordingLog()
    write_boxed_warning(log, "mind the gap")
    assert log.messages["warn"] == ["****************", "* mind the gap *", "****************"]


def test_build_log_levels(capsys):
    saved = dict(vars(_opts))
    try:
        log = BuildLog()
        log.debug("hidden")
        log.info("shown")
        log.warn("careful")
        log.error("broken")
        captured = capsys.readouterr()
        assert captured.out == "shown\n"
        assert "WARNING: careful" in captured.err
        assert "broken" in captured.err

        _opts.verbose = True
        _opts.warn = False
        log.debug("now visible")
        log.warn("suppressed")
        captured = capsys.readouterr()
        assert captured.out == "now visible\n"
        assert captured.err == ""

        _opts.quiet = True
        log.info("quiet")
        log.error("still reported")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "still reported" in captured.err
    finally:
        _opts.__dict__.clear()
        _opts.__dict__.update(saved)


def test_abort_exit_codes(capsys):
    for code_or_message, expected in ((3, 3), ("fatal", 1)):
        try:
            abort(code_or_message, context="while testing")
        except SystemExit as e:
            assert e.code == expected
        else:
            assert False, "abort must raise SystemExit"
    err = capsys.readouterr().err
    assert "while testing" in err
    assert "fatal" in err
