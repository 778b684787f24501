from mxjmod import ArchiveRequest, ConfigurationError
from fakejdk import RecordingLog


def test_warn_if_resolved_values():
    for value in (None, "deprecated", "deprecated-for-removal", "incubating", " Deprecated ", "INCUBATING"):
        ArchiveRequest(warn_if_resolved=value).check_warn_if_resolved()


def test_warn_if_resolved_rejects_unknown_value():
    log = RecordingLog()
    try:
        ArchiveRequest(warn_if_resolved="obsolete").check_warn_if_resolved(log)
    except ConfigurationError as e:
        assert "warnIfResolved" in str(e)
        assert log.messages["error"] == [str(e)]
    else:
        assert False, "unknown warnIfResolved value must be rejected"


def test_path_list_specs_order_and_names():
    request = ArchiveRequest(cmds=["bin"], libs=["lib"])
    specs = request.path_list_specs()
    assert [s.name for s in specs] == ["cmd", "config", "lib", "headerFile", "legalNotice", "manPage"]
    assert specs[0].configured == ["bin"]
    assert specs[1].configured == []
    assert specs[2].default == "src/main/libs"
