import os
import tempfile
from os.path import join

from mxjmod import ConfigurationError
from mxjmod._impl.pathlists import (
    DEFAULT_CONFIG_DIRECTORY,
    DEFAULT_LIB_DIRECTORY,
    PathListSpec,
    resolve_path_list,
    validate_path_lists,
)


def test_configured_list_wins():
    with tempfile.TemporaryDirectory() as base:
        os.makedirs(join(base, DEFAULT_CONFIG_DIRECTORY))
        assert resolve_path_list(["etc", "/abs/conf"], DEFAULT_CONFIG_DIRECTORY, base) == [
            join(os.path.abspath(base), "etc"),
            "/abs/conf",
        ]


def test_default_directory_used_when_present():
    with tempfile.TemporaryDirectory() as base:
        assert resolve_path_list(None, DEFAULT_CONFIG_DIRECTORY, base) == []
        assert resolve_path_list([], DEFAULT_CONFIG_DIRECTORY, base) == []
        os.makedirs(join(base, DEFAULT_CONFIG_DIRECTORY))
        assert resolve_path_list([], DEFAULT_CONFIG_DIRECTORY, base) == [
            join(os.path.abspath(base), DEFAULT_CONFIG_DIRECTORY)
        ]


def test_default_that_is_a_file_is_ignored():
    with tempfile.TemporaryDirectory() as base:
        os.makedirs(join(base, "src", "main"))
        with open(join(base, DEFAULT_LIB_DIRECTORY), "w") as f:
            f.write("not a directory")
        assert resolve_path_list(None, DEFAULT_LIB_DIRECTORY, base) == []


def test_validate_reports_first_missing_directory():
    with tempfile.TemporaryDirectory() as base:
        os.makedirs(join(base, "present"))
        specs = [
            PathListSpec(["present"], DEFAULT_CONFIG_DIRECTORY, "config"),
            PathListSpec(["missing"], DEFAULT_LIB_DIRECTORY, "lib"),
            PathListSpec(["also-missing"], DEFAULT_LIB_DIRECTORY, "manPage"),
        ]
        try:
            validate_path_lists(specs, base)
        except ConfigurationError as e:
            missing = join(os.path.abspath(base), "missing")
            assert str(e) == f"The directory {missing} for lib parameter does not exist or is not a directory."
        else:
            assert False, "missing lib directory must be reported"


def test_validate_accepts_existing_directories():
    with tempfile.TemporaryDirectory() as base:
        os.makedirs(join(base, "a"))
        os.makedirs(join(base, DEFAULT_LIB_DIRECTORY))
        validate_path_lists(
            [PathListSpec(["a"], DEFAULT_CONFIG_DIRECTORY, "config"), PathListSpec(None, DEFAULT_LIB_DIRECTORY, "lib")],
            base,
        )
