"""Test version and build info reporting."""

import importlib.metadata
from unittest.mock import patch

from hecto import version
from hecto.version import BuildInfo


def test_version_falls_back_to_source_version():
    with patch("hecto.version.importlib.metadata.version",
               side_effect=importlib.metadata.PackageNotFoundError("hecto")):
        assert version.get_version() == version.__version__


def test_version_from_metadata():
    with patch("hecto.version.importlib.metadata.version", return_value="1.2.3"):
        assert version.get_version() == "1.2.3"


def test_version_string_with_dirty_git_checkout():
    info = BuildInfo(commit="0123456789abcdef", date="2026-01-02T03:04:05+00:00", dirty=True)
    with patch.object(version, "get_build_info", return_value=info):
        with patch.object(version, "get_version", return_value="0.1.0"):
            assert version.get_version_string() == \
                "hecto 0.1.0 (0123456-dirty 2026-01-02T03:04:05+00:00)"


def test_version_string_without_build_info():
    with patch.object(version, "_from_git_repo", return_value=None):
        with patch.object(version, "_from_embedded_file", return_value=None):
            with patch.object(version, "get_version", return_value="0.1.0"):
                assert version.get_version_string() == "hecto 0.1.0 (unknown unknown)"


def test_git_unavailable_gives_no_build_info():
    with patch("hecto.version.subprocess.check_output", side_effect=FileNotFoundError("git")):
        assert version._from_git_repo() is None
