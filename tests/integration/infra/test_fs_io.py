from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, cross-platform data directory resolution
and the POSIX relative-path helpers used by the scanner.
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from routehealth.infra.fs import (
    get_user_data_dir,
    join_posix,
    normalize_path,
    physical_path,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "RouteHealth" in path


def test_get_user_data_dir_unix() -> None:
    """TC-01: Verify resolution of ~/.routehealth on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                normalized_path = path.replace("\\", "/")
                assert normalized_path.endswith("/home/testuser/.routehealth")


def test_normalize_path_expansion() -> None:
    """TC-02: Verify expansion of environment variables and the fallback."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

    assert normalize_path("   ", fallback="/base") == os.path.abspath("/base")
    assert normalize_path(None, fallback="/base") == os.path.abspath("/base")

# -----------------------------------------------------------------------------
# RELATIVE PATH HELPERS
# -----------------------------------------------------------------------------

def test_join_posix() -> None:
    assert join_posix("", "src") == "src"
    assert join_posix("src", "handlers") == "src/handlers"


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_physical_path_resolves_symlinks(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    assert physical_path(str(link)) == physical_path(str(real))
    assert physical_path(str(tmp_path / "real" / ".." / "real")) == physical_path(str(real))
