from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and on-disk workspaces.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
WorkspaceFactory = Callable[[Path, Dict[str, Optional[str]]], Path]


def _materialize(root: Path, layout: Dict[str, Optional[str]]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in layout.items():
        target = root / rel
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree() -> WorkspaceFactory:
    """
    Return a helper that writes a {relative path: content} layout to disk.

    A value of None creates an (empty) directory instead of a file.
    """
    return _materialize


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'routehealth.domain.config'.
    """
    return {
        "workspace_path": str(tmp_path),
        "fallback_to_workspace": True,
        "projects": [],
        "max_workers": 1,
        "extra_skip_dirs": [],
        "tree_mode": "folderPaths",
        "output_format": "tree",
    }


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the user data directory into the test sandbox."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData"))
    return home
