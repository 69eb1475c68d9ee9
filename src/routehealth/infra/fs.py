from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation utilities. Acts as an abstraction
over the 'os' module so that every path handed to the domain layer is
POSIX-style and relative to its project root, regardless of platform.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "RouteHealth"
UNIX_APP_DIR_NAME = ".routehealth"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/RouteHealth
    - Linux/Mac: ~/.routehealth

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def join_posix(parent: str, name: str) -> str:
    """Join a POSIX relative parent path and an entry name."""
    return f"{parent}/{name}" if parent else name


def physical_path(path: str) -> str:
    """Resolve symlinks and case so two spellings of a directory compare equal."""
    return os.path.normcase(os.path.realpath(path))
