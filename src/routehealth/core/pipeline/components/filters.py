from __future__ import annotations

"""
Path Filtering Engine.

Decides which directories and files take part in a health scan. All rules
are pure decisions over names, POSIX relative paths and depth, driven by the
declarative tables in `routehealth.domain.constants`. Unknown names resolve
to exclusion (default deny) and no function in this module raises.

Depth convention: `depth` is the depth of the directory being listed, the
scan root being depth 0.
"""

import os
from typing import Collection, Iterable

from routehealth.domain.constants import (
    ALLOWED_HIDDEN_DIRS,
    CONFIG_DATA_EXTENSIONS,
    CONFIG_JSON_KEYWORDS,
    DEEP_EXCLUDED_DIR_KEYWORDS,
    DOCUMENTATION_EXTENSIONS,
    EXCLUDED_FILE_EXTENSIONS,
    EXCLUDED_FILE_NAMES,
    EXCLUDED_NAME_FRAGMENTS,
    HIDDEN_MARKER,
    IMPORTANT_DIR_KEYWORDS,
    IMPORTANT_PATH_FRAGMENTS,
    MAX_DEPTH,
    SHALLOW_DEPTH,
    SKIP_DIRECTORIES,
    SOURCE_CODE_EXTENSIONS,
)

# -----------------------------------------------------------------------------
# NAME HELPERS
# -----------------------------------------------------------------------------

def is_hidden(name: str) -> bool:
    """Return True for dot-prefixed entries."""
    return name.startswith(HIDDEN_MARKER)


def file_extension(name: str) -> str:
    """Lower-cased extension including the dot ('' when absent)."""
    return os.path.splitext(name)[1].lower()


def is_source_code_file(name: str) -> bool:
    return file_extension(name) in SOURCE_CODE_EXTENSIONS


def _segments(path: str) -> Iterable[str]:
    return (s for s in path.replace("\\", "/").lower().split("/") if s)

# -----------------------------------------------------------------------------
# DIRECTORY RULES
# -----------------------------------------------------------------------------

def should_skip_directory(
        name: str,
        relative_path: str,
        depth: int,
        extra_skip_dirs: Collection[str] = (),
) -> bool:
    """
    Apply the unconditional directory pruning rules.

    Args:
        name: Directory name.
        relative_path: POSIX path relative to the project root.
        depth: Depth of the directory being listed.
        extra_skip_dirs: Additional deny-listed names from configuration.

    Returns:
        bool: True when the directory must never be traversed.
    """
    if is_hidden(name) and name not in ALLOWED_HIDDEN_DIRS:
        return True

    lowered = name.lower()
    if lowered in SKIP_DIRECTORIES:
        return True
    if any(lowered == d.lower() for d in extra_skip_dirs):
        return True

    # An admitted directory is listed one level below the current listing
    return depth + 1 > MAX_DEPTH


def should_include_directory(
        name: str,
        path: str,
        depth: int,
        extra_skip_dirs: Collection[str] = (),
) -> bool:
    """
    Decide whether a directory should be descended into.

    Shallow directories are always admitted; deeper ones must look like a
    source root, and past the hard ceiling nothing is admitted.

    Args:
        name: Directory name.
        path: POSIX path relative to the project root.
        depth: Depth of the directory being listed.
        extra_skip_dirs: Additional deny-listed names from configuration.

    Returns:
        bool: True if the directory participates in the scan.
    """
    if should_skip_directory(name, path, depth, extra_skip_dirs):
        return False

    if depth <= SHALLOW_DEPTH:
        return True

    lowered = name.lower()
    if lowered in DEEP_EXCLUDED_DIR_KEYWORDS:
        return False

    if lowered in IMPORTANT_DIR_KEYWORDS:
        return True
    return any(seg in IMPORTANT_DIR_KEYWORDS for seg in _segments(path))


def should_exclude_from_project_boundary(
        name: str,
        relative_path: str,
        exclusions: Collection[str],
) -> bool:
    """
    Check whether a root-level entry belongs to another logical project.

    Args:
        name: Entry name.
        relative_path: POSIX path relative to the project root.
        exclusions: Names or relative paths owned by other projects.

    Returns:
        bool: True when the entry must be left to its own project scan.
    """
    if not exclusions:
        return False
    normalized = relative_path.replace("\\", "/").strip("/")
    for item in exclusions:
        candidate = item.replace("\\", "/").strip("/")
        if candidate and (candidate == name or candidate == normalized):
            return True
    return False

# -----------------------------------------------------------------------------
# FILE RULES
# -----------------------------------------------------------------------------

def is_excluded_file(name: str) -> bool:
    """Deny-list check: styling, markup, media, bundles, tests, lock files."""
    lowered = name.lower()
    if lowered in EXCLUDED_FILE_NAMES:
        return True
    if file_extension(lowered) in EXCLUDED_FILE_EXTENSIONS:
        return True
    return any(fragment in lowered for fragment in EXCLUDED_NAME_FRAGMENTS)


def is_config_json(name: str) -> bool:
    """JSON is only relevant when its name suggests build/package/settings data."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in CONFIG_JSON_KEYWORDS)


def is_under_important_path(path: str) -> bool:
    normalized = "/" + path.replace("\\", "/").lower()
    return any("/" + fragment in normalized for fragment in IMPORTANT_PATH_FRAGMENTS)


def should_include_file(name: str, path: str) -> bool:
    """
    Decide whether a file takes part in the scan.

    Deny-list wins over everything; JSON needs a configuration-like name;
    source and configuration data extensions are admitted; files beneath an
    important path fragment are admitted regardless of their extension.

    Args:
        name: File name.
        path: POSIX path relative to the project root.

    Returns:
        bool: True if the file should be classified.
    """
    if is_hidden(name):
        return False
    if is_excluded_file(name):
        return False

    ext = file_extension(name)
    if ext == ".json":
        return is_config_json(name)

    if ext in SOURCE_CODE_EXTENSIONS or ext in CONFIG_DATA_EXTENSIONS:
        return True

    return is_under_important_path(path)


def is_documentation_file(name: str) -> bool:
    return file_extension(name) in DOCUMENTATION_EXTENSIONS
