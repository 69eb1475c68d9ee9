from __future__ import annotations

"""
Record Kind Detection.

Derives the semantic tag of a route record from its path and name. Rules are
evaluated top to bottom and the first match wins.
"""

import re

from routehealth.core.pipeline.components.filters import (
    file_extension,
    is_documentation_file,
    is_source_code_file,
)
from routehealth.domain.constants import (
    CONFIG_DATA_EXTENSIONS,
    MUSIC_KEYWORDS,
    PATH_KIND_KEYWORDS,
)

KIND_FOLDER = "folder"
KIND_TEST = "test"
KIND_DOCUMENTATION = "documentation"
KIND_CONFIG = "config"
KIND_MODULE = "module"
KIND_UNKNOWN = "unknown"

_TEST_NAME = re.compile(r"\.(test|spec)\.[a-z]+$", re.IGNORECASE)


def detect_kind(path: str) -> str:
    """
    Return the semantic kind of a file path.

    Args:
        path: POSIX path relative to the project root.

    Returns:
        str: Kind tag such as "handler", "guitar", "config" or "unknown".
    """
    segments = [s for s in path.lower().split("/") if s]
    if not segments:
        return KIND_UNKNOWN
    name = segments[-1]

    if _TEST_NAME.search(name):
        return KIND_TEST
    if is_documentation_file(name):
        return KIND_DOCUMENTATION
    ext = file_extension(name)
    if ext in CONFIG_DATA_EXTENSIONS:
        return KIND_CONFIG

    folders = segments[:-1]
    for keywords, kind in PATH_KIND_KEYWORDS:
        if any(k in folders for k in keywords):
            return kind

    if "config" in name:
        return KIND_CONFIG
    if is_source_code_file(name):
        return KIND_MODULE
    return KIND_UNKNOWN


def is_music_related(path: str) -> bool:
    """True when the path mentions any music keyword."""
    lowered = path.lower()
    return any(keyword in lowered for keyword in MUSIC_KEYWORDS)
