from __future__ import annotations

"""
Scan Error Taxonomy.

Per-file and per-directory failures are recovered locally by the scanner;
only the absence of a workspace root is fatal and must reach the caller.
"""

from typing import Sequence


class RouteHealthError(Exception):
    """Base class for all scanning failures."""


class FileReadError(RouteHealthError):
    """A file could not be opened or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not read '{path}': {reason}")


class DirectoryReadError(RouteHealthError):
    """A directory listing failed (permissions, vanished entry...)."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not list '{path}': {reason}")


class NoProjectFoundError(RouteHealthError):
    """None of a configured project's candidate paths exist."""

    def __init__(self, display_name: str, candidates: Sequence[str]) -> None:
        self.display_name = display_name
        self.candidates = list(candidates)
        super().__init__(
            f"project '{display_name}' not found (tried {len(self.candidates)} paths)"
        )


class NoWorkspaceError(RouteHealthError):
    """No usable workspace root was supplied."""
