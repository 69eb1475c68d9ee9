from __future__ import annotations

"""
Directory Scanning Service.

Walks a project root depth-first, pruning with the path filters at every
entry, classifying each admitted file and synthesizing placeholder records
for empty directories. Every recursive step returns its own ScanResult and
the caller merges them, so subtrees are independent and the root's children
can be fanned out to a thread pool without changing the output.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Collection, Iterable, List, Tuple

from routehealth.core.pipeline.components.classifier import classify_file
from routehealth.core.pipeline.components.filters import (
    is_hidden,
    should_exclude_from_project_boundary,
    should_include_directory,
    should_include_file,
)
from routehealth.core.pipeline.components.kinds import (
    KIND_FOLDER,
    detect_kind,
    is_music_related,
)
from routehealth.domain.errors import DirectoryReadError
from routehealth.domain.scan_models import ProjectStats, RouteRecord, ScanResult
from routehealth.infra.fs import join_posix

logger = logging.getLogger(__name__)

# (name, absolute path, is directory)
_Entry = Tuple[str, str, bool]


@dataclass(frozen=True)
class _ScanContext:
    exclusions: Tuple[str, ...]
    extra_skip_dirs: Tuple[str, ...]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_project(
        root: str,
        exclude_paths: Collection[str] = (),
        *,
        extra_skip_dirs: Collection[str] = (),
        max_workers: int = 1,
) -> ScanResult:
    """
    Scan one project root into ordered route records and counters.

    Unreadable directories are logged and skipped; unreadable files are
    classified as errors. The scan itself never fails.

    Args:
        root: Project root directory.
        exclude_paths: Root-level names or paths owned by other projects.
        extra_skip_dirs: Additional directory names to prune everywhere.
        max_workers: Thread count for scanning the root's entries (1 = sequential).

    Returns:
        ScanResult: Records in depth-first, name-sorted order plus stats.
    """
    root_abs = os.path.abspath(root)
    ctx = _ScanContext(tuple(exclude_paths), tuple(extra_skip_dirs))

    try:
        entries = _list_entries(root_abs)
    except DirectoryReadError as e:
        logger.warning(f"Skipping unreadable project root: {e}")
        return ScanResult()

    if max_workers > 1 and len(entries) > 1:
        logger.debug(f"Scanning {len(entries)} root entries with {max_workers} workers")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(_scan_entry, entry, "", 0, ctx) for entry in entries]
            # Merge in listing order to keep output identical to a sequential scan
            result = _merge(future.result() for future in futures)
    else:
        result = _merge(_scan_entry(entry, "", 0, ctx) for entry in entries)

    stats = result.stats
    logger.info(
        f"Scanned {root_abs}: {stats.total} routes "
        f"({stats.working} working, {stats.missing} with issues), "
        f"{stats.folders} folders, {stats.files} files"
    )
    return result


# ==============================================================================
# RECURSIVE FOLD
# ==============================================================================

def _scan_directory(abs_dir: str, rel_dir: str, depth: int, ctx: _ScanContext) -> ScanResult:
    """Scan the contents of one directory listed at `depth`."""
    try:
        entries = _list_entries(abs_dir)
    except DirectoryReadError as e:
        logger.warning(f"Skipping unreadable directory: {e}")
        return ScanResult()

    return _merge(_scan_entry(entry, rel_dir, depth, ctx) for entry in entries)


def _scan_entry(entry: _Entry, rel_dir: str, depth: int, ctx: _ScanContext) -> ScanResult:
    """Filter and scan one directory entry."""
    name, abs_path, is_dir = entry
    rel_path = join_posix(rel_dir, name)

    if depth == 0 and should_exclude_from_project_boundary(name, rel_path, ctx.exclusions):
        logger.debug(f"Boundary exclusion: {rel_path}")
        return ScanResult()

    if is_dir:
        if not should_include_directory(name, rel_path, depth, ctx.extra_skip_dirs):
            return ScanResult()
        return _scan_subdirectory(abs_path, rel_path, depth + 1, ctx)

    if not should_include_file(name, rel_path):
        return ScanResult()
    return _scan_file(abs_path, rel_path)


def _scan_subdirectory(abs_path: str, rel_path: str, depth: int, ctx: _ScanContext) -> ScanResult:
    """Recurse into an admitted directory and detect emptiness afterwards."""
    inner = _scan_directory(abs_path, rel_path, depth, ctx)
    stats = inner.stats + ProjectStats(folders=1)

    if inner.records or not _is_effectively_empty(abs_path):
        return ScanResult(inner.records, stats)

    record = RouteRecord(
        path=rel_path,
        kind=KIND_FOLDER,
        is_empty_folder=True,
        music_related=is_music_related(rel_path),
    )
    return ScanResult((record,), stats + ProjectStats.for_record(record))


def _scan_file(abs_path: str, rel_path: str) -> ScanResult:
    classification = classify_file(abs_path, rel_path)
    record = RouteRecord(
        path=rel_path,
        kind=detect_kind(rel_path),
        status=classification.status,
        warnings=classification.warnings,
        music_related=is_music_related(rel_path),
    )
    return ScanResult((record,), ProjectStats.for_record(record))


# ==============================================================================
# FILESYSTEM HELPERS
# ==============================================================================

def _list_entries(abs_dir: str) -> List[_Entry]:
    """
    List a directory sorted by name.

    Symlinked directories are reported as non-directories so that link
    cycles cannot be followed.

    Raises:
        DirectoryReadError: If the directory cannot be listed.
    """
    try:
        with os.scandir(abs_dir) as it:
            entries = [(e.name, e.path, e.is_dir(follow_symlinks=False)) for e in it]
    except OSError as e:
        raise DirectoryReadError(abs_dir, e.strerror or str(e)) from e

    entries.sort(key=lambda item: item[0])
    return entries


def _is_effectively_empty(abs_dir: str) -> bool:
    """True when a directory has no entries or only hidden ones."""
    try:
        names = os.listdir(abs_dir)
    except OSError as e:
        logger.debug(f"Empty-folder check failed for {abs_dir}: {e}")
        return False
    return all(is_hidden(n) for n in names)


def _merge(results: Iterable[ScanResult]) -> ScanResult:
    """Concatenate step results in order."""
    records: List[RouteRecord] = []
    stats = ProjectStats()
    for r in results:
        records.extend(r.records)
        stats = stats + r.stats
    return ScanResult(tuple(records), stats)
