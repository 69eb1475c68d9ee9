from __future__ import annotations

"""
Scan Domain Data Models.

Defines the immutable records and counters produced by a scan pass. Every
recursive scan step returns a ScanResult, and callers merge results with
`+` instead of mutating shared counters.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from routehealth.domain.constants import STATUS_WORKING

# -----------------------------------------------------------------------------
# RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RouteRecord:
    """
    One classified file or empty-directory placeholder.

    Attributes:
        path: POSIX path relative to the project root.
        kind: Semantic tag derived from path and name keywords.
        status: One of working, warning, error.
        warnings: Ordered diagnostics (empty when working).
        is_empty_folder: True for synthesized empty-directory entries.
        music_related: True when the path mentions a music keyword.
        exists: Always True for records produced by a scan.
    """
    path: str
    kind: str
    status: str = STATUS_WORKING
    warnings: Tuple[str, ...] = ()
    is_empty_folder: bool = False
    music_related: bool = False
    exists: bool = True

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def is_working(self) -> bool:
        return self.status == STATUS_WORKING


# -----------------------------------------------------------------------------
# COUNTERS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectStats:
    """
    Aggregate counters for a project or a tree node.

    Invariants: total == working + missing and total == files + empty_folders.
    """
    total: int = 0
    working: int = 0
    missing: int = 0
    folders: int = 0
    files: int = 0
    empty_folders: int = 0

    def __add__(self, other: "ProjectStats") -> "ProjectStats":
        if not isinstance(other, ProjectStats):
            return NotImplemented
        return ProjectStats(
            total=self.total + other.total,
            working=self.working + other.working,
            missing=self.missing + other.missing,
            folders=self.folders + other.folders,
            files=self.files + other.files,
            empty_folders=self.empty_folders + other.empty_folders,
        )

    def __radd__(self, other: object) -> "ProjectStats":
        # Lets the builtin sum() start from 0.
        if other == 0:
            return self
        return NotImplemented

    @classmethod
    def for_record(cls, record: RouteRecord) -> "ProjectStats":
        """Counters contributed by a single record."""
        working = 1 if record.is_working else 0
        if record.is_empty_folder:
            return cls(total=1, working=working, missing=1 - working, empty_folders=1)
        return cls(total=1, working=working, missing=1 - working, files=1)

    def health_counters(self) -> Tuple[int, int, int, int, int]:
        """Counters obeying the strict bottom-up sum law of the tree."""
        return self.total, self.working, self.missing, self.files, self.empty_folders


def sum_stats(items: Iterable[ProjectStats]) -> ProjectStats:
    return sum(items, ProjectStats())


# -----------------------------------------------------------------------------
# SCAN RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanResult:
    """Records and counters returned by one recursive scan step."""
    records: Tuple[RouteRecord, ...] = ()
    stats: ProjectStats = field(default_factory=ProjectStats)

    def __add__(self, other: "ScanResult") -> "ScanResult":
        if not isinstance(other, ScanResult):
            return NotImplemented
        return ScanResult(self.records + other.records, self.stats + other.stats)


@dataclass(frozen=True)
class ProjectScan:
    """
    Scan output of one discovered project.

    Attributes:
        name: Display name from the project table.
        root_path: Absolute path that was scanned.
        records: Ordered route records.
        stats: Counters for the whole project.
    """
    name: str
    root_path: str
    records: Tuple[RouteRecord, ...]
    stats: ProjectStats
