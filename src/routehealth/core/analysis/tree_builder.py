from __future__ import annotations

"""
Ecosystem Tree Builder.

Re-groups the flat record lists of every project scan into one hierarchical
tree, either by literal folder path or by semantic category. Stats are
computed bottom-up after assembly: each internal node's health counters are
the element-wise sum of its children, and folder nodes add themselves to
the `folders` counter. Project nodes carry their scan's own stats, which
keeps folder totals identical in both modes.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from routehealth.core.analysis.health import health_status, score
from routehealth.core.pipeline.components.kinds import KIND_CONFIG, KIND_DOCUMENTATION
from routehealth.domain.constants import (
    CATEGORY_DISPLAY_CAP,
    MODE_CATEGORY,
    MODE_FOLDER_PATHS,
    MUSIC_KEYWORDS,
    ROOT_NAME,
    STATUS_GLYPHS,
    TREE_MODES,
)
from routehealth.domain.scan_models import ProjectScan, ProjectStats, RouteRecord, sum_stats
from routehealth.domain.tree_models import (
    KIND_CATEGORY,
    KIND_FOLDER,
    KIND_PROJECT,
    KIND_ROOT,
    KIND_ROUTE,
    EcosystemTree,
    TreeNode,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CATEGORY RULES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class _PathView:
    """Lower-cased view of a record path used by the category predicates."""
    record: RouteRecord
    path: str
    folders: Tuple[str, ...]

    @property
    def primary(self) -> str:
        return self.folders[0] if self.folders else ""

    def has_folder(self, *names: str) -> bool:
        return any(name in self.folders for name in names)

    def mentions(self, *keywords: str) -> bool:
        return any(keyword in self.path for keyword in keywords)


def _view(record: RouteRecord) -> _PathView:
    segments = tuple(s for s in record.path.lower().split("/") if s)
    # Empty-folder records name a directory, so every segment is a folder.
    folders = segments if record.is_empty_folder else segments[:-1]
    return _PathView(record=record, path=record.path.lower(), folders=folders)


_LEARNING_KEYWORDS = ("learning", "learn", "training", "lesson", "education", "tutor")
_ANALYSIS_KEYWORDS = ("analysis", "analyzer", "analytics", "analyze", "insight")
_CORE_KEYWORDS = ("core", "engine", "kernel")
_SOURCE_ROOTS = ("src", "source")

_Rule = Tuple[Callable[[_PathView], bool], str]


def _brain_rules(in_brain: Callable[[_PathView], bool]) -> List[_Rule]:
    return [
        (lambda v: in_brain(v) and v.mentions(*MUSIC_KEYWORDS), "Brain: Music"),
        (lambda v: in_brain(v) and v.mentions(*_LEARNING_KEYWORDS), "Brain: Learning"),
        (lambda v: in_brain(v) and v.mentions(*_ANALYSIS_KEYWORDS), "Brain: Analysis"),
        (lambda v: in_brain(v) and v.mentions(*_CORE_KEYWORDS), "Brain: Core"),
        (in_brain, "Brain: General"),
    ]


def _in_source(v: _PathView) -> bool:
    return v.primary in _SOURCE_ROOTS


CATEGORY_RULES: List[_Rule] = [
    # Primary folder
    *_brain_rules(lambda v: v.primary == "brain"),
    (lambda v: _in_source(v) and v.has_folder("components") and v.mentions("guitar"),
     "UI: Guitar Components"),
    (lambda v: _in_source(v) and v.has_folder("components") and v.mentions("vocal"),
     "UI: Vocal Components"),
    (lambda v: _in_source(v) and v.has_folder("components"), "UI: Components"),
    (lambda v: _in_source(v) and v.has_folder("hooks"), "Hooks"),
    (lambda v: _in_source(v) and v.has_folder("pages", "app"), "Pages"),
    (lambda v: _in_source(v) and v.has_folder("modules"), "Modules"),
    (lambda v: _in_source(v) and v.has_folder("utils"), "Modules: Utilities"),
    (lambda v: _in_source(v) and v.has_folder("types"), "Modules: Types"),
    (_in_source, "Modules: Core"),
    (lambda v: v.primary == "handlers", "Handlers"),
    (lambda v: v.primary == "scripts", "Scripts"),
    (lambda v: v.primary == "shared", "Shared"),
    # Nested segments
    *_brain_rules(lambda v: v.has_folder("brain")),
    (lambda v: v.has_folder("handlers", "handler"), "Handlers"),
    (lambda v: v.has_folder("scripts"), "Scripts"),
    (lambda v: v.has_folder("shared"), "Shared"),
    # Type fallback
    (lambda v: v.record.is_empty_folder, "Empty Folders"),
    (lambda v: v.record.kind == KIND_CONFIG, "Config Files"),
    (lambda v: v.record.kind == KIND_DOCUMENTATION, "Documentation"),
]

FALLBACK_CATEGORY = "Other Files"


def categorize(record: RouteRecord) -> str:
    """Return the category label of a record (first matching rule wins)."""
    view = _view(record)
    for predicate, label in CATEGORY_RULES:
        if predicate(view):
            return label
    return FALLBACK_CATEGORY

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(scans: Sequence[ProjectScan], mode: str = MODE_FOLDER_PATHS) -> EcosystemTree:
    """
    Assemble the ecosystem tree from project scans.

    Args:
        scans: Project scans in discovery order.
        mode: "folderPaths" or "category".

    Returns:
        EcosystemTree: Root node, summed stats and health.

    Raises:
        ValueError: If mode is not a known tree mode.
    """
    if mode not in TREE_MODES:
        raise ValueError(f"Unknown tree mode '{mode}'. Expected one of {TREE_MODES}")

    project_nodes = [_build_project(scan, mode) for scan in scans]

    stats = sum_stats(scan.stats for scan in scans)
    health = score(stats.working, stats.total)

    root = TreeNode(
        name=ROOT_NAME,
        kind=KIND_ROOT,
        label=f"{ROOT_NAME} ({health}% health)",
        stats=sum_stats(node.stats for node in project_nodes),
        children=project_nodes,
        health=health,
    )

    logger.debug(f"Built {mode} tree with {len(project_nodes)} project(s), health {health}%")
    return EcosystemTree(
        root=root,
        stats=stats,
        health_percentage=health,
        health_status=health_status(health),
        mode=mode,
    )


def category_breakdown(scans: Sequence[ProjectScan]) -> Dict[str, int]:
    """
    Count records per kind across all scans, plus the music-related total.

    Returns:
        Dict[str, int]: Kind to count, sorted by kind, with a trailing "music" key.
    """
    kinds: Counter = Counter()
    music = 0
    for scan in scans:
        for record in scan.records:
            kinds[record.kind] += 1
            if record.music_related:
                music += 1

    breakdown = {kind: kinds[kind] for kind in sorted(kinds)}
    breakdown["music"] = music
    return breakdown

# -----------------------------------------------------------------------------
# PROJECT LEVEL
# -----------------------------------------------------------------------------

def _build_project(scan: ProjectScan, mode: str) -> TreeNode:
    if mode == MODE_CATEGORY:
        children = _group_by_category(scan.records)
    else:
        children = group_by_folder(scan.records)

    # Project counters come from the scan, not from the regrouped children
    stats = scan.stats
    health = score(stats.working, stats.total)
    return TreeNode(
        name=scan.name,
        kind=KIND_PROJECT,
        label=f"{scan.name} ({stats.total} routes, {stats.working} working)",
        stats=stats,
        children=children,
        health=health,
    )


def _group_by_category(records: Sequence[RouteRecord]) -> List[TreeNode]:
    buckets: Dict[str, List[RouteRecord]] = {}
    for record in records:
        buckets.setdefault(categorize(record), []).append(record)

    nodes: List[TreeNode] = []
    for label, members in buckets.items():
        children = group_by_folder(members)
        count = len(members)

        node = TreeNode(
            name=label,
            kind=KIND_CATEGORY,
            stats=sum_stats(child.stats for child in children),
            children=children,
            item_count=count,
        )
        if count > CATEGORY_DISPLAY_CAP:
            node.display_children = group_by_folder(members[:CATEGORY_DISPLAY_CAP])
            node.label = f"{label} ({count} items, showing {CATEGORY_DISPLAY_CAP})"
        else:
            node.label = f"{label} ({count} items)"
        nodes.append(node)
    return nodes

# -----------------------------------------------------------------------------
# FOLDER GROUPING
# -----------------------------------------------------------------------------

def group_by_folder(records: Sequence[RouteRecord]) -> List[TreeNode]:
    """
    Nest records into folder nodes segment by segment.

    Args:
        records: Records whose paths share a common root.

    Returns:
        List[TreeNode]: Top-level folder and route nodes, stats and labels filled in.
    """
    holder = TreeNode(name="", kind=KIND_FOLDER)
    index: Dict[Tuple[str, ...], TreeNode] = {}

    for record in records:
        segments = [s for s in record.path.split("/") if s]
        parent = holder
        for depth in range(len(segments) - 1):
            key = tuple(segments[:depth + 1])
            folder = index.get(key)
            if folder is None:
                folder = TreeNode(name=segments[depth], kind=KIND_FOLDER)
                index[key] = folder
                parent.children.append(folder)
            parent = folder

        leaf_name = segments[-1] if segments else record.path
        parent.children.append(TreeNode(
            name=leaf_name,
            kind=KIND_ROUTE,
            label=_route_label(leaf_name, record),
            stats=ProjectStats.for_record(record),
            record=record,
        ))

    for child in holder.children:
        _finalize(child)
    return holder.children


def _finalize(node: TreeNode) -> Tuple[int, int]:
    """
    Fill stats and labels of a folder subtree.

    Returns:
        Tuple[int, int]: Descendant (folders, files) display counts, this node included.
    """
    if node.kind == KIND_ROUTE:
        return (1, 0) if node.record.is_empty_folder else (0, 1)

    folders = files = 0
    for child in node.children:
        sub_folders, sub_files = _finalize(child)
        folders += sub_folders
        files += sub_files

    node.stats = sum_stats(child.stats for child in node.children) + ProjectStats(folders=1)
    node.label = f"{node.name} ({folders} folders, {files} files)"
    return folders + 1, files


def _route_label(name: str, record: RouteRecord) -> str:
    glyph = STATUS_GLYPHS.get(record.status, "")
    if record.is_empty_folder:
        return f"{glyph} {name}/ (empty folder)"
    return f"{glyph} {name}"
