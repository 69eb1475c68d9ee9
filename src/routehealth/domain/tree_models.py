from __future__ import annotations

"""
Ecosystem Tree Structure Data Models.

Provides the recursive node type assembled by the tree builder and consumed
by renderers. Only route nodes carry a RouteRecord; every other node is a
synthetic grouping whose stats are summed from its descendants.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from routehealth.domain.scan_models import ProjectStats, RouteRecord

# -----------------------------------------------------------------------------
# NODE KINDS
# -----------------------------------------------------------------------------

KIND_ROOT = "root"
KIND_PROJECT = "project"
KIND_CATEGORY = "category"
KIND_FOLDER = "folder"
KIND_ROUTE = "route"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TreeNode:
    """
    A node of the ecosystem tree.

    Attributes:
        name: Segment, category or project name.
        kind: One of root, project, category, folder, route.
        label: Display text including computed summaries.
        stats: Counters aggregated bottom-up.
        children: Child nodes in insertion order.
        record: Originating record (route nodes only).
        health: Health percentage (root and project nodes only).
        item_count: Number of member records (category nodes only).
        display_children: Truncated children for display, when capped.
    """
    name: str
    kind: str
    label: str = ""
    stats: ProjectStats = field(default_factory=ProjectStats)
    children: List["TreeNode"] = field(default_factory=list)
    record: Optional[RouteRecord] = None
    health: Optional[int] = None
    item_count: int = 0
    display_children: Optional[List["TreeNode"]] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def visible_children(self) -> List["TreeNode"]:
        """Children a renderer should draw (honours the category display cap)."""
        if self.display_children is not None:
            return self.display_children
        return self.children

    def walk(self) -> Iterator["TreeNode"]:
        """Depth-first pre-order traversal over the full (untruncated) tree."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class EcosystemTree:
    """
    Root hand-off value for every renderer or exporter.

    Attributes:
        root: Root node (kind "root") with one child per project.
        stats: Ecosystem-wide counters summed across project scans.
        health_percentage: Bonus-adjusted score of stats.
        health_status: healthy, warning or critical.
        mode: Grouping mode used to build the tree.
    """
    root: TreeNode
    stats: ProjectStats
    health_percentage: int
    health_status: str
    mode: str
