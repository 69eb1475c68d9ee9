from __future__ import annotations

"""
Tree Renderer.

Converts the ecosystem tree into its text and JSON-ready representations.
Traversal is depth-first in insertion order, so the same tree always renders
to the same bytes. Category nodes render their display children only.
"""

from typing import Any, Dict, List

from routehealth.domain.scan_models import ProjectStats
from routehealth.domain.tree_models import EcosystemTree, TreeNode

_BRANCH = "├── "
_LAST_BRANCH = "└── "
_PIPE = "│   "
_SPACE = "    "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_ascii_tree(tree: EcosystemTree) -> List[str]:
    """
    Render the tree with ASCII connectors.

    Args:
        tree: Tree produced by the builder.

    Returns:
        List[str]: Root label followed by one line per visible node.
    """
    lines: List[str] = [tree.root.label]
    render_tree_structure(tree.root, lines)
    return lines


def render_tree_structure(node: TreeNode, lines: List[str], prefix: str = "") -> None:
    """
    Recursively append the visible children of `node` to `lines`.

    Args:
        node: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    children = node.visible_children
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = _LAST_BRANCH if is_last else _BRANCH
        lines.append(f"{prefix}{connector}{child.label}")

        if child.visible_children:
            render_tree_structure(child, lines, prefix + (_SPACE if is_last else _PIPE))


def render_outline(tree: EcosystemTree) -> List[str]:
    """
    Render the tree as a Markdown bullet outline (two spaces per level).

    Returns:
        List[str]: One bullet per visible node, root first.
    """
    lines: List[str] = []
    _outline(tree.root, 0, lines)
    return lines


def tree_to_dict(tree: EcosystemTree) -> Dict[str, Any]:
    """
    Build a JSON-serializable view of the whole tree.

    Category nodes expose their full children; `item_count` carries the
    true member count independently of the display cap.
    """
    return {
        "mode": tree.mode,
        "health_percentage": tree.health_percentage,
        "health_status": tree.health_status,
        "stats": stats_to_dict(tree.stats),
        "root": node_to_dict(tree.root),
    }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _outline(node: TreeNode, depth: int, lines: List[str]) -> None:
    lines.append(f"{'  ' * depth}- {node.label}")
    for child in node.visible_children:
        _outline(child, depth + 1, lines)


def stats_to_dict(stats: ProjectStats) -> Dict[str, int]:
    return {
        "total": stats.total,
        "working": stats.working,
        "missing": stats.missing,
        "folders": stats.folders,
        "files": stats.files,
        "empty_folders": stats.empty_folders,
    }


def node_to_dict(node: TreeNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": node.name,
        "kind": node.kind,
        "label": node.label,
        "stats": stats_to_dict(node.stats),
    }
    if node.health is not None:
        data["health"] = node.health
    if node.item_count:
        data["item_count"] = node.item_count
    if node.record is not None:
        data["path"] = node.record.path
        data["status"] = node.record.status
        data["warnings"] = list(node.record.warnings)
        data["record_kind"] = node.record.kind
        data["music_related"] = node.record.music_related
        data["is_empty_folder"] = node.record.is_empty_folder
    if node.children:
        data["children"] = [node_to_dict(child) for child in node.children]
    return data
