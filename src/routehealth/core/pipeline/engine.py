from __future__ import annotations

"""
Core audit orchestration.

Coordinates one health audit:
1. Validates configuration and normalizes the workspace path.
2. Discovers and scans the known projects.
3. Builds the ecosystem tree in the configured mode.
4. Builds a summary with issues and recommendations, then renders the
   configured output format (ASCII tree, outline or a full JSON report).
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from routehealth.core.analysis.issues import build_recommendations, collect_issues
from routehealth.core.analysis.tree_builder import build_tree, category_breakdown
from routehealth.core.analysis.tree_renderer import (
    render_ascii_tree,
    render_outline,
    stats_to_dict,
    tree_to_dict,
)
from routehealth.core.pipeline.validator import validate_config
from routehealth.core.services.registry import definitions_from_config, discover_projects
from routehealth.domain.audit_models import AuditResult
from routehealth.domain.config import OUTPUT_JSON, OUTPUT_OUTLINE
from routehealth.domain.scan_models import ProjectScan
from routehealth.domain.tree_models import EcosystemTree
from routehealth.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_audit(config: Optional[Dict[str, Any]]) -> AuditResult:
    """
    Execute a full health audit.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AuditResult: Scans, tree, rendered lines and summary.

    Raises:
        NoWorkspaceError: If the workspace root does not exist.
    """
    logger.info("Audit started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    workspace = normalize_path(cfg["workspace_path"], os.getcwd())
    definitions = definitions_from_config(cfg["projects"]) if cfg["projects"] else None

    # -------------------------------------------------------------------------
    # 2) Discovery & Scanning
    # -------------------------------------------------------------------------
    scans = discover_projects(
        workspace,
        definitions=definitions,
        max_workers=cfg["max_workers"],
        extra_skip_dirs=cfg["extra_skip_dirs"],
        fallback_to_workspace=cfg["fallback_to_workspace"],
    )

    # -------------------------------------------------------------------------
    # 3) Tree Assembly & Rendering
    # -------------------------------------------------------------------------
    mode = cfg["tree_mode"]
    tree = build_tree(scans, mode)
    summary = build_summary(tree, scans)

    if cfg["output_format"] == OUTPUT_JSON:
        report = build_json_report(workspace, mode, tree, summary)
        lines = json.dumps(report, ensure_ascii=False, indent=2).splitlines()
    else:
        lines = render_lines(tree, cfg["output_format"])

    logger.info(
        f"Audit finished: {summary['total']} routes across {summary['projects']} project(s), "
        f"health {summary['health_percentage']}% ({summary['health_status']})"
    )

    return AuditResult(
        workspace_path=workspace,
        mode=mode,
        scans=scans,
        tree=tree,
        tree_lines=lines,
        summary=summary,
    )


def render_lines(tree: EcosystemTree, output_format: str) -> List[str]:
    """Render the tree as text lines: an outline, or the ASCII tree by default."""
    if output_format == OUTPUT_OUTLINE:
        return render_outline(tree)
    return render_ascii_tree(tree)


def build_json_report(
        workspace: str,
        mode: str,
        tree: EcosystemTree,
        summary: Dict[str, Any],
) -> Dict[str, Any]:
    """Assemble the complete JSON document printed for `--json`."""
    return {
        "workspace_path": workspace,
        "mode": mode,
        "summary": summary,
        "tree": tree_to_dict(tree),
    }


def build_summary(tree: EcosystemTree, scans: Sequence[ProjectScan]) -> Dict[str, Any]:
    """Aggregate totals, health, per-project figures and issues for reporting."""
    issues = collect_issues(scans)
    per_project = []
    # Project nodes are built one per scan, in scan order
    for scan, node in zip(scans, tree.root.children):
        per_project.append({
            "name": scan.name,
            "root_path": scan.root_path,
            "health": node.health,
            **stats_to_dict(scan.stats),
        })

    return {
        "projects": len(scans),
        "total": tree.stats.total,
        "working": tree.stats.working,
        "missing": tree.stats.missing,
        "folders": tree.stats.folders,
        "files": tree.stats.files,
        "empty_folders": tree.stats.empty_folders,
        "health_percentage": tree.health_percentage,
        "health_status": tree.health_status,
        "per_project": per_project,
        "category_breakdown": category_breakdown(scans),
        "issues": issues,
        "recommendations": build_recommendations(issues),
    }
