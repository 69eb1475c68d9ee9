from __future__ import annotations

"""
Audit Domain Data Models.

Defines the result object handed from the audit engine to the interface
layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from routehealth.domain.scan_models import ProjectScan
from routehealth.domain.tree_models import EcosystemTree


@dataclass(frozen=True)
class AuditResult:
    """
    Unified result object of a complete audit run.

    Attributes:
        workspace_path: Normalized workspace root that was audited.
        mode: Tree grouping mode.
        scans: One scan per discovered project.
        tree: Assembled ecosystem tree.
        tree_lines: Rendered text lines in the configured output format.
        summary: Totals, health and per-project statistics.
    """
    workspace_path: str
    mode: str
    scans: List[ProjectScan]
    tree: EcosystemTree
    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)
