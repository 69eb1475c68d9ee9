from __future__ import annotations

"""
Issue Collection and Recommendations.

Flattens every non-working record of an audit into an issue list (scan
order, one entry per file) and derives short remediation hints from the
error, warning and stub counts.
"""

from typing import Any, Dict, List, Sequence

from routehealth.core.pipeline.components.classifier import PLACEHOLDER_WARNING, STUB_WARNING
from routehealth.domain.constants import STATUS_ERROR, STATUS_WARNING
from routehealth.domain.scan_models import ProjectScan

MAX_FIX_SUGGESTIONS = 10

_STUB_WARNINGS = (STUB_WARNING, PLACEHOLDER_WARNING)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_issues(scans: Sequence[ProjectScan]) -> List[Dict[str, Any]]:
    """
    List every record whose status is not working.

    Args:
        scans: Project scans in discovery order.

    Returns:
        List[Dict[str, Any]]: {project, path, status, warnings} per file,
        projects in discovery order and records in scan order.
    """
    issues: List[Dict[str, Any]] = []
    for scan in scans:
        for record in scan.records:
            if record.is_working:
                continue
            issues.append({
                "project": scan.name,
                "path": record.path,
                "status": record.status,
                "warnings": list(record.warnings),
            })
    return issues


def build_recommendations(issues: Sequence[Dict[str, Any]]) -> List[str]:
    """
    Derive remediation hints from collected issues.

    Stubs and placeholders get their own hint and are not counted again as
    plain errors. Files in error are then named one by one, up to
    MAX_FIX_SUGGESTIONS.

    Args:
        issues: Output of `collect_issues`.

    Returns:
        List[str]: Ordered hints; empty when there are no issues.
    """
    stubs = [i for i in issues if _is_stub(i)]
    errors = [i for i in issues if i["status"] == STATUS_ERROR and not _is_stub(i)]
    warnings = [i for i in issues if i["status"] == STATUS_WARNING]

    recommendations: List[str] = []
    if errors:
        recommendations.append(f"Fix {len(errors)} file(s) in error immediately")
    if stubs:
        recommendations.append(f"Implement functionality in {len(stubs)} stub or placeholder file(s)")
    if warnings:
        recommendations.append(f"Review {len(warnings)} file(s) flagged with warnings")

    failing = [i for i in issues if i["status"] == STATUS_ERROR]
    for issue in failing[:MAX_FIX_SUGGESTIONS]:
        recommendations.append(f"Fix module: {issue['project']}/{issue['path']}")
    if len(failing) > MAX_FIX_SUGGESTIONS:
        recommendations.append(f"... and {len(failing) - MAX_FIX_SUGGESTIONS} more file(s) in error")

    return recommendations


def _is_stub(issue: Dict[str, Any]) -> bool:
    return any(w in _STUB_WARNINGS for w in issue["warnings"])
