from __future__ import annotations

"""
Unit tests for issue collection and recommendations.
"""

from typing import List

from routehealth.core.analysis.issues import (
    MAX_FIX_SUGGESTIONS,
    build_recommendations,
    collect_issues,
)
from routehealth.core.pipeline.components.classifier import (
    EMPTY_FILE_WARNING,
    PLACEHOLDER_WARNING,
    STUB_WARNING,
)
from routehealth.domain.constants import STATUS_ERROR, STATUS_WARNING
from routehealth.domain.scan_models import ProjectScan, ProjectStats, RouteRecord, sum_stats


def _scan(name: str, records: List[RouteRecord]) -> ProjectScan:
    stats = sum_stats(ProjectStats.for_record(r) for r in records)
    return ProjectScan(name=name, root_path=f"/ws/{name}", records=tuple(records), stats=stats)


def _record(path: str, status: str = "working", *warnings: str) -> RouteRecord:
    return RouteRecord(path=path, kind="module", status=status, warnings=tuple(warnings))


def test_collect_issues_keeps_scan_order_and_skips_working_files():
    scans = [
        _scan("Web", [
            _record("a.ts"),
            _record("b.ts", STATUS_WARNING, "contains URGENT marker"),
        ]),
        _scan("Api", [_record("c.ts", STATUS_ERROR, EMPTY_FILE_WARNING)]),
    ]

    assert collect_issues(scans) == [
        {"project": "Web", "path": "b.ts", "status": "warning", "warnings": ["contains URGENT marker"]},
        {"project": "Api", "path": "c.ts", "status": "error", "warnings": [EMPTY_FILE_WARNING]},
    ]


def test_no_issues_means_no_recommendations():
    assert collect_issues([_scan("Web", [_record("a.ts")])]) == []
    assert build_recommendations([]) == []


def test_recommendations_separate_stubs_from_other_errors():
    issues = collect_issues([_scan("Web", [
        _record("empty.ts", STATUS_ERROR, EMPTY_FILE_WARNING),
        _record("stub.ts", STATUS_ERROR, STUB_WARNING),
        _record("todo.ts", STATUS_ERROR, PLACEHOLDER_WARNING),
        _record("hot.ts", STATUS_WARNING, "contains CRITICAL marker"),
    ])])

    assert build_recommendations(issues) == [
        "Fix 1 file(s) in error immediately",
        "Implement functionality in 2 stub or placeholder file(s)",
        "Review 1 file(s) flagged with warnings",
        "Fix module: Web/empty.ts",
        "Fix module: Web/stub.ts",
        "Fix module: Web/todo.ts",
    ]


def test_fix_suggestions_are_capped():
    records = [_record(f"f{i:02d}.ts", STATUS_ERROR, EMPTY_FILE_WARNING) for i in range(MAX_FIX_SUGGESTIONS + 3)]
    hints = build_recommendations(collect_issues([_scan("Web", records)]))

    fixes = [h for h in hints if h.startswith("Fix module: ")]
    assert len(fixes) == MAX_FIX_SUGGESTIONS
    assert fixes[0] == "Fix module: Web/f00.ts"
    assert hints[-1] == "... and 3 more file(s) in error"
