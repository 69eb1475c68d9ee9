from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies the byte-exact ASCII layout, the Markdown outline and the
JSON-ready dictionary view.
"""

import json

import pytest

from routehealth.core.analysis.tree_builder import build_tree
from routehealth.core.analysis.tree_renderer import render_ascii_tree, render_outline, tree_to_dict
from routehealth.domain.constants import STATUS_ERROR
from routehealth.domain.scan_models import ProjectScan, ProjectStats, RouteRecord, sum_stats


def _scan(name, records):
    stats = sum_stats(ProjectStats.for_record(r) for r in records)
    return ProjectScan(name=name, root_path=f"/ws/{name}", records=tuple(records), stats=stats)


@pytest.fixture
def app_scan() -> ProjectScan:
    return _scan("App", [
        RouteRecord(path="package.json", kind="config"),
        RouteRecord(path="src/empty", kind="folder", is_empty_folder=True),
        RouteRecord(path="src/handlers/a.ts", kind="handler"),
        RouteRecord(path="src/handlers/b.ts", kind="handler", status=STATUS_ERROR),
    ])


def test_ascii_tree_layout(app_scan: ProjectScan) -> None:
    lines = render_ascii_tree(build_tree([app_scan], "folderPaths"))

    assert lines == [
        "Ecosystem (75% health)",
        "└── App (4 routes, 3 working)",
        "    ├── ✅ package.json",
        "    └── src (2 folders, 2 files)",
        "        ├── ✅ empty/ (empty folder)",
        "        └── handlers (0 folders, 2 files)",
        "            ├── ✅ a.ts",
        "            └── ❌ b.ts",
    ]


def test_ascii_tree_uses_pipe_prefix_under_non_last_siblings(app_scan: ProjectScan) -> None:
    other = _scan("Lib", [RouteRecord(path="index.ts", kind="module", status="warning")])
    lines = render_ascii_tree(build_tree([app_scan, other], "folderPaths"))

    assert lines[1] == "├── App (4 routes, 3 working)"
    assert lines[2] == "│   ├── ✅ package.json"
    assert lines[-2] == "└── Lib (1 routes, 0 working)"
    assert lines[-1] == "    └── ⚠️ index.ts"


def test_rendering_is_reproducible(app_scan: ProjectScan) -> None:
    first = render_ascii_tree(build_tree([app_scan], "category"))
    second = render_ascii_tree(build_tree([app_scan], "category"))
    assert first == second


def test_outline(app_scan: ProjectScan) -> None:
    lines = render_outline(build_tree([app_scan], "folderPaths"))

    assert lines[:4] == [
        "- Ecosystem (75% health)",
        "  - App (4 routes, 3 working)",
        "    - ✅ package.json",
        "    - src (2 folders, 2 files)",
    ]
    assert lines[-1] == "        - ❌ b.ts"


def test_truncated_categories_render_display_children_only() -> None:
    records = [RouteRecord(path=f"handlers/f{i:03d}.ts", kind="handler") for i in range(120)]
    tree = build_tree([_scan("Big", records)], "category")

    lines = render_ascii_tree(tree)

    # root, project, category, folder, 100 routes
    assert len(lines) == 104
    assert lines[2] == "    └── Handlers (120 items, showing 100)"


def test_tree_to_dict_is_json_ready_and_keeps_counts(app_scan: ProjectScan) -> None:
    tree = build_tree([app_scan], "category")
    data = tree_to_dict(tree)

    json.dumps(data, ensure_ascii=False)
    assert data["mode"] == "category"
    assert data["health_percentage"] == 75
    assert data["stats"]["total"] == 4
    assert data["root"]["children"][0]["stats"]["working"] == 3

    routes = []

    def collect(node):
        if "status" in node:
            routes.append(node)
        for child in node.get("children", []):
            collect(child)

    collect(data["root"])
    assert len(routes) == 4
    assert {r["path"] for r in routes} == {r.path for r in app_scan.records}
