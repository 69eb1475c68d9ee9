from __future__ import annotations

"""
Unit tests for the audit engine.

Runs complete audits against small on-disk workspaces and checks the
result object, the output formats and the summary contents.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from routehealth.core.pipeline.engine import run_audit
from routehealth.domain.errors import NoWorkspaceError


@pytest.fixture
def workspace(tmp_path: Path, make_tree) -> Path:
    return make_tree(tmp_path / "my-app", {
        "src/handlers/a.ts": "export function a() { return 1; }\n",
        "src/handlers/b.ts": "",
        "node_modules/x.ts": "export const x = 1;\n",
    })


def _config(base: Dict[str, Any], workspace: Path, **overrides: Any) -> Dict[str, Any]:
    cfg = dict(base)
    cfg["workspace_path"] = str(workspace)
    cfg.update(overrides)
    return cfg


def test_run_audit_with_workspace_fallback(mock_config_dict, workspace: Path) -> None:
    result = run_audit(_config(mock_config_dict, workspace))

    assert result.workspace_path == str(workspace)
    assert result.mode == "folderPaths"
    assert [s.name for s in result.scans] == ["my-app"]

    summary = result.summary
    assert (summary["total"], summary["working"], summary["missing"]) == (2, 1, 1)
    assert summary["health_percentage"] == 50
    assert summary["health_status"] == "critical"
    assert summary["per_project"][0]["health"] == 50
    assert summary["category_breakdown"] == {"handler": 2, "music": 0}

    assert result.tree_lines[0] == "Ecosystem (50% health)"
    assert result.tree_lines[1] == "└── my-app (2 routes, 1 working)"


def test_run_audit_outline_format(mock_config_dict, workspace: Path) -> None:
    result = run_audit(_config(mock_config_dict, workspace, output_format="outline"))
    assert result.tree_lines[0] == "- Ecosystem (50% health)"


def test_run_audit_json_format(mock_config_dict, workspace: Path) -> None:
    result = run_audit(_config(mock_config_dict, workspace, output_format="json", tree_mode="category"))

    data = json.loads("\n".join(result.tree_lines))
    assert data["workspace_path"] == str(workspace)
    assert data["mode"] == "category"
    assert data["tree"]["stats"]["total"] == 2
    assert data["summary"] == result.summary


def test_run_audit_reports_issues_and_recommendations(mock_config_dict, workspace: Path) -> None:
    summary = run_audit(_config(mock_config_dict, workspace)).summary

    assert summary["issues"] == [{
        "project": "my-app",
        "path": "src/handlers/b.ts",
        "status": "error",
        "warnings": ["file is empty"],
    }]
    assert summary["recommendations"] == [
        "Fix 1 file(s) in error immediately",
        "Fix module: my-app/src/handlers/b.ts",
    ]


def test_run_audit_without_fallback_finds_nothing(mock_config_dict, workspace: Path) -> None:
    result = run_audit(_config(mock_config_dict, workspace, fallback_to_workspace=False))

    assert result.scans == []
    assert result.summary["health_percentage"] == 100
    assert result.tree_lines == ["Ecosystem (100% health)"]


def test_run_audit_uses_configured_projects(mock_config_dict, tmp_path: Path, make_tree) -> None:
    ws = make_tree(tmp_path / "ws", {
        "web/index.ts": "export const web = 1;",
        "web/api/route.ts": "export const api = 1;",
        "api/server.ts": "export const server = 1;",
    })
    projects = [
        {"name": "Web", "paths": ["web"], "exclude": ["api"]},
        {"name": "Api", "paths": ["api"]},
    ]

    result = run_audit(_config(mock_config_dict, ws, projects=projects, fallback_to_workspace=False))

    assert [(s.name, s.stats.total) for s in result.scans] == [("Web", 1), ("Api", 1)]


def test_run_audit_missing_workspace_raises(mock_config_dict, tmp_path: Path) -> None:
    with pytest.raises(NoWorkspaceError):
        run_audit(_config(mock_config_dict, tmp_path / "nowhere"))


def test_run_audit_keeps_health_of_projects_sharing_a_name(mock_config_dict, tmp_path: Path, make_tree) -> None:
    ws = make_tree(tmp_path / "ws", {
        "one/ok.ts": "export const ok = 1;",
        "two/ok.ts": "export const ok = 1;",
        "two/empty.ts": "",
    })
    projects = [
        {"name": "Site", "paths": ["one"]},
        {"name": "Site", "paths": ["two"]},
    ]

    result = run_audit(_config(mock_config_dict, ws, projects=projects, fallback_to_workspace=False))

    assert [p["health"] for p in result.summary["per_project"]] == [100, 50]
