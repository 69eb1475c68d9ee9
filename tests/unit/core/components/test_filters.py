from __future__ import annotations

"""
Unit tests for the Path Filtering Engine.

Verifies:
1. Hidden-entry handling and the directory deny-list.
2. Depth gating (shallow admission, important keywords, hard ceiling).
3. File inclusion order (deny-list first, JSON gating, important paths).
4. Project-boundary exclusion at the scan root.
"""

import pytest

from routehealth.core.pipeline.components.filters import (
    is_config_json,
    is_excluded_file,
    is_hidden,
    should_exclude_from_project_boundary,
    should_include_directory,
    should_include_file,
    should_skip_directory,
)

# -----------------------------------------------------------------------------
# DIRECTORY RULES
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("name", [".git", ".idea", ".next", ".cache"])
def test_hidden_directories_are_skipped(name: str) -> None:
    assert should_skip_directory(name, name, 0) is True
    assert should_include_directory(name, name, 0) is False


@pytest.mark.parametrize("name", [".github", ".vscode", ".husky", ".config", ".vscode-extensions"])
def test_allowlisted_hidden_directories_are_admitted(name: str) -> None:
    assert should_include_directory(name, name, 0) is True


@pytest.mark.parametrize("name", ["node_modules", "dist", "Build", "COVERAGE", "__pycache__", "logs"])
def test_deny_listed_directories_are_skipped_case_insensitively(name: str) -> None:
    assert should_include_directory(name, name, 1) is False


def test_extra_skip_dirs_extend_the_deny_list() -> None:
    assert should_include_directory("generated", "generated", 0) is True
    assert should_include_directory("generated", "generated", 0, ["Generated"]) is False


def test_shallow_directories_are_admitted_unconditionally() -> None:
    assert should_include_directory("random", "a/b/c/d/random", 5) is True


def test_deep_directories_need_an_important_keyword() -> None:
    assert should_include_directory("random", "a/b/c/d/e/f/random", 6) is False
    assert should_include_directory("handlers", "a/b/c/d/e/f/handlers", 6) is True


def test_deep_directories_inherit_importance_from_path_segments() -> None:
    assert should_include_directory("widgets", "src/a/b/c/d/e/widgets", 6) is True


def test_deep_test_and_doc_directories_are_excluded() -> None:
    assert should_include_directory("tests", "src/a/b/c/d/e/tests", 6) is False
    assert should_include_directory("docs", "src/a/b/c/d/e/docs", 7) is False
    # Still admitted while shallow
    assert should_include_directory("tests", "src/tests", 1) is True


def test_depth_ceiling_is_never_crossed() -> None:
    # A directory found while listing depth 11 is itself listed at depth 12
    assert should_include_directory("src", "src", 11) is True
    assert should_skip_directory("src", "src", 11) is False
    assert should_include_directory("src", "src", 12) is False
    assert should_skip_directory("src", "src", 12) is True

# -----------------------------------------------------------------------------
# FILE RULES
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("name", [
    "styles.css", "index.html", "logo.svg", "font.woff2", "bundle.js.map",
    "vendor.min.js", "app.test.ts", "button.spec.tsx", "yarn.lock", "package-lock.json",
])
def test_deny_listed_files_are_excluded(name: str) -> None:
    assert is_excluded_file(name) is True
    assert should_include_file(name, name) is False


def test_deny_list_wins_over_important_paths() -> None:
    assert should_include_file("theme.css", "brain/theme.css") is False


@pytest.mark.parametrize("name", ["index.ts", "App.tsx", "main.py", "server.go", "deploy.sh"])
def test_source_code_files_are_included(name: str) -> None:
    assert should_include_file(name, f"src/{name}") is True


def test_json_requires_a_configuration_like_name() -> None:
    assert is_config_json("tsconfig.json") is True
    assert should_include_file("package.json", "package.json") is True
    assert should_include_file("settings.json", ".vscode/settings.json") is True
    assert should_include_file("data.json", "data.json") is False


def test_config_data_extensions_are_included() -> None:
    assert should_include_file("docker-compose.yml", "docker-compose.yml") is True
    assert should_include_file("pyproject.toml", "pyproject.toml") is True


def test_other_files_need_an_important_path() -> None:
    assert should_include_file("README.md", "README.md") is False
    assert should_include_file("notes.md", "brain/notes.md") is True
    assert should_include_file("run", "tools/scripts/run") is True


def test_hidden_files_are_never_included() -> None:
    assert is_hidden(".env") is True
    assert should_include_file(".env", ".env") is False
    assert should_include_file(".eslintrc.js", "brain/.eslintrc.js") is False

# -----------------------------------------------------------------------------
# PROJECT BOUNDARY
# -----------------------------------------------------------------------------

def test_boundary_exclusion_matches_name_or_relative_path() -> None:
    exclusions = ["ava", "maestro-brain/"]
    assert should_exclude_from_project_boundary("ava", "ava", exclusions) is True
    assert should_exclude_from_project_boundary("maestro-brain", "maestro-brain", exclusions) is True
    assert should_exclude_from_project_boundary("src", "src", exclusions) is False


def test_boundary_exclusion_without_exclusions_is_noop() -> None:
    assert should_exclude_from_project_boundary("ava", "ava", ()) is False
