from __future__ import annotations

"""
Project Discovery Registry.

Resolves the known-project table against a workspace root and scans every
project that exists. Candidate paths are tried relative to the workspace
first and to its parent second; a physical directory is never scanned twice
even when several definitions point at it.
"""

import logging
import os
from typing import Any, Collection, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from routehealth.core.services.scanner import scan_project
from routehealth.domain.constants import DEFAULT_PROJECTS, ProjectDefinition
from routehealth.domain.errors import NoProjectFoundError, NoWorkspaceError
from routehealth.domain.scan_models import ProjectScan
from routehealth.infra.fs import physical_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def discover_projects(
        workspace_root: Optional[str],
        *,
        definitions: Optional[Sequence[ProjectDefinition]] = None,
        max_workers: int = 1,
        extra_skip_dirs: Collection[str] = (),
        fallback_to_workspace: bool = False,
) -> List[ProjectScan]:
    """
    Locate and scan every known project beneath a workspace.

    Args:
        workspace_root: Directory the project table is resolved against.
        definitions: Project table override (defaults to DEFAULT_PROJECTS).
        max_workers: Thread count forwarded to each project scan.
        extra_skip_dirs: Additional directory names pruned in every scan.
        fallback_to_workspace: Scan the workspace itself when no project is found.

    Returns:
        List[ProjectScan]: One scan per resolved project, in table order.

    Raises:
        NoWorkspaceError: If the workspace root is empty or not a directory.
    """
    workspace = _require_workspace(workspace_root)
    table = tuple(definitions) if definitions is not None else DEFAULT_PROJECTS

    scans: List[ProjectScan] = []
    seen: Set[str] = set()

    for definition in table:
        try:
            project_root = resolve_project_root(workspace, definition)
        except NoProjectFoundError as e:
            logger.debug(f"{e}: {', '.join(e.candidates)}")
            continue

        key = physical_path(project_root)
        if key in seen:
            logger.debug(f"Skipping '{definition.display_name}': {project_root} already scanned")
            continue
        seen.add(key)

        scans.append(_scan(definition.display_name, project_root, definition.boundary_exclusions,
                           extra_skip_dirs, max_workers))

    if not scans and fallback_to_workspace:
        name = os.path.basename(workspace.rstrip(os.sep)) or workspace
        logger.info(f"No known project found, scanning workspace '{name}' as a single project")
        scans.append(_scan(name, workspace, (), extra_skip_dirs, max_workers))

    logger.info(f"Discovered {len(scans)} project(s) under {workspace}")
    return scans


def resolve_project_root(workspace: str, definition: ProjectDefinition) -> str:
    """
    Return the first existing candidate directory of a project.

    Raises:
        NoProjectFoundError: If no candidate exists.
    """
    tried = list(_candidate_locations(workspace, definition.candidate_paths))
    for candidate in tried:
        if os.path.isdir(candidate):
            return os.path.abspath(candidate)
    raise NoProjectFoundError(definition.display_name, tried)


def definitions_from_config(entries: Iterable[Dict[str, Any]]) -> List[ProjectDefinition]:
    """
    Build project definitions from validated configuration entries.

    Each entry carries `name`, `paths` and optionally `exclude`.
    """
    result: List[ProjectDefinition] = []
    for entry in entries:
        result.append(ProjectDefinition(
            display_name=entry["name"],
            candidate_paths=tuple(entry["paths"]),
            boundary_exclusions=tuple(entry.get("exclude", ())),
        ))
    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _require_workspace(workspace_root: Optional[str]) -> str:
    if not workspace_root or not str(workspace_root).strip():
        raise NoWorkspaceError("no workspace root was provided")
    workspace = os.path.abspath(workspace_root)
    if not os.path.isdir(workspace):
        raise NoWorkspaceError(f"workspace root is not a directory: {workspace}")
    return workspace


def _candidate_locations(workspace: str, candidates: Tuple[str, ...]) -> Iterable[str]:
    parent = os.path.dirname(workspace)
    for rel in candidates:
        yield os.path.join(workspace, rel)
    if parent and parent != workspace:
        for rel in candidates:
            yield os.path.join(parent, rel)


def _scan(
        name: str,
        root: str,
        exclusions: Collection[str],
        extra_skip_dirs: Collection[str],
        max_workers: int,
) -> ProjectScan:
    logger.debug(f"Scanning project '{name}' at {root}")
    result = scan_project(
        root,
        exclusions,
        extra_skip_dirs=extra_skip_dirs,
        max_workers=max_workers,
    )
    return ProjectScan(name=name, root_path=root, records=result.records, stats=result.stats)
