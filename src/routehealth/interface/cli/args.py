from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from routehealth.domain.config import OUTPUT_JSON, OUTPUT_OUTLINE
from routehealth.domain.constants import TREE_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the RouteHealth CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="routehealth",
        description="Scan a multi-project workspace and report source-file health as a tree.",
    )

    # --- Discovery ---
    p.add_argument(
        "-w", "--workspace",
        dest="workspace_path",
        default=None,
        help="Workspace root the known projects are resolved against (default: cwd).",
    )
    p.add_argument(
        "--no-fallback",
        action="store_true",
        help="Do not scan the workspace itself when no known project is found.",
    )

    # --- Scanning ---
    p.add_argument(
        "--workers",
        dest="max_workers",
        type=int,
        default=None,
        help="Threads used to scan each project's top-level entries.",
    )
    p.add_argument(
        "--skip-dir",
        dest="extra_skip_dirs",
        default=None,
        help="Comma-separated directory names to prune in addition to the built-in list.",
    )

    # --- Presentation ---
    p.add_argument(
        "--mode",
        dest="tree_mode",
        choices=TREE_MODES,
        default=None,
        help="Group routes by literal folder path or by semantic category.",
    )
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument(
        "--outline",
        action="store_true",
        help="Print a Markdown bullet outline instead of the ASCII tree.",
    )
    fmt.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the tree and summary as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration and start from defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for later runs.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Also write a rotating log file (default location when PATH is omitted).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["workspace_path"] = args.workspace_path
    overrides["tree_mode"] = args.tree_mode
    overrides["max_workers"] = args.max_workers

    if args.no_fallback:
        overrides["fallback_to_workspace"] = False
    if args.extra_skip_dirs:
        overrides["extra_skip_dirs"] = _split_csv(args.extra_skip_dirs)

    if args.outline:
        overrides["output_format"] = OUTPUT_OUTLINE
    elif args.json_output:
        overrides["output_format"] = OUTPUT_JSON

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
