from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and merging
of configuration sources (defaults, persistent storage, and CLI overrides),
audit execution, and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from routehealth.core.pipeline.engine import run_audit
from routehealth.core.pipeline.validator import validate_config
from routehealth.domain.audit_models import AuditResult
from routehealth.domain.config import OUTPUT_JSON, get_default_config, load_config, save_config
from routehealth.domain.errors import NoWorkspaceError
from routehealth.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from routehealth.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_WORKSPACE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 no workspace, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, stdout stays clean for the report)
    log_file = None if args.log_file is None else (args.log_file or get_default_log_path())
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Map and merge command-line overrides
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 5. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 6. Audit execution phase
    try:
        result = run_audit(clean_conf)
    except NoWorkspaceError as e:
        logger.error(f"No workspace: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_NO_WORKSPACE
    except KeyboardInterrupt:
        logger.warning("Audit interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Audit failed: {e}", exc_info=True)
        print(f"ERROR: Audit failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering phase
    if clean_conf["output_format"] == OUTPUT_JSON:
        print("\n".join(result.tree_lines))
    else:
        _print_human_report(result)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "workspace_path", "tree_mode", "max_workers", "fallback_to_workspace",
        "extra_skip_dirs", "output_format",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_report(result: AuditResult) -> None:
    """
    Print the rendered tree, a short summary block, then issues and recommendations.

    Args:
        result: The audit result to render.
    """
    for line in result.tree_lines:
        print(line)

    summary = result.summary
    print()
    print(f"Workspace: {result.workspace_path}")
    print(f"Projects scanned: {summary['projects']}")
    print(
        f"Routes: {summary['total']} total, {summary['working']} working, "
        f"{summary['missing']} with issues"
    )
    print(f"Health: {summary['health_percentage']}% ({summary['health_status']})")

    if summary["issues"]:
        print()
        print(f"Issues ({len(summary['issues'])}):")
        for issue in summary["issues"]:
            detail = "; ".join(issue["warnings"])
            print(f"  [{issue['status']}] {issue['project']}/{issue['path']}: {detail}")

    if summary["recommendations"]:
        print()
        print("Recommendations:")
        for hint in summary["recommendations"]:
            print(f"  - {hint}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
