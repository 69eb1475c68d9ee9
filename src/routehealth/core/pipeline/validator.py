from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for an audit run, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion, choice
validation and default value injection. Untrusted input (CLI, JSON file) is
coerced with warnings unless `strict` is requested.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from routehealth.domain.config import OUTPUT_FORMATS, get_default_config
from routehealth.domain.constants import TREE_MODES

logger = logging.getLogger(__name__)

MIN_WORKERS = 1
MAX_WORKERS = 64


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an out-of-range or unknown value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing
    merged["workspace_path"] = _as_str(
        merged.get("workspace_path"), defaults["workspace_path"], "workspace_path", warnings, strict
    )
    merged["fallback_to_workspace"] = _as_bool(
        merged.get("fallback_to_workspace"), defaults["fallback_to_workspace"],
        "fallback_to_workspace", warnings, strict
    )
    merged["max_workers"] = _as_int(
        merged.get("max_workers"), defaults["max_workers"], "max_workers", warnings, strict,
        minimum=MIN_WORKERS, maximum=MAX_WORKERS
    )
    merged["extra_skip_dirs"] = _as_list_str(
        merged.get("extra_skip_dirs"), defaults["extra_skip_dirs"], "extra_skip_dirs", warnings, strict
    )
    merged["tree_mode"] = _as_choice(
        merged.get("tree_mode"), defaults["tree_mode"], "tree_mode", TREE_MODES, warnings, strict
    )
    merged["output_format"] = _as_choice(
        merged.get("output_format"), defaults["output_format"], "output_format",
        OUTPUT_FORMATS, warnings, strict
    )

    # 3. Domain-Specific Normalization
    merged["projects"] = _normalize_projects(merged.get("projects"), warnings, strict)

    for w in warnings:
        logger.debug(f"Config: {w}")
    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _fail(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _fail(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _fail(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_int(
        value: Any,
        fallback: int,
        field: str,
        warnings: List[str],
        strict: bool,
        *,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
) -> int:
    """Coerce numeric input into a bounded int."""
    if value is None:
        return fallback

    number: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif not strict and isinstance(value, str) and value.strip().lstrip("-").isdigit():
        number = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {number}.")

    if number is None:
        _fail(f"Invalid field '{field}': expected int, received {type(value).__name__}.", warnings, strict)
        return fallback

    if (minimum is not None and number < minimum) or (maximum is not None and number > maximum):
        _fail(f"Field '{field}' out of range [{minimum}, {maximum}]: {number}.", warnings, strict, ValueError)
        return fallback
    return number


def _as_choice(
        value: Any,
        fallback: str,
        field: str,
        choices: Sequence[str],
        warnings: List[str],
        strict: bool,
) -> str:
    """Accept only one of a fixed set of strings."""
    text = _as_str(value, fallback, field, warnings, strict)
    if text in choices:
        return text
    _fail(f"Invalid field '{field}': '{text}' is not one of {list(choices)}.", warnings, strict, ValueError)
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    _fail(
        f"Invalid field '{field}': expected list[str], received {type(value).__name__}.",
        warnings, strict
    )
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_projects(value: Any, warnings: List[str], strict: bool) -> List[Dict[str, Any]]:
    """
    Normalize custom project definitions.

    Each entry must provide a non-empty `name` and at least one candidate in
    `paths`; `exclude` is optional. Invalid entries are dropped.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        _fail(f"Invalid field 'projects': expected list, received {type(value).__name__}.", warnings, strict)
        return []

    out: List[Dict[str, Any]] = []
    for i, entry in enumerate(value):
        if not isinstance(entry, dict):
            msg = f"Invalid item in 'projects[{i}]': expected dict."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Item discarded.")
            continue

        name = entry.get("name")
        paths = _as_list_str(entry.get("paths"), [], f"projects[{i}].paths", warnings, strict)
        exclude = _as_list_str(entry.get("exclude"), [], f"projects[{i}].exclude", warnings, strict)

        if not isinstance(name, str) or not name.strip() or not paths:
            msg = f"Invalid item in 'projects[{i}]': 'name' and 'paths' are required."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Item discarded.")
            continue

        out.append({"name": name.strip(), "paths": paths, "exclude": exclude})
    return out
