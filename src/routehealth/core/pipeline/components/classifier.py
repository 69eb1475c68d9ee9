from __future__ import annotations

"""
Heuristic File Health Classifier.

Assigns a working/warning/error status to one file from pattern matches on
its content. The rules are intentionally lenient: only empty files, explicit
stubs and placeholder-only files are errors, and only explicit urgency tags
or pasted compiler/runtime errors produce warnings. Style issues such as
debug prints, generic TODOs or loose typing are never reported.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from routehealth.core.pipeline.components.filters import is_source_code_file
from routehealth.core.pipeline.components.reader import read_text
from routehealth.domain.constants import STATUS_ERROR, STATUS_WARNING, STATUS_WORKING
from routehealth.domain.errors import FileReadError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SIGNATURES
# -----------------------------------------------------------------------------

_LEGITIMATE_CODE_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.MULTILINE) for p in (
        r"^\s*export\s+",
        r"\b(?:async\s+)?function\s*\*?\s*\w+\s*\(",
        r"^\s*(?:async\s+)?def\s+\w+\s*\(",
        r"\b(?:const|let|var)\s+[\w{\[]",
        r"\b(?:class|interface|enum)\s+\w+",
        r"\btype\s+\w+\s*(?:<[^>]*>)?\s*=",
        r"^\s*import\s+",
        r"^\s*from\s+[\w.]+\s+import\s+",
        r"\brequire\s*\(",
        r"\bmodule\.exports\b",
        r"\bexports\.\w+\s*=",
        r"^\s*[\"']?[\w.-]+[\"']?\s*[:=]\s*\S",
    )
)

_BROKEN_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE) for p in (
        r"throw\s+new\s+Error\s*\(\s*['\"`]\s*not\s+implemented",
        r"throw\s+new\s+Error\s*\(\s*['\"`]\s*todo",
        r"raise\s+NotImplementedError",
        r"(?://|#|/\*)\s*STUB\b",
        r"(?://|#|/\*)\s*PLACEHOLDER\b",
        r"(?://|#|/\*)\s*NOT\s+IMPLEMENTED\b",
        r"(?://|#|/\*)\s*TODO:?\s*implement\s+(?:everything|all)\b",
    )
)

_PLACEHOLDER_MARKER = re.compile(r"implement\s+(?:everything|all)\b", re.IGNORECASE)

_CRITICAL_MARKER = re.compile(r"\b(CRITICAL|URGENT|BROKEN)\b\s*[:!]")

_RUNTIME_ERROR_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.MULTILINE) for p in (
        r"^\s*(?:Uncaught\s+)?(?:SyntaxError|TypeError|ReferenceError|RangeError):\s+\S",
        r"\berror\s+TS\d{4}:",
        r"^Traceback \(most recent call last\):",
        r"undefined is not a function",
        r"^\s*Module not found: Error:",
    )
)

_COMMENT_PREFIXES: Tuple[str, ...] = ("//", "#", "/*", "*", "*/", "<!--")

EMPTY_FILE_WARNING = "file is empty"
STUB_WARNING = "file only contains an explicit not-implemented stub"
PLACEHOLDER_WARNING = "placeholder file with no implementation"

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Classification:
    """Status of one file plus its ordered diagnostics."""
    status: str
    warnings: Tuple[str, ...] = ()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify(path: str, content: str) -> Classification:
    """
    Classify a file from its path and already-read content.

    Args:
        path: File path (only the name/extension is consulted).
        content: Decoded file content.

    Returns:
        Classification: Status and warnings.
    """
    if not content.strip():
        return Classification(STATUS_ERROR, (EMPTY_FILE_WARNING,))

    name = path.replace("\\", "/").rsplit("/", 1)[-1]

    if is_source_code_file(name):
        legitimate = has_legitimate_code(content)

        if not legitimate and _matches_any(content, _BROKEN_PATTERNS):
            return Classification(
                STATUS_ERROR,
                (STUB_WARNING,),
            )

        if (
            not legitimate
            and count_code_lines(content) < 2
            and _PLACEHOLDER_MARKER.search(content)
        ):
            return Classification(
                STATUS_ERROR,
                (PLACEHOLDER_WARNING,),
            )

    warnings: List[str] = []

    marker = _CRITICAL_MARKER.search(content)
    if marker:
        warnings.append(f"contains {marker.group(1)} marker")

    if _matches_any(content, _RUNTIME_ERROR_PATTERNS):
        warnings.append("content looks like an unhandled compiler or runtime error")

    if warnings:
        return Classification(STATUS_WARNING, tuple(warnings))
    return Classification(STATUS_WORKING)


def classify_file(file_path: str, rel_path: str) -> Classification:
    """
    Read and classify one file. Never raises.

    Args:
        file_path: Absolute filesystem path.
        rel_path: Project-relative path used for the rules and log lines.

    Returns:
        Classification: error with the failure message if reading failed.
    """
    try:
        content = read_text(file_path)
    except FileReadError as e:
        logger.debug(f"Unreadable file {rel_path}: {e.reason}")
        return Classification(STATUS_ERROR, (str(e),))

    result = classify(rel_path, content)
    if result.status != STATUS_WORKING:
        logger.debug(f"{rel_path}: {result.status} {list(result.warnings)}")
    return result

# -----------------------------------------------------------------------------
# HEURISTIC HELPERS
# -----------------------------------------------------------------------------

def has_legitimate_code(content: str) -> bool:
    """True when at least one legitimate-code signature matches."""
    return _matches_any(content, _LEGITIMATE_CODE_PATTERNS)


def count_code_lines(content: str) -> int:
    """Number of non-blank lines that are not comments."""
    count = 0
    for line in content.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(_COMMENT_PREFIXES):
            count += 1
    return count


def _matches_any(content: str, patterns: Tuple[re.Pattern, ...]) -> bool:
    return any(rx.search(content) for rx in patterns)
