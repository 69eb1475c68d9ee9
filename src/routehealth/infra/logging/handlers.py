from __future__ import annotations

"""
Handler factories for the audit logger.

Handlers built here are tagged so that a repeated `configure_logging` call,
or `shutdown_logging` at the end of a test, removes exactly the handlers this
package installed and leaves pytest's capture handlers alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_routehealth_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(level_int: int, fmt: str) -> logging.StreamHandler:
    """Stderr handler; stdout is reserved for the rendered report."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(logging.Formatter(fmt))
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the rotating audit log, creating its directory when needed.

    An unwritable destination is reported once on stderr and the audit
    continues with console logging only.

    Args:
        log_file: Log file path.
        level_int: Numeric logging level.
        formatter: Formatter for file lines.
        max_bytes: Segment size before rollover.
        backup_count: Rotated segments to keep.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None if the file cannot be opened.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: audit log disabled, cannot open '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
