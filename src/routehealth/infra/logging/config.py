from __future__ import annotations

"""
Logging Configuration Models.

A scan logs one DEBUG record per non-working file and one INFO summary per
project. The CLI keeps the console at WARNING so that stdout and stderr stay
readable, and only `--debug` opens the per-file stream.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one initialization of the logging subsystem.

    Attributes:
        level: Minimum severity captured by every handler.
        console: Write records to stderr.
        log_file: Optional path of a rotating audit log.
        max_bytes: Size of one log segment before rotation.
        backup_count: Rotated segments kept next to the active log.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines (module name included to trace
            which stage of the scan produced a record).
        datefmt: Timestamp format for log file lines.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """
        Build the configuration used by the command line.

        Args:
            debug: Lower the threshold to DEBUG (per-file classification records).
            log_file: Optional rotating log destination.

        Returns:
            LoggingConfig: Console on stderr, WARNING unless debugging.
        """
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=log_file)
