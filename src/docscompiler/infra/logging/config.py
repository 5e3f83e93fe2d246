from __future__ import annotations

"""
Build Log Settings.

Severity mapping and the frozen settings object consumed by
configure_logging. The CLI derives one from its --debug and --log-file
flags.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Third-party loggers that are chatty at DEBUG (extension loading, etc.)
NOISY_LIBRARY_LOGGERS: Tuple[str, ...] = ("MARKDOWN",)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the build log.

    Attributes:
        level: Minimum severity for docscompiler records.
        console: Mirror records on stderr.
        log_file: Optional rotating build log.
        max_bytes: Size of a log segment before it rolls over.
        backup_count: Rolled segments kept on disk.
        library_level: Severity floor applied to NOISY_LIBRARY_LOGGERS.
        console_fmt: Format of stderr lines.
        file_fmt: Format of build log lines.
        datefmt: Timestamp format of build log lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2
    library_level: str = "WARNING"

    console_fmt: str = "[%(levelname)s] %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings used by the command line front-end."""
        return cls(level="DEBUG" if debug else "INFO", log_file=log_file)
