"""PlainQuery logging utilities.

Log lines carry a timestamp and an abbreviated level. Console logging goes to
stderr so that translated queries on stdout can be piped cleanly.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("PlainQuery")


def configure_logging(
    *,
    level: str = "WARNING",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Configure the PlainQuery logger.

    Uses format: mm-dd HH:MM:SS [<LVL>] <message>
    where LVL is one of: DEBG/INFO/WARN/ERRO.

    Args:
        level: Console logging level (e.g., WARNING, DEBUG).
        action: CLI action name used to name the log file.
        log_to_file: Whether to mirror logs, at DEBUG, to a file.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when logging to console only.
    """
    resolved_level = getattr(logging, (level or "WARNING").upper(), logging.WARNING)

    formatter = _AbbrevLevelFormatter(
        fmt="%(asctime)s [%(levelabbr)s] %(message)s",
        datefmt="%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    log_path: Path | None = None
    if log_to_file and action:
        timestamp = datetime.now().strftime("%m%d%H%M%S")
        action_dir = Path(log_dir or "log") / action
        action_dir.mkdir(parents=True, exist_ok=True)
        log_path = action_dir / f"{action}_{timestamp}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for old_handler in list(log.handlers):
        log.removeHandler(old_handler)
        old_handler.close()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if log_path else resolved_level)
    log.propagate = False
    return log_path
