"""
FILE: worktravel/logging_setup.py
PURPOSE: One-time logging configuration for the CLI and REPL
EXPORTS:
  - setup_logging(log_dir, console_level, file_level) -> None
  - console_level_from_env() -> int
DEPENDENCIES:
  - logging (stdlib)
  - os, sys, pathlib (stdlib)
NOTES:
  - Console handler writes to stderr and only shows worktravel.* records
    (third-party records only at ERROR+)
  - Console defaults to WARNING so REPL output stays readable
  - File handler keeps everything at DEBUG in <log_dir>/worktravel.log
"""

import logging
import os
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Keep app logs; let other libraries through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("worktravel."):
            return True
        return record.levelno >= logging.ERROR


def console_level_from_env(default: int = logging.WARNING) -> int:
    """Read WORKTRAVEL_LOG_LEVEL (e.g. "INFO", "DEBUG")."""
    raw = os.environ.get("WORKTRAVEL_LOG_LEVEL")
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    log_dir: str | Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: filtered, stderr
    - File handler: full logs for debugging

    Call this once, before the first log record.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "worktravel.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
