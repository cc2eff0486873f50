"""
Logging utilities: colored console output when running in a TTY.
"""

import logging
import os
import sys

# ANSI codes (safe to use; reset is always appended)
_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",    # cyan
    logging.INFO: "\033[32m",     # green
    logging.WARNING: "\033[33m",  # yellow
    logging.ERROR: "\033[31m",    # red
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to a record when the output stream is a TTY.
    File handlers should use a plain Formatter (no color).
    """

    def __init__(self, fmt=None, datefmt=None, use_color=None):
        super().__init__(fmt, datefmt)
        if use_color is None:
            use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        self.use_color = use_color

    def format(self, record):
        message = super().format(record)
        if self.use_color and record.levelno in _LEVEL_COLORS:
            return _LEVEL_COLORS[record.levelno] + message + _RESET
        return message


def _resolve_level(name, default):
    """Map a level name such as "debug" to its number; unknown names give default."""
    if not name:
        return default
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else default


def setup_script_logging(
    log_format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    log_file=None,
    level=logging.INFO,
):
    """
    Configure the root logger for scripts: colored console (when TTY) and optional file.

    If CONFLUENCE_LOG_FILE is set, it overrides the log_file argument.
    CONFLUENCE_LOG_LEVEL (e.g. "DEBUG") overrides level; an unknown
    name falls back to level. At DEBUG every request URL issued by the
    session is logged.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(os.environ.get("CONFLUENCE_LOG_LEVEL"), level))
    # Remove existing handlers so we control console + file
    for h in root.handlers[:]:
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ColoredFormatter(log_format, datefmt=datefmt))
    root.addHandler(console)

    path = os.environ.get("CONFLUENCE_LOG_FILE") or log_file
    if path:
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(log_format, datefmt=datefmt))
        root.addHandler(fh)

    # urllib3 logs every connection at DEBUG; keep it quiet unless asked
    logging.getLogger("urllib3").setLevel(logging.WARNING)
