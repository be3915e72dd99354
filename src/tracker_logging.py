#!/usr/bin/env python3

"""
tracker_logging.py — Session log for PKlogview.

Every module reports through print("[Tag] ..."). init_redirectors() routes
stdout and stderr into pklogview.log as well as the console, so it has to run
before the other PKlogview modules are imported.
"""

import logging
import os
import sys
from datetime import datetime

from config import EXT_DIR

LOG_FILENAME = "pklogview.log"

logging.getLogger("PIL").setLevel(logging.WARNING)
logging.getLogger("PIL.PngImagePlugin").setLevel(logging.WARNING)


def setup_logging(log_dir=None):
    """Attach a file handler for this session (the previous log is overwritten)."""
    log_dir = log_dir or EXT_DIR
    log_file = os.path.join(log_dir, LOG_FILENAME)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError as e:
        print(f"[Logging] Could not create {log_file}: {e}")
        return log_file

    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(handler)
    return log_file


class LoggingPrintRedirector:
    """
    Stands in for sys.stdout/sys.stderr. Complete lines go to the console stream
    and to a logger; lines from the per-frame paths are dropped.
    """

    FRAME_CHATTER = (
        "[Drawing] Missing image:",
        "[Input] Click at",
        "[Theme] Font fallback",
        "pygame ",
        "Hello from the pygame community.",
    )

    def __init__(self, original_stdout, logger):
        self.original_stdout = original_stdout
        self.logger = logger
        self.buffer = ""

    def _emit(self, line, end="\n"):
        if not line.strip() or any(pattern in line for pattern in self.FRAME_CHATTER):
            return
        if self.original_stdout:
            self.original_stdout.write(line + end)
        self.logger.info(line.rstrip())

    def write(self, text):
        self.buffer += text
        *lines, self.buffer = self.buffer.split("\n")
        for line in lines:
            self._emit(line)

    def flush(self):
        if self.buffer:
            pending, self.buffer = self.buffer, ""
            self._emit(pending, end="")
        if self.original_stdout:
            self.original_stdout.flush()


def init_redirectors(version="1.0.0"):
    """
    Start the session log and swap in the redirectors. Calling it again
    returns the same log path without stacking a second redirector.
    """
    if isinstance(sys.stdout, LoggingPrintRedirector):
        return getattr(sys.stdout, "_log_file_path", "")

    log_file_path = setup_logging()
    app_logger = logging.getLogger("pklogview")

    sys.stdout = LoggingPrintRedirector(sys.stdout, app_logger)
    sys.stdout._log_file_path = log_file_path
    sys.stderr = LoggingPrintRedirector(sys.stderr, logging.getLogger("pklogview.error"))

    banner = [
        f"PKlogview {version}",
        f"Session started {datetime.now():%Y-%m-%d %H:%M:%S}",
        f"Log file: {log_file_path}",
        f"Python {sys.version.split()[0]} on {sys.platform}",
    ]
    app_logger.info("=" * 60)
    for line in banner:
        app_logger.info(line)
    app_logger.info("=" * 60)
    return log_file_path
