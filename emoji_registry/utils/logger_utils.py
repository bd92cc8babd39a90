# logger_utils.py - leveled logging for the registry and timing of table builds

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger for writing messages and tracking build metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "INFO",
        use_color: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.path = path
        self.level = level.upper()
        self.use_color = use_color
        self.stream = stream

    def configure(self, path: Optional[str] = None, level: Optional[str] = None,
                  use_color: Optional[bool] = None):
        """Re-point an existing logger, e.g. after the config file is read."""
        self.path = path
        if level is not None:
            if level.upper() not in LEVELS:
                raise ValueError(f"unknown log level: {level}")
            self.level = level.upper()
        if use_color is not None:
            self.use_color = use_color

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS.get(self.level, 20)

    def write(self, level: str, msg: str):
        """
        Write one log line to the console and, when a path is set, append it to the log file.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if not self.enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        # console goes to stderr so CLI output stays clean
        stream = self.stream or sys.stderr
        if self.use_color and level in self.COLORS:
            stream.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            stream.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timings, table sizes).
        Example: [12:45:02] qualification map built: 0.012s
        """
        self.write("DEBUG", f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("reference table"):
                build()
        It automatically logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, logger: Log, label):
        self.logger = logger
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, record how long it took as a metric."""
        self.elapsed = time.perf_counter() - self.start
        self.logger.metric(f"{self.label} done", round(self.elapsed, 3), "s")


# shared package logger
log = Log()


def configure_logging(cfg) -> Log:
    """Apply log_* settings from a Config to the shared logger."""
    log.configure(
        path=cfg.get("log_path"),
        level=cfg.get("log_level", "INFO"),
        use_color=cfg.get("log_color", True),
    )
    return log
