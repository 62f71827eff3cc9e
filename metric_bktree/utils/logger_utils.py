# logger_utils.py - for logging messages and performance metrics, timestamps etc
# Used by the CLI and the benchmark harness. The tree/searcher never log.

import os
import time
from datetime import datetime

# Directory where log files go by default (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overriden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "metric_bktree.log")


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, echo: bool = False, use_color: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.echo = echo
        self.use_color = use_color

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

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
        Record a metric (timing, counts, ...) at INFO level.
        Example: [2026-01-01 12:45:02] INFO    | search latency: 0.123ms
        """
        self.write("INFO", f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("build"):
                tree.insert_all(words)
        It logs how long the block took once the block exits.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
