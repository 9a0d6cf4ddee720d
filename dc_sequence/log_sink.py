"""Append-only log file for command results."""

import datetime
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LogSink:
    """Appends timestamped records to a text file.

    Writing is best effort: failures are reported through ``logging`` and
    never interrupt the sequence.
    """

    def __init__(self, path):
        self.path = Path(path)

    def write(self, message: str):
        timestamp = datetime.datetime.now().isoformat(timespec="seconds")
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"[{timestamp}] {message}\n")
        except OSError as e:
            logger.warning("Could not write to log file %s: %s", self.path, e)
