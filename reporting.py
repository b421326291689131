"""Reporters that receive the human-readable notices produced by accounts."""

import sys
from typing import List, TextIO

from logger import get_logger


class LoggingReporter:
    """Send notices to the application logger at INFO level."""

    def __init__(self):
        self.logger = get_logger()

    def report(self, message: str) -> None:
        self.logger.info(message)


class PrintReporter:
    """Print notices to a stream, stdout by default."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream

    def report(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)


class NullReporter:
    """Discard every notice."""

    def report(self, message: str) -> None:
        pass


class RecordingReporter:
    """Keep notices in memory, in the order they were reported."""

    def __init__(self):
        self.messages: List[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)


_REPORTERS = {
    "log": LoggingReporter,
    "print": PrintReporter,
    "none": NullReporter,
}


def build_reporter(name: str):
    """Build a reporter from its configuration name."""
    if name not in _REPORTERS:
        raise ValueError(f"Unknown reporter: {name}")
    return _REPORTERS[name]()


def get_available_reporters():
    """Get list of available reporter names."""
    return list(_REPORTERS.keys())
