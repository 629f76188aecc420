"""Shared fixtures."""

import logging

import pytest
import structlog


class RecordingReporter:
    """Reporting stub that keeps every message."""

    def __init__(self):
        self.infos: list[str] = []
        self.debugs: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def debug(self, message: str) -> None:
        self.debugs.append(message)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configured by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
