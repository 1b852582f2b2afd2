"""Shared fixtures for file system tests."""

import pytest

from file_system import FileSystem


class LineFeeder:
    """Stands in for input(): returns queued lines, then raises EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def fs():
    return FileSystem()


@pytest.fixture
def feeder():
    return LineFeeder
