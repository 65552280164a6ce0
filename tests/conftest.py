"""Shared fixtures for the Amenu tests."""

import pytest

from amenu.clipboard import ClipboardError
from amenu.entries import EntryStore


class FakeSink:
    def __init__(self) -> None:
        self.writes: list[str] = []

    def set_text(self, content: str) -> None:
        self.writes.append(content)


class FailingSink:
    def __init__(self) -> None:
        self.attempts = 0

    def set_text(self, content: str) -> None:
        self.attempts += 1
        raise ClipboardError("no selection owner")


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def store() -> EntryStore:
    return EntryStore({
        "Greeting": "Hello there",
        "Farewell": "Goodbye now",
        "Grocery list": "milk, eggs",
    })
