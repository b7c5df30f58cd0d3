# test/conftest.py

import io

import pytest

from promptline.core.config_schema import InputSettings
from promptline.io_adapters.console_adapter import ConsoleAdapter


@pytest.fixture
def default_settings():
    """Schema defaults; tests tweak fields and pass the object explicitly."""
    return InputSettings()


class StreamPair:
    """An in-memory stdin/stdout pair wired into a ConsoleAdapter."""
    def __init__(self, text: str):
        self.input = io.StringIO(text)
        self.output = io.StringIO()
        self.adapter = ConsoleAdapter(out_stream=self.output, in_stream=self.input)

    @property
    def written(self) -> str:
        return self.output.getvalue()

    def remaining(self) -> str:
        return self.input.read()


@pytest.fixture
def streams():
    return StreamPair


class RecordingStream:
    """
    Stands in for both stdout and stdin and records the order of calls,
    so tests can check the prompt was flushed before the read.
    """
    def __init__(self, lines):
        self.lines = list(lines)
        self.events = []
        self.buffer = ""

    def write(self, text):
        self.events.append(("write", text))
        self.buffer += text
        return len(text)

    def flush(self):
        self.events.append(("flush", self.buffer))
        self.buffer = ""

    def readline(self):
        self.events.append(("readline", None))
        return self.lines.pop(0) if self.lines else ""


@pytest.fixture
def recording_stream():
    return RecordingStream
