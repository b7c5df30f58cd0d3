# promptline/io_adapters/console_adapter.py

import sys

from promptline.core.errors import InputIOError
from promptline.io_adapters.io_adapter import IOAdapter

# Faults a text stream can raise: OSError (broken pipe, closed fd),
# ValueError (I/O operation on closed file), UnicodeError (bad bytes).
STREAM_ERRORS = (OSError, ValueError, UnicodeError)


class ConsoleAdapter(IOAdapter):
    """
    A line-oriented IO adapter over a pair of text streams:
      - prompt(text): writes the message followed by a newline
      - collect(prompt_text): writes prompt_text (without newline), flushes,
                              reads one line and returns it stripped.

    Streams default to sys.stdout / sys.stdin, resolved on every call so
    redirection done after construction is still honoured.
    """
    def __init__(self, out_stream=None, in_stream=None):
        self._out = out_stream
        self._in = in_stream

    @property
    def out_stream(self):
        return self._out if self._out is not None else sys.stdout

    @property
    def in_stream(self):
        return self._in if self._in is not None else sys.stdin

    def prompt(self, text: str):
        try:
            self.out_stream.write(text + "\n")
            self.out_stream.flush()
        except STREAM_ERRORS as e:
            raise InputIOError(str(e) or type(e).__name__) from e

    def collect(self, prompt_text: str) -> str:
        try:
            self.out_stream.write(prompt_text)
            # The prompt must be visible before we block on input
            self.out_stream.flush()
            line = self.in_stream.readline()
        except STREAM_ERRORS as e:
            raise InputIOError(str(e) or type(e).__name__) from e

        # readline() returns "" only at end-of-stream; an empty entered line is "\n"
        if line == "":
            raise InputIOError("end of input stream reached")
        return line.strip()
