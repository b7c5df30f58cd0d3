# promptline/core/reader.py

"""
Prompt, read one line, parse it; retry or fail.

Each call runs a two state loop: it keeps prompting until a line parses, the
streams fail (InputIOError, never retried) or, with retry disabled, the first
parse failure (InputParseError). Nothing is shared between calls.
"""

from typing import Any, Callable, Iterable

from promptline.core.config_schema import InputSettings
from promptline.core.errors import IMPOSSIBLE_STATE, InputError, InputIOError, InputParseError
from promptline.core.parsers import BoolTokenParser, Parser, StrParser, as_parser
from promptline.core.session import ReadSession
from promptline.io_adapters.console_adapter import ConsoleAdapter
from promptline.io_adapters.io_adapter import IOAdapter
from promptline.utils.structured_logger import log_event, redact_text


def read_line(prompt: str, adapter: IOAdapter | None = None) -> str:
    """Shows `prompt`, blocks for one line and returns it stripped."""
    adapter = adapter or ConsoleAdapter()
    return adapter.collect(prompt)


def _acquire(
    prompt: str,
    parser: Parser,
    retry: bool,
    adapter: IOAdapter,
    read: Callable[[str], str],
    settings: InputSettings,
) -> Any:
    session = ReadSession(target=parser.name, retry=retry)

    while True:
        session.start_attempt()
        log_event(session.call_id, "prompted", extra={"target": parser.name, "attempt": session.attempts},
                  settings=settings)

        try:
            text = read(prompt)
        except InputError as e:
            session.finish("io_error" if isinstance(e, InputIOError) else "parse_error")
            log_event(session.call_id, "read_failed", outcome="error",
                      extra={"kind": type(e).__name__, "description": e.description, **session.to_dict()},
                      settings=settings)
            raise

        try:
            value = parser.parse(text)
        except ValueError as e:
            description = str(e)
            session.record_parse_failure()
            log_event(session.call_id, "parse_failed", input_data=redact_text(text), outcome="error",
                      extra={"description": description, "attempt": session.attempts}, settings=settings)
            if not retry:
                session.finish("parse_error")
                raise InputParseError(description, text=text, target=parser.name) from e
            if settings.retry_message:
                adapter.prompt(settings.retry_message)
            continue

        session.finish("parsed")
        log_event(session.call_id, "parsed", input_data=redact_text(text), extra=session.to_dict(),
                  settings=settings)
        return value


def get_input(
    prompt: str,
    target=str,
    retry: bool = True,
    adapter: IOAdapter | None = None,
    settings: InputSettings | None = None,
) -> Any:
    """
    Ask for input until it parses into `target`.

    `target` is a Parser, `str`, or any callable that builds a value from
    text (int, float, Decimal, Fraction, ...). With `retry` a parse failure
    re-prompts; without it the first failure raises InputParseError.
    InputIOError is raised as soon as the streams fail, whatever `retry` is.
    `settings` defaults to InputSettings(); nothing is read from disk or env.
    """
    parser = as_parser(target)
    adapter = adapter or ConsoleAdapter()
    settings = settings if settings is not None else InputSettings()
    return _acquire(prompt, parser, retry, adapter, adapter.collect, settings)


def get_bool(
    prompt: str,
    true_tokens: Iterable[str],
    false_tokens: Iterable[str],
    retry: bool = True,
    adapter: IOAdapter | None = None,
    settings: InputSettings | None = None,
) -> bool:
    """
    Ask for a boolean answer matched case-insensitively against the given
    token sets, e.g. get_bool("Continue? ", {"y", "yes"}, {"n", "no"}).
    Unknown answers fail with "Invalid Value".
    """
    parser = BoolTokenParser(true_tokens, false_tokens)
    adapter = adapter or ConsoleAdapter()
    settings = settings if settings is not None else InputSettings()

    def read_text(text_prompt: str) -> str:
        text = adapter.collect(text_prompt)
        try:
            return StrParser().parse(text)
        except ValueError as e:
            # Plain text cannot fail to parse
            raise InputParseError(IMPOSSIBLE_STATE, target=parser.name) from e

    return _acquire(prompt, parser, retry, adapter, read_text, settings)
