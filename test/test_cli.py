# test/test_cli.py

import json

import pytest

from promptline.cli.cli_router import TYPE_CHOICES, main
from promptline.core.config_schema import InputSettings
from promptline.io_adapters.io_adapter import IOAdapter


def lines(pair):
    return pair.written.splitlines()


def run(argv, pair, settings=None):
    return main(argv, adapter=pair.adapter, settings=settings or InputSettings())


class InterruptingAdapter(IOAdapter):
    """Fake io_adapter whose collect() behaves like Ctrl-C at the prompt."""
    def __init__(self):
        self.history = []

    def prompt(self, message):
        self.history.append(("prompt", message))

    def collect(self, prompt_text):
        self.history.append(("collect", prompt_text))
        raise KeyboardInterrupt


def test_single_value(streams):
    pair = streams("250\n")
    assert run(["--type", "u8"], pair) == 0
    assert pair.written == "Enter u8: 250\n"


def test_custom_prompt_and_retry(streams):
    pair = streams("x\n3.5\n")
    assert run(["--type", "f64", "--prompt", "Price? "], pair) == 0
    assert pair.written == "Price? Price? 3.5\n"


def test_no_retry_reports_parse_error(streams):
    pair = streams("x\n")
    assert run(["--type", "i32", "--no-retry"], pair) == 2
    assert "Parse Error: invalid digit found in string" in pair.written


def test_end_of_input_reports_io_error(streams):
    pair = streams("")
    assert run(["--type", "char"], pair) == 1
    assert "I/O Error" in pair.written


def test_ctrl_c_on_single_value_says_goodbye():
    adapter = InterruptingAdapter()
    assert main(["--type", "u8"], adapter=adapter, settings=InputSettings()) == 0
    assert adapter.history == [("collect", "Enter u8: "), ("prompt", "\nGoodbye!")]


def test_ctrl_c_in_menu_says_goodbye():
    adapter = InterruptingAdapter()
    assert main([], adapter=adapter, settings=InputSettings()) == 0
    assert adapter.history[-1] == ("prompt", "\nGoodbye!")


def test_bool_uses_configured_tokens(default_settings, streams):
    default_settings.true_tokens = ["sim"]
    default_settings.false_tokens = ["nao"]
    pair = streams("SIM\n")
    assert run(["--type", "bool"], pair, default_settings) == 0
    assert pair.written.endswith("True\n")


def test_default_retry_setting(default_settings, streams):
    default_settings.default_retry = False
    pair = streams("x\n1\n")
    assert run(["--type", "u8"], pair, default_settings) == 2


def test_settings_loaded_from_config_file(monkeypatch, tmp_path, streams):
    monkeypatch.chdir(tmp_path)
    for key in ("CONFIG", "DEFAULT_RETRY", "RETRY_MESSAGE", "LOG_FILE", "LOG_MAX_BYTES", "TRUE_TOKENS", "FALSE_TOKENS"):
        monkeypatch.delenv(f"PROMPTLINE_{key}", raising=False)
    path = tmp_path / "cli.json"
    path.write_text(json.dumps({"retry_message": "Again please."}), encoding="utf-8")
    pair = streams("x\n4\n")
    assert main(["--type", "u8", "--config", str(path)], adapter=pair.adapter) == 0
    assert pair.written == "Enter u8: Again please.\nEnter u8: 4\n"


def test_list_types(streams):
    pair = streams("")
    assert run(["--list"], pair) == 0
    assert lines(pair) == TYPE_CHOICES


def test_unknown_type_is_rejected(streams):
    with pytest.raises(SystemExit):
        run(["--type", "u7"], streams(""))


def test_menu_session(streams):
    i8_choice = TYPE_CHOICES.index("i8") + 1
    pair = streams(f"{i8_choice}\n-5\n99\n0\n")
    assert run([], pair) == 0
    assert "Got i8: -5" in pair.written
    assert "Invalid choice" in pair.written
    assert lines(pair)[-1].endswith("Goodbye!")


def test_menu_ends_on_end_of_input(streams):
    pair = streams("")
    assert run([], pair) == 0
    assert lines(pair)[-1] == "Goodbye!"


def test_menu_shows_parse_error_without_retry(streams):
    char_choice = TYPE_CHOICES.index("char") + 1
    pair = streams(f"{char_choice}\nxy\n0\n")
    assert run(["--no-retry"], pair) == 0
    assert "Parse Error: too many characters in string" in pair.written
