# promptline/cli/cli_router.py

import argparse

from promptline.core.aliases import GETTERS, PARSER_TABLE, get_bool, get_input
from promptline.core.config_loader import load_config
from promptline.core.config_schema import InputSettings
from promptline.core.errors import InputIOError, InputParseError
from promptline.core.parsers import IntParser
from promptline.io_adapters.console_adapter import ConsoleAdapter

TYPE_CHOICES = list(PARSER_TABLE) + ["bool"]


def acquire(type_name: str, prompt: str, retry: bool, adapter, settings: InputSettings):
    """Acquires one value of `type_name` ("bool" uses the configured tokens)."""
    if type_name == "bool":
        return get_bool(prompt, settings.true_tokens, settings.false_tokens, retry=retry, adapter=adapter,
                        settings=settings)
    return GETTERS[type_name](prompt, retry=retry, adapter=adapter, settings=settings)


def print_menu(adapter):
    adapter.prompt("\nPick a type to read:")
    for index, name in enumerate(TYPE_CHOICES, start=1):
        adapter.prompt(f"{index:>2}. {name}")
    adapter.prompt(" 0. Exit")


def run_menu(retry: bool, adapter, settings: InputSettings):
    """
    Simulates a console session: choose a type, enter a value, see the result.
    """
    choice_parser = IntParser(8, False, name="menu choice")

    while True:
        print_menu(adapter)
        try:
            choice = get_input("Your choice: ", choice_parser, retry=True, adapter=adapter, settings=settings)
        except (InputIOError, KeyboardInterrupt):
            adapter.prompt("\nGoodbye!")
            return 0

        if choice == 0:
            adapter.prompt("Goodbye!")
            return 0
        if choice > len(TYPE_CHOICES):
            adapter.prompt(f"Invalid choice. Please pick 0 to {len(TYPE_CHOICES)}.")
            continue

        type_name = TYPE_CHOICES[choice - 1]
        try:
            value = acquire(type_name, f"Enter {type_name}: ", retry, adapter, settings)
        except InputParseError as e:
            adapter.prompt(str(e))
            continue
        except (InputIOError, KeyboardInterrupt):
            adapter.prompt("\nGoodbye!")
            return 0
        adapter.prompt(f"Got {type_name}: {value!r}")


def build_parser():
    ap = argparse.ArgumentParser("promptline", description="Read typed values from the console.")
    ap.add_argument("--type", dest="type_name", choices=TYPE_CHOICES, default=None,
                    help="Read a single value of this type and print it")
    ap.add_argument("--prompt", default=None, help="Prompt text (default: 'Enter <type>: ')")
    ap.add_argument("--no-retry", action="store_true", help="Fail on the first invalid entry")
    ap.add_argument("--list", action="store_true", help="List the supported types and exit")
    ap.add_argument("--config", default=None, help="JSON settings file (default: config/promptline.json)")
    return ap


def main(argv=None, adapter=None, settings: InputSettings | None = None):
    args = build_parser().parse_args(argv)
    adapter = adapter or ConsoleAdapter()
    # Only the console entry point reads .env, config files and PROMPTLINE_* vars
    settings = settings if settings is not None else load_config(args.config)
    retry = settings.default_retry and not args.no_retry

    if args.list:
        for name in TYPE_CHOICES:
            adapter.prompt(name)
        return 0

    if args.type_name is None:
        return run_menu(retry, adapter, settings)

    prompt = args.prompt if args.prompt is not None else f"Enter {args.type_name}: "
    try:
        value = acquire(args.type_name, prompt, retry, adapter, settings)
    except InputParseError as e:
        adapter.prompt(str(e))
        return 2
    except InputIOError as e:
        adapter.prompt(str(e))
        return 1
    except KeyboardInterrupt:
        adapter.prompt("\nGoodbye!")
        return 0
    adapter.prompt(str(value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
