# promptline/core/config_loader.py

import json
import os
from pathlib import Path
from dotenv import load_dotenv
from promptline.core.config_schema import InputSettings

DEFAULT_CONFIG_PATH = Path("config/promptline.json")
DEFAULT_ENV_PATH = Path(".env")
ENV_PREFIX = "PROMPTLINE_"

# env var suffix -> settings field; list fields are comma separated
ENV_FIELDS = {
    "DEFAULT_RETRY": "default_retry",
    "RETRY_MESSAGE": "retry_message",
    "LOG_FILE": "log_file",
    "LOG_MAX_BYTES": "log_max_bytes",
    "TRUE_TOKENS": "true_tokens",
    "FALSE_TOKENS": "false_tokens",
}
LIST_FIELDS = {"true_tokens", "false_tokens"}


def load_raw_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path.resolve()}")
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return raw


def env_overrides(environ=None) -> dict:
    """
    Collects PROMPTLINE_* variables into settings fields. Values stay strings;
    pydantic does the coercion ("false" -> False, "1024" -> 1024).
    """
    environ = os.environ if environ is None else environ
    result = {}
    for suffix, field in ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is None:
            continue
        if field in LIST_FIELDS:
            result[field] = [t for t in value.split(",")]
        else:
            result[field] = value
    return result

def load_config(path: Path | str | None = None) -> InputSettings:
    """
    Loads .env, the optional JSON config file and PROMPTLINE_* overrides,
    validates against the schema and returns a typed InputSettings.
    An explicitly given path must exist; the default one is optional.
    Every failure surfaces as RuntimeError. Only the CLI calls this; the
    reader functions take settings as an argument.
    """
    if DEFAULT_ENV_PATH.exists():
        load_dotenv(dotenv_path=DEFAULT_ENV_PATH)

    if path is None:
        # an empty PROMPTLINE_CONFIG counts as unset
        env_path = os.getenv(ENV_PREFIX + "CONFIG") or None
        path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        explicit = env_path is not None
    else:
        path = Path(path)
        explicit = True

    raw = {}
    if explicit or path.exists():
        try:
            raw = load_raw_config(path)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Configuration loading failed: {e}") from e
    raw.update(env_overrides())

    try:
        return InputSettings(**raw)
    except Exception as e:
        # Fail fast with clear message
        raise RuntimeError(f"Configuration validation failed: {e}") from e
