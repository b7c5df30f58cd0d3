# promptline/core/aliases.py

"""
Per-type shortcuts over get_input, generated from PARSER_TABLE.

    get_u8("Age: ")              # 0..255
    get_f64("Price: ", retry=False)
    get_char("Grade: ")
"""

from promptline.core.parsers import POINTER_BITS, CharParser, FloatParser, IntParser, StrParser
from promptline.core.reader import get_bool, get_input, read_line

# name -> (parser, description)
PARSER_TABLE = {
    "i8": (IntParser(8, True), "a signed 8-bit integer (-128 to 127)"),
    "u8": (IntParser(8, False), "an unsigned 8-bit integer (0 to 255)"),
    "i16": (IntParser(16, True), "a signed 16-bit integer (-32,768 to 32,767)"),
    "u16": (IntParser(16, False), "an unsigned 16-bit integer (0 to 65,535)"),
    "i32": (IntParser(32, True), "a signed 32-bit integer"),
    "u32": (IntParser(32, False), "an unsigned 32-bit integer"),
    "i64": (IntParser(64, True), "a signed 64-bit integer"),
    "u64": (IntParser(64, False), "an unsigned 64-bit integer"),
    "i128": (IntParser(128, True), "a signed 128-bit integer"),
    "u128": (IntParser(128, False), "an unsigned 128-bit integer"),
    "isize": (IntParser(POINTER_BITS, True, name="isize"), "a pointer-sized signed integer"),
    "usize": (IntParser(POINTER_BITS, False, name="usize"), "a pointer-sized unsigned integer"),
    "f32": (FloatParser(32), "a 32-bit floating point number"),
    "f64": (FloatParser(64), "a 64-bit floating point number"),
    "string": (StrParser(), "a line of text"),
    "char": (CharParser(), "a single character"),
}


def _make_getter(name, parser, description):
    def getter(prompt, retry=True, adapter=None, settings=None):
        return get_input(prompt, parser, retry=retry, adapter=adapter, settings=settings)

    getter.__name__ = getter.__qualname__ = f"get_{name}"
    getter.__doc__ = f"Ask the user for {description}; see get_input for retry and errors."
    return getter


def get_number(prompt, target, retry=True, adapter=None, settings=None):
    """Ask for any numeric type: a table name ("u16", "f32") or a parser/callable."""
    if isinstance(target, str):
        if target not in PARSER_TABLE or target in ("string", "char"):
            raise ValueError(f"unknown numeric type: {target!r}")
        target = PARSER_TABLE[target][0]
    return get_input(prompt, target, retry=retry, adapter=adapter, settings=settings)


GETTERS = {name: _make_getter(name, parser, description) for name, (parser, description) in PARSER_TABLE.items()}

get_i8 = GETTERS["i8"]
get_u8 = GETTERS["u8"]
get_i16 = GETTERS["i16"]
get_u16 = GETTERS["u16"]
get_i32 = GETTERS["i32"]
get_u32 = GETTERS["u32"]
get_i64 = GETTERS["i64"]
get_u64 = GETTERS["u64"]
get_i128 = GETTERS["i128"]
get_u128 = GETTERS["u128"]
get_isize = GETTERS["isize"]
get_usize = GETTERS["usize"]
get_f32 = GETTERS["f32"]
get_f64 = GETTERS["f64"]
get_string = GETTERS["string"]
get_char = GETTERS["char"]

__all__ = [
    "PARSER_TABLE", "GETTERS", "get_input", "get_bool", "get_number", "read_line",
    "get_i8", "get_u8", "get_i16", "get_u16", "get_i32", "get_u32", "get_i64", "get_u64",
    "get_i128", "get_u128", "get_isize", "get_usize", "get_f32", "get_f64", "get_string", "get_char",
]
