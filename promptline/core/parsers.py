# promptline/core/parsers.py

"""
Parsers turn one trimmed line of text into a typed value.

Every parser exposes `name` and `parse(text)`; on failure `parse` raises
ValueError whose message is the target type's own error description. The
reader converts that into an InputParseError.
"""

import math
import re
import struct
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable

from promptline.core.errors import INVALID_VALUE

POINTER_BITS = struct.calcsize("P") * 8

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class Parser(ABC):
    name: str = "value"

    @abstractmethod
    def parse(self, text: str) -> Any:
        ...

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class IntParser(Parser):
    """Fixed-width integer, signed or unsigned, ASCII digits with an optional sign."""

    def __init__(self, bits: int, signed: bool, name: str | None = None):
        self.bits = bits
        self.signed = signed
        self.min_value = -(1 << (bits - 1)) if signed else 0
        self.max_value = (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1
        self.name = name or f"{'i' if signed else 'u'}{bits}"

    def parse(self, text: str) -> int:
        if text == "":
            raise ValueError("cannot parse integer from empty string")
        if not INT_RE.fullmatch(text) or (not self.signed and text.startswith("-")):
            raise ValueError("invalid digit found in string")
        value = int(text)
        if value > self.max_value:
            raise ValueError("number too large to fit in target type")
        if value < self.min_value:
            raise ValueError("number too small to fit in target type")
        return value


class FloatParser(Parser):
    def __init__(self, bits: int = 64):
        if bits not in (32, 64):
            raise ValueError(f"unsupported float width: {bits}")
        self.bits = bits
        self.name = f"f{bits}"

    def parse(self, text: str) -> float:
        if text == "":
            raise ValueError("cannot parse float from empty string")
        if not FLOAT_RE.fullmatch(text):
            raise ValueError("invalid float literal")
        value = float(text)
        if self.bits == 32:
            value = _to_single(value)
        return value


def _to_single(value: float) -> float:
    # Round to the nearest single-precision value; out of range becomes +/-inf
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class StrParser(Parser):
    name = "string"

    def parse(self, text: str) -> str:
        return text


class CharParser(Parser):
    name = "char"

    def parse(self, text: str) -> str:
        if text == "":
            raise ValueError("cannot parse char from empty string")
        if len(text) > 1:
            raise ValueError("too many characters in string")
        return text


class BoolTokenParser(Parser):
    """
    Case-insensitive membership test against caller supplied token sets.
    True tokens are checked first.
    """
    name = "bool"

    def __init__(self, true_tokens: Iterable[str], false_tokens: Iterable[str]):
        if isinstance(true_tokens, str) or isinstance(false_tokens, str):
            raise TypeError("token sets must be collections of strings, not a single string")
        self.true_tokens = frozenset(t.lower() for t in true_tokens)
        self.false_tokens = frozenset(t.lower() for t in false_tokens)

    def parse(self, text: str) -> bool:
        normalized = text.strip().lower()
        if normalized in self.true_tokens:
            return True
        if normalized in self.false_tokens:
            return False
        raise ValueError(INVALID_VALUE)


class CallableParser(Parser):
    """
    Adapts any constructor-like callable (int, Decimal, Fraction, ip_address...)
    whose failures surface as ValueError, TypeError or ArithmeticError.
    """

    def __init__(self, func: Callable[[str], Any], name: str | None = None):
        self.func = func
        self.name = name or getattr(func, "__name__", repr(func))

    def parse(self, text: str) -> Any:
        try:
            return self.func(text)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ValueError(str(e) or type(e).__name__) from e


def as_parser(target) -> Parser:
    """
    Accepts a Parser instance, `str`, or any callable taking the text.
    `bool` is refused: bool("no") is True, so booleans need explicit tokens.
    """
    if isinstance(target, Parser):
        return target
    if target is bool:
        raise TypeError("bool requires explicit token sets; use get_bool()")
    if target is str:
        return StrParser()
    if callable(target):
        return CallableParser(target)
    raise TypeError(f"cannot build a parser from {target!r}")
