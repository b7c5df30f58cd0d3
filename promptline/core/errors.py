# promptline/core/errors.py

# Fixed descriptions used by the boolean acquisition path
INVALID_VALUE = "Invalid Value"
IMPOSSIBLE_STATE = "Impossible state: plain text read reported a parse error"


class InputError(Exception):
    """Base class for every failure raised while acquiring input."""
    label = "Input Error"

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self):
        return f"{self.label}: {self.description}"


class InputIOError(InputError):
    """
    Reading or writing the underlying streams failed (closed stream, broken
    pipe, end of input). Never retried.
    """
    label = "I/O Error"


class InputParseError(InputError):
    """
    The entered text does not satisfy the target type's grammar.
    `description` is the target parser's own error text.
    """
    label = "Parse Error"

    def __init__(self, description: str, text: str | None = None, target: str | None = None):
        super().__init__(description)
        self.text = text
        self.target = target
