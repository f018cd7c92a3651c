"""
Exception types raised by the G-code tokenizer.
The interpreter catches these and turns them into per-line diagnostics.
"""


class GCodeSyntaxError(ValueError):
    """A word whose letter is not followed by a usable number."""

    def __init__(self, letter: str, remaining: str, message: str):
        self.letter = letter
        self.remaining = remaining
        self.original_message = message
        super().__init__(message)

    def __str__(self):
        return self.original_message


class MissingValueError(GCodeSyntaxError):
    """Letter at the very end of the line."""

    def __init__(self, letter: str):
        super().__init__(letter, "", f"expected value after '{letter}'")


class InvalidNumberError(GCodeSyntaxError):
    """Letter followed by text that does not start with a number."""

    def __init__(self, letter: str, remaining: str):
        super().__init__(
            letter, remaining, f"'{letter}' is not followed by a number: '{remaining}'"
        )
