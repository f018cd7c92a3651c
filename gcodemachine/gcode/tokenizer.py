"""G-code word tokenizer.

Splits one raw line into letter/number words.  Every call is pure: it takes
the text still to be read and returns the next word together with the text
that follows it, so looking ahead at a word and not consuming it is just a
matter of keeping the old text.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from gcodemachine.config import InterpreterConfig, DEFAULT_CONFIG
from gcodemachine.utils.errors import InvalidNumberError, MissingValueError


@dataclass(frozen=True)
class Word:
    """A single letter+number word and the line text following it."""

    letter: str  # upper-cased
    value: float
    remaining: str  # leading whitespace already skipped

    def __str__(self) -> str:
        return f"{self.letter}{self.value:g}"


# Decimal floating point: optional sign, optional fraction, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class GCodeTokenizer:
    """Stateless tokenizer producing :class:`Word` objects from a line."""

    def __init__(self, config: InterpreterConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def next_word(self, line: str) -> Word | None:
        """Read the next word from *line*.

        Parameters
        ----------
        line:
            Text still to be tokenized.

        Returns
        -------
        The next :class:`Word`, or None at end of line, at a comment or
        parameter-block marker, or at a checksum marker.

        Raises
        ------
        MissingValueError
            The letter is the last character of the line.
        InvalidNumberError
            The letter is followed by something other than a number.
        """
        text = line.lstrip()
        if not text or text[0] in self.config.line_terminators:
            return None

        letter = text[0].upper()
        # Checksums are not verified; the line simply ends here.
        if letter == self.config.checksum_marker:
            return None

        rest = text[1:].lstrip()
        if not rest:
            raise MissingValueError(letter)

        # "G0X1" must not be read as the hex literal 0X1: stop the number
        # before an x that directly follows its first character.
        end = 1 if rest[1:2] in ("x", "X") else len(rest)
        match = _NUMBER_RE.match(rest, 0, end)
        if match is None:
            raise InvalidNumberError(letter, rest)

        return Word(letter, float(match.group()), rest[match.end():].lstrip())

    def iter_words(self, line: str) -> Iterator[Word]:
        """Lazily yield the words of *line* until it is exhausted.

        A malformed word raises from the generator after all preceding words
        have been yielded.
        """
        remaining = line
        while True:
            word = self.next_word(remaining)
            if word is None:
                return
            yield word
            remaining = word.remaining
