"""One-character lookahead cursor over a character source."""

from __future__ import annotations

import io
from typing import TextIO, Union

BLANKS = frozenset(" \t")


class Scanner:
    """Reads a string or text stream one character at a time.

    ``peek()`` is the current unconsumed character, or ``""`` once the
    source is exhausted. ``position`` counts the characters consumed so
    far, i.e. the offset of the lookahead character.
    """

    def __init__(self, source: Union[str, TextIO]):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._source = source
        self._current = ""
        self._at_end = False
        self.position = -1
        self.advance()

    def peek(self) -> str:
        return self._current

    def at_end(self) -> bool:
        return self._at_end

    def advance(self) -> None:
        if self._at_end:
            return
        ch = self._source.read(1)
        self.position += 1
        if ch == "":
            self._at_end = True
        self._current = ch

    def skip_blanks(self) -> None:
        while not self._at_end and self._current in BLANKS:
            self.advance()

    def discard_line(self) -> None:
        # Stops on the newline; the caller decides whether to consume it.
        while not self._at_end and self._current != "\n":
            self.advance()


__all__ = ["Scanner", "BLANKS"]
