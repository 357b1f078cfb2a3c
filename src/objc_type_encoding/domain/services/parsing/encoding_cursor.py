#!/usr/bin/env python3

"""Forward-only cursor over type-encoding text.

Both the full decoder and the method-signature splitter walk the input with
this cursor. Bracketed bodies are exposed as bounded sub-cursors over the
same string, so nested aggregates are scanned without copying substrings.
"""

from __future__ import annotations

from ...models.objc.encoding_constants import ESCAPE, QUOTE


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class EncodingCursor:
    """A position within ``text[start:end]``."""

    __slots__ = ("text", "pos", "end")

    def __init__(self, text: str, pos: int = 0, end: int | None = None) -> None:
        self.text = text
        self.pos = pos
        self.end = len(text) if end is None else end

    def __repr__(self) -> str:
        return f"EncodingCursor({self.remaining!r})"

    @property
    def at_end(self) -> bool:
        return self.pos >= self.end

    @property
    def remaining(self) -> str:
        return self.text[self.pos : self.end]

    def peek(self, offset: int = 0) -> str:
        """Character at ``pos + offset``, or "" past the end."""
        index = self.pos + offset
        return self.text[index] if index < self.end else ""

    def startswith(self, prefix: str) -> bool:
        return self.pos + len(prefix) <= self.end and self.text.startswith(prefix, self.pos)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, self.end)

    def take(self) -> str:
        """Consume and return one character ("" at the end)."""
        char = self.peek()
        self.advance()
        return char

    def find(self, char: str) -> int:
        """Absolute index of the next ``char`` before the end bound, or -1."""
        return self.text.find(char, self.pos, self.end)

    def slice(self, start: int, stop: int) -> EncodingCursor:
        """Bounded cursor over ``text[start:stop]``."""
        return EncodingCursor(self.text, start, stop)

    def read_digits(self) -> str:
        """Consume a maximal run of decimal digits (possibly empty)."""
        start = self.pos
        while self.pos < self.end and _is_digit(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def read_int(self) -> int | None:
        """Consume a run of decimal digits as an int; None if there is none."""
        digits = self.read_digits()
        return int(digits) if digits else None

    def _matching_close(self, open_char: str, close_char: str) -> int:
        """Index of the delimiter closing the one at ``pos``, or -1 if unbalanced.

        Only delimiters of the same kind are counted; other bracket kinds are
        left to the recursive calls that decode the body.
        """
        depth = 0
        for index in range(self.pos, self.end):
            char = self.text[index]
            if char == open_char:
                depth += 1
            elif char == close_char:
                depth -= 1
                if depth == 0:
                    return index
        return -1

    def read_balanced(self, open_char: str, close_char: str) -> EncodingCursor | None:
        """
        Consume a bracketed run starting at the current ``open_char``.

        Args:
            open_char: Opening delimiter expected at the cursor
            close_char: Matching closing delimiter

        Returns:
            Sub-cursor over the text between the delimiters, or None if the
            cursor is not on ``open_char`` or the run is unterminated
        """
        if self.peek() != open_char:
            return None
        close_index = self._matching_close(open_char, close_char)
        if close_index < 0:
            return None
        body = self.slice(self.pos + 1, close_index)
        self.pos = close_index + 1
        return body

    def skip_balanced(self, open_char: str, close_char: str) -> None:
        """Like read_balanced, but an unterminated run consumes the rest of the input."""
        close_index = self._matching_close(open_char, close_char)
        self.pos = self.end if close_index < 0 else close_index + 1

    def _closing_quote(self) -> int:
        index = self.pos + 1
        while index < self.end:
            char = self.text[index]
            if char == ESCAPE:
                index += 2
                continue
            if char == QUOTE:
                return index
            index += 1
        return -1

    def read_quoted(self) -> str | None:
        """
        Consume a double-quoted name starting at the cursor.

        Backslash-escaped characters do not terminate the name and are kept
        verbatim in the result.

        Returns:
            Text between the quotes, or None if not on a quote or unterminated
        """
        if self.peek() != QUOTE:
            return None
        close_index = self._closing_quote()
        if close_index < 0:
            return None
        name = self.text[self.pos + 1 : close_index]
        self.pos = close_index + 1
        return name

    def skip_quoted(self) -> None:
        """Like read_quoted, but an unterminated name consumes the rest of the input."""
        close_index = self._closing_quote()
        self.pos = self.end if close_index < 0 else close_index + 1
