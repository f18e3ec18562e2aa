"""Splitting an input line into words, with quotes and ``$NAME`` expansion.

Single quotes keep their content literally; double quotes expand ``$NAME``.
A quote left open on the line is continued by reading further lines, each
requested with the ``"> "`` prompt, until a line with an odd number of that
quote character arrives or input ends.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping

ReadLine = Callable[[str], "str | None"]

CONTINUATION_PROMPT = "> "


def _is_name_char(char: str) -> bool:
    return (
        char == "_"
        or ("a" <= char <= "z")
        or ("A" <= char <= "Z")
        or ("0" <= char <= "9")
    )


def expand_dollar(
    text: str, index: int, environ: Mapping[str, str] | None = None
) -> tuple[str, int]:
    """Expand the ``$`` at ``text[index]``.

    Returns the expansion and the index just past what was consumed. A ``$``
    not followed by a name character stands for itself; an unset variable
    expands to the empty string.
    """
    env = os.environ if environ is None else environ
    start = index + 1
    if start >= len(text) or not _is_name_char(text[start]):
        return "$", index + 1
    end = start
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    return env.get(text[start:end], ""), end


def count_quotes(text: str | None, quote: str) -> int:
    """Count occurrences of the first character of *quote* in *text*."""
    if not text or not quote:
        return 0
    return text.count(quote[0])


def _join(left: str | None, right: str | None) -> str:
    # A missing side yields an empty result, as joining always has here.
    if left is None or right is None:
        return ""
    return left + right


def _read_continuation(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


class WordScanner:
    """Reads words one at a time from a command line."""

    def __init__(
        self,
        text: str,
        read_line: ReadLine | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._text = text
        self._pos = 0
        self._read_line = read_line if read_line is not None else _read_continuation
        self._environ = os.environ if environ is None else environ

    def _peek(self, offset: int = 0) -> str:
        return self._text[self._pos + offset : self._pos + offset + 1]

    def _expand_double(self, segment: str) -> str:
        """Expand ``$NAME`` in *segment*, dropping any ``"`` characters."""
        parts: list[str] = []
        index = 0
        while index < len(segment):
            char = segment[index]
            if char == '"':
                index += 1
                continue
            if char == "$":
                value, index = expand_dollar(segment, index, self._environ)
            else:
                value = char
                index += 1
            parts.append(value)
        return "".join(parts)

    def _continue_quote(
        self, pieces: list[str], quote: str, transform: Callable[[str], str]
    ) -> None:
        while (line := self._read_line(CONTINUATION_PROMPT)) is not None:
            closes = count_quotes(line, quote) % 2 == 1
            pieces.append(transform(line))
            if closes:
                break
            pieces.append("\n")

    def _single_quote(self) -> str:
        start = self._pos
        end = self._text.find("'", start + 1)
        if end != -1:
            self._pos = end + 1
            return self._text[start + 1 : end]
        pieces = [self._text[start + 1 :], "\n"]
        self._pos = len(self._text)
        self._continue_quote(pieces, "'", lambda line: line)
        return "".join(pieces)[:-1]

    def _double_quote(self) -> str | None:
        start = self._pos
        end = self._text.find('"', start + 1)
        if end != -1:
            self._pos = end + 1
            inner = self._text[start + 1 : end]
            return self._expand_double(inner) if inner else None
        pieces = [self._expand_double(self._text[start + 1 :]), "\n"]
        self._pos = len(self._text)
        self._continue_quote(pieces, '"', self._expand_double)
        return "".join(pieces)[:-1]

    def single_quoted(self) -> str | None:
        """Scan a word that starts with a single quote at the current position."""
        result: str | None = self._single_quote()
        while (char := self._peek()) and char not in '" ':
            piece = self._single_quote() if char == "'" else self.unquoted()
            result = _join(result, piece)
        return result

    def double_quoted(self) -> str | None:
        """Scan a word that starts with a double quote at the current position.

        Returns None for a word that is just an empty pair of double quotes.
        """
        result = self._double_quote()
        while (char := self._peek()) and char not in "' ":
            piece = self._double_quote() if char == '"' else self.unquoted()
            result = _join(result, piece)
        return result

    def unquoted(self) -> str:
        """Scan unquoted characters, then any quoted part joined to them."""
        parts: list[str] = []
        while (char := self._peek()) and char not in " '\"":
            if char == "$":
                value, self._pos = expand_dollar(self._text, self._pos, self._environ)
            else:
                value = char
                self._pos += 1
            parts.append(value)
        result: str | None = "".join(parts) if parts else None
        char, following = self._peek(), self._peek(1)
        if char == "'" and following != "'":
            result = _join(result, self.single_quoted())
        elif char == '"' and following != '"':
            result = _join(result, self.double_quoted())
        return "" if result is None else result

    def next_word(self) -> str | None:
        """Return the next word, or None when the line is used up."""
        while True:
            while self._peek() == " ":
                self._pos += 1
            char = self._peek()
            if not char:
                return None
            if char == "'":
                word = self.single_quoted()
            elif char == '"':
                word = self.double_quoted()
            else:
                word = self.unquoted()
            if word is not None:
                return word

    def words(self) -> Iterator[str]:
        """Yield every remaining word."""
        while (word := self.next_word()) is not None:
            yield word