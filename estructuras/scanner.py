"""Whitespace-separated token reader over a block of text."""

import re

_WHITESPACE = re.compile(r"\s*")
_NAT = re.compile(r"\+?\d+")
_INT = re.compile(r"[+-]?\d+")
_DOUBLE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(r"\S+")


class Scanner:
    """Reads naturals, integers, reals, characters, words and lines from text.

    Every token reader skips leading whitespace first. Reading past the end
    raises EOFError; a token of the wrong shape raises ValueError.
    """

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def _skip_whitespace(self):
        self._pos = _WHITESPACE.match(self._text, self._pos).end()

    def _token(self, pattern, what):
        self._skip_whitespace()
        if self._pos >= len(self._text):
            raise EOFError(f"end of input while reading {what}")
        match = pattern.match(self._text, self._pos)
        if match is None:
            snippet = self._text[self._pos:self._pos + 16]
            raise ValueError(f"expected {what} at position {self._pos}: {snippet!r}")
        self._pos = match.end()
        return match.group()

    def read_nat(self):
        """Read a non-negative integer."""
        return int(self._token(_NAT, "a natural number"))

    def read_int(self):
        """Read a signed integer."""
        return int(self._token(_INT, "an integer"))

    def read_char(self):
        """Read the next non-whitespace character."""
        self._skip_whitespace()
        if self._pos >= len(self._text):
            raise EOFError("end of input while reading a character")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def read_double(self):
        """Read a real number."""
        return float(self._token(_DOUBLE, "a real number"))

    def read_word(self):
        """Read a run of non-whitespace characters."""
        return self._token(_WORD, "a word")

    def read_rest_of_line(self):
        """Return the text up to the next newline, leaving the newline unread."""
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        rest = self._text[self._pos:end]
        self._pos = end
        return rest

    def skip_line(self):
        """Consume and return the text up to and including the next newline."""
        end = self._text.find("\n", self._pos)
        end = len(self._text) if end == -1 else end + 1
        skipped = self._text[self._pos:end]
        self._pos = end
        return skipped

    def at_end(self):
        """Return True if only whitespace is left."""
        return _WHITESPACE.match(self._text, self._pos).end() >= len(self._text)