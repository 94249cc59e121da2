"""Text cursor used by the recursive-descent PGN grammars.

The cursor provides the three primitives the grammars are written in terms
of: literal matching, ordered alternatives with backtracking, and
repetition. Failures are reported as :class:`PgnGrammarError`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from pgnkit.core.errors import PgnGrammarError

T = TypeVar("T")

Rule = Callable[["Scanner"], T]

_WHITESPACE = " \t\r\n"
_DIGITS = "0123456789"


class Scanner:
    """Position-tracking cursor over an in-memory string."""

    __slots__ = ("_text", "_pos", "_length")

    def __init__(self, text: str, pos: int = 0) -> None:
        self._text = text
        self._pos = pos
        self._length = len(text)

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def text(self) -> str:
        return self._text

    def reset(self, pos: int) -> None:
        """Rewind (or advance) the cursor to an earlier :attr:`pos`."""
        self._pos = pos

    def at_end(self) -> bool:
        return self._pos >= self._length

    def peek(self, size: int = 1) -> str:
        return self._text[self._pos : self._pos + size]

    def remaining(self) -> str:
        return self._text[self._pos :]

    def fail(self, rule: str, detail: str = "") -> PgnGrammarError:
        """Build the error for *rule* failing at the current position."""
        return PgnGrammarError(rule, self._pos, detail)

    # ── Literals ─────────────────────────────────────────────────────────

    def accept(self, literal: str) -> bool:
        """Consume *literal* if it is next; report whether it was."""
        if self._text.startswith(literal, self._pos):
            self._pos += len(literal)
            return True
        return False

    def expect(self, literal: str, rule: str) -> None:
        if not self.accept(literal):
            raise self.fail(rule, f"expected {literal!r}")

    def accept_char(self, chars: str) -> str | None:
        """Consume one character if it belongs to *chars*."""
        if self._pos < self._length and self._text[self._pos] in chars:
            ch = self._text[self._pos]
            self._pos += 1
            return ch
        return None

    def accept_uint(self) -> int | None:
        """Consume a run of decimal digits and return its value."""
        end = self._pos
        while end < self._length and self._text[end] in _DIGITS:
            end += 1
        if end == self._pos:
            return None
        value = int(self._text[self._pos : end])
        self._pos = end
        return value

    def expect_uint(self, rule: str) -> int:
        value = self.accept_uint()
        if value is None:
            raise self.fail(rule, "expected a number")
        return value

    # ── Runs ─────────────────────────────────────────────────────────────

    def skip_whitespace(self) -> int:
        """Skip spaces and line breaks; return how many were skipped."""
        start = self._pos
        while self._pos < self._length and self._text[self._pos] in _WHITESPACE:
            self._pos += 1
        return self._pos - start

    def take_while_not(self, stop_chars: str) -> str:
        """Consume the longest (possibly empty) run of chars not in *stop_chars*."""
        start = self._pos
        while self._pos < self._length and self._text[self._pos] not in stop_chars:
            self._pos += 1
        return self._text[start : self._pos]

    def take_until(self, delimiter: str, rule: str) -> str:
        """Consume text up to (not including) *delimiter*; it must exist."""
        end = self._text.find(delimiter, self._pos)
        if end < 0:
            raise self.fail(rule, f"unterminated, expected {delimiter!r}")
        taken = self._text[self._pos : end]
        self._pos = end
        return taken

    def take_line(self) -> str:
        """Consume the rest of the line and its line break, if any."""
        end = self._text.find("\n", self._pos)
        if end < 0:
            line = self._text[self._pos :]
            self._pos = self._length
        else:
            line = self._text[self._pos : end]
            self._pos = end + 1
        return line.rstrip("\r")

    # ── Combinators ──────────────────────────────────────────────────────

    def first_of(self, rule: str, alternatives: Sequence[Rule[T]]) -> T:
        """Try *alternatives* in order and return the first success.

        Each failed alternative is rewound before the next is tried, so the
        order of *alternatives* decides which one wins on overlapping input.
        """
        start = self._pos
        for alternative in alternatives:
            try:
                return alternative(self)
            except PgnGrammarError:
                self._pos = start
        raise self.fail(rule)

    def optional(self, parser: Rule[T]) -> T | None:
        """Run *parser*; rewind and return ``None`` if it fails."""
        start = self._pos
        try:
            return parser(self)
        except PgnGrammarError:
            self._pos = start
            return None

    def many(self, parser: Rule[T]) -> list[T]:
        """Run *parser* until it fails; zero matches is fine."""
        results: list[T] = []
        while True:
            start = self._pos
            try:
                results.append(parser(self))
            except PgnGrammarError:
                self._pos = start
                return results
            if self._pos == start:
                # A rule that consumes nothing would repeat forever.
                return results
