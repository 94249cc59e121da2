"""Exceptions raised by the notation layer."""

from __future__ import annotations


class PgnError(ValueError):
    """Base class for PGN parse and model errors."""


class PgnGrammarError(PgnError):
    """No alternative of a grammar rule matched the input.

    Attributes:
        rule: Name of the rule that failed.
        position: Offset into the scanned text where the rule was attempted.
    """

    def __init__(self, rule: str, position: int, detail: str = "") -> None:
        self.rule = rule
        self.position = position
        self.detail = detail
        message = f"Invalid PGN: no match for {rule} at offset {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnrepresentableMoveError(PgnError):
    """A SAN ply was constructed in a shape that cannot be written as SAN."""


class ResultMismatchError(PgnError):
    """Result tag and movetext termination marker disagree."""
