"""PGN tag-pair section: ``[Name "value"]`` entries and their sub-grammars."""

from __future__ import annotations

import logging
import re
from typing import Any

from pgnkit.core.errors import PgnGrammarError
from pgnkit.core.notation.models import (
    PgnDateTag,
    PgnRoundTag,
    PgnTagPairRoster,
    PgnTimeTag,
    RoundName,
    RoundNotApplicable,
    RoundUnknown,
    TagPair,
    unescape_tag_value,
)
from pgnkit.core.notation.movetext import skip_commentary, termination_from_text
from pgnkit.core.notation.time_control import DEFAULT_MAX_PERIODS, time_control_from_text
from pgnkit.core.scanner import Scanner

_LOGGER = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"[^\s\[\]\"]+")
_TAG_VALUE_RE = re.compile(r'"((?:[^"\\]|\\.)*)"')


# ── Date / time sub-grammars ────────────────────────────────────────────────


def _date_part(scanner: Scanner, unknown: str, rule: str) -> int | None:
    if scanner.accept(unknown):
        return None
    return scanner.expect_uint(rule)


def parse_date(text: str) -> PgnDateTag:
    """Parse ``YYYY.MM.DD``; ``????`` / ``??`` mark unknown parts.

    Raises:
        PgnGrammarError: if *text* is not a date.
    """
    scanner = Scanner(text)
    year = _date_part(scanner, "????", "date")
    scanner.expect(".", "date")
    month = _date_part(scanner, "??", "date")
    scanner.expect(".", "date")
    day = _date_part(scanner, "??", "date")
    if not scanner.at_end():
        raise scanner.fail("date", f"unexpected {scanner.remaining()!r}")
    return PgnDateTag(year, month, day)


def parse_time(text: str) -> PgnTimeTag:
    """Parse ``HH:MM:SS``; ``??`` marks an unknown part.

    Raises:
        PgnGrammarError: if *text* is not a time of day.
    """
    scanner = Scanner(text)
    hour = _date_part(scanner, "??", "time")
    scanner.expect(":", "time")
    minute = _date_part(scanner, "??", "time")
    scanner.expect(":", "time")
    second = _date_part(scanner, "??", "time")
    if not scanner.at_end():
        raise scanner.fail("time", f"unexpected {scanner.remaining()!r}")
    return PgnTimeTag(hour, minute, second)


def parse_round(text: str) -> PgnRoundTag:
    if text == "?":
        return RoundUnknown()
    if text == "-":
        return RoundNotApplicable()
    return RoundName(text)


def _date_or_unknown(value: str) -> PgnDateTag:
    try:
        return parse_date(value)
    except PgnGrammarError:
        _LOGGER.warning("Unreadable Date tag %r, treating it as unknown", value)
        return PgnDateTag()


def _time_or_unknown(value: str) -> PgnTimeTag:
    try:
        return parse_time(value)
    except PgnGrammarError:
        _LOGGER.warning("Unreadable Time tag %r, treating it as unknown", value)
        return PgnTimeTag()


# ── Tag pairs ───────────────────────────────────────────────────────────────


def parse_tag_pair(scanner: Scanner) -> TagPair:
    """Parse one ``[Name "value"]`` entry and the whitespace after it."""
    scanner.expect("[", "tag_pair")
    scanner.skip_whitespace()
    name_match = _TAG_NAME_RE.match(scanner.text, scanner.pos)
    if name_match is None:
        raise scanner.fail("tag_pair", "expected a tag name")
    scanner.reset(name_match.end())
    if not scanner.skip_whitespace():
        raise scanner.fail("tag_pair", "expected whitespace after the tag name")
    value_match = _TAG_VALUE_RE.match(scanner.text, scanner.pos)
    if value_match is None:
        raise scanner.fail("tag_pair", "expected a quoted value")
    scanner.reset(value_match.end())
    scanner.skip_whitespace()
    if not scanner.accept("]"):
        raise scanner.fail("tag_pair", "expected ']'")
    scanner.skip_whitespace()
    return TagPair(
        name_match.group(0),
        unescape_tag_value(value_match.group(1)),
        value_offset=value_match.start(1),
    )


def _parse_tag_pair_entry(scanner: Scanner) -> TagPair:
    pair = parse_tag_pair(scanner)
    skip_commentary(scanner)
    return pair


def _error_position(pair: TagPair, inner: int) -> int:
    """Offset of a failed sub-grammar, mapped from the stripped value to the text."""
    leading = len(pair.value) - len(pair.value.lstrip())
    base = 0 if pair.value_offset is None else pair.value_offset
    return base + leading + inner


def build_roster(
    tag_pairs: list[TagPair], max_time_control_periods: int = DEFAULT_MAX_PERIODS
) -> PgnTagPairRoster:
    """Fold tag pairs, in input order, into a roster.

    A repeated known tag keeps its last value. ``Setup`` is dropped because
    it is re-derived from ``FEN`` on output. Values read by a sub-grammar
    have surrounding whitespace stripped first.

    Raises:
        PgnGrammarError: for an unreadable Result or TimeControl value. Its
            position points into the parsed text when the pair came from
            :func:`parse_tag_pair`, into the value otherwise.
    """
    fields: dict[str, Any] = {}
    others: list[TagPair] = []
    for pair in tag_pairs:
        name, value = pair.name, pair.value
        stripped = value.strip()
        try:
            if name == "Event":
                fields["event"] = value
            elif name == "Site":
                fields["site"] = value
            elif name == "Date":
                fields["date"] = _date_or_unknown(stripped)
            elif name == "Round":
                fields["round"] = parse_round(stripped)
            elif name == "White":
                fields["white"] = value
            elif name == "Black":
                fields["black"] = value
            elif name == "Result":
                fields["result"] = termination_from_text(stripped)
            elif name == "Time":
                fields["time"] = _time_or_unknown(stripped)
            elif name == "TimeControl":
                fields["time_control"] = time_control_from_text(
                    stripped, max_time_control_periods
                )
            elif name == "FEN":
                fields["fen"] = value
            elif name.lower() == "setup":
                continue
            else:
                others.append(pair)
        except PgnGrammarError as exc:
            raise PgnGrammarError(
                f"{name} tag",
                _error_position(pair, exc.position),
                f"unreadable value {value!r}",
            ) from exc
    return PgnTagPairRoster(**fields, other_tags=tuple(others))


def parse_tag_section(
    scanner: Scanner, max_time_control_periods: int = DEFAULT_MAX_PERIODS
) -> PgnTagPairRoster:
    """Parse one or more tag pairs, each optionally followed by commentary."""
    pairs = scanner.many(_parse_tag_pair_entry)
    if not pairs:
        raise scanner.fail("tag_section", "expected at least one tag pair")
    return build_roster(pairs, max_time_control_periods)
