"""PGN TimeControl tag model, parser and serializer (PGN standard §9.6.1).

Grammar, alternatives tried in this order::

    period      := "-"                              no time control
                 | "?{" N " seconds per move}"       correspondence
                 | "?"                              unknown
                 | "*" N                            hourglass
                 | N increment                      incremental
                 | N "/" N [increment] [":" period] moves per period
                 | N                                sudden death
    increment   := "+" N "{delay}" | "+" N "{Bronstien type delay}" | "+" N

The order matters: "?" is a prefix of the correspondence form, and a bare
number is a prefix of both the incremental and moves-per-period forms.
Delay and Bronstein increments have no PGN-standard spelling; the suffixes
above are the de facto ones.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from pgnkit.core.errors import PgnGrammarError
from pgnkit.core.scanner import Scanner

DEFAULT_MAX_PERIODS = 64

_DELAY_SUFFIX = "{delay}"
_BRONSTEIN_SUFFIX = "{Bronstien type delay}"


# ── Increments ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AddedIncrement:
    """Fischer increment: seconds added to the clock after each move."""

    seconds_per_move: int

    def __str__(self) -> str:
        return f"+{self.seconds_per_move}"


@dataclass(frozen=True, slots=True)
class DelayIncrement:
    """Simple (US) delay: the clock waits before it starts running."""

    seconds_per_move: int

    def __str__(self) -> str:
        return f"+{self.seconds_per_move}{_DELAY_SUFFIX}"


@dataclass(frozen=True, slots=True)
class BronsteinIncrement:
    """Bronstein delay: time spent is given back, up to the delay."""

    seconds_per_move: int

    def __str__(self) -> str:
        return f"+{self.seconds_per_move}{_BRONSTEIN_SUFFIX}"


TimeControlIncrement: TypeAlias = AddedIncrement | DelayIncrement | BronsteinIncrement


# ── Periods ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class UnknownPeriod:
    def __str__(self) -> str:
        return "?"


@dataclass(frozen=True, slots=True)
class NoTimeControlPeriod:
    def __str__(self) -> str:
        return "-"


@dataclass(frozen=True, slots=True)
class CorrespondencePeriod:
    """Each move must be made within the given time; no game limit."""

    move_time_seconds: int

    def __str__(self) -> str:
        return f"?{{{self.move_time_seconds} seconds per move}}"


@dataclass(frozen=True, slots=True)
class HourGlassPeriod:
    """Time spent on a move is credited to the opponent."""

    move_time_seconds: int

    def __str__(self) -> str:
        return f"*{self.move_time_seconds}"


@dataclass(frozen=True, slots=True)
class IncrementalPeriod:
    period_seconds: int
    increment: TimeControlIncrement

    def __str__(self) -> str:
        return f"{self.period_seconds}{self.increment}"


@dataclass(frozen=True, slots=True)
class SuddenDeathPeriod:
    period_seconds: int

    def __str__(self) -> str:
        return str(self.period_seconds)


@dataclass(frozen=True, slots=True)
class MovesPerPeriod:
    """``moves`` must be played within ``period_seconds``.

    ``next_period`` is the control that applies once this one is complete;
    ``None`` means the last period repeats.
    """

    moves: int
    period_seconds: int
    increment: TimeControlIncrement | None = None
    next_period: TimeControlPeriod | None = None

    def own_text(self) -> str:
        """This period alone, without the chained periods."""
        text = f"{self.moves}/{self.period_seconds}"
        if self.increment is not None:
            text += str(self.increment)
        return text

    def __str__(self) -> str:
        return ":".join(
            period.own_text() if isinstance(period, MovesPerPeriod) else str(period)
            for period in iter_periods(self)
        )


TimeControlPeriod: TypeAlias = (
    UnknownPeriod
    | NoTimeControlPeriod
    | CorrespondencePeriod
    | HourGlassPeriod
    | IncrementalPeriod
    | MovesPerPeriod
    | SuddenDeathPeriod
)


def iter_periods(period: TimeControlPeriod) -> Iterator[TimeControlPeriod]:
    """Yield *period* and every period chained after it."""
    current: TimeControlPeriod | None = period
    while current is not None:
        yield current
        current = current.next_period if isinstance(current, MovesPerPeriod) else None


# ── Parsing ─────────────────────────────────────────────────────────────────


def _parse_delay(scanner: Scanner) -> TimeControlIncrement:
    scanner.expect("+", "delay_increment")
    seconds = scanner.expect_uint("delay_increment")
    scanner.expect(_DELAY_SUFFIX, "delay_increment")
    return DelayIncrement(seconds)


def _parse_bronstein(scanner: Scanner) -> TimeControlIncrement:
    scanner.expect("+", "bronstein_increment")
    seconds = scanner.expect_uint("bronstein_increment")
    scanner.expect(_BRONSTEIN_SUFFIX, "bronstein_increment")
    return BronsteinIncrement(seconds)


def _parse_added(scanner: Scanner) -> TimeControlIncrement:
    scanner.expect("+", "added_increment")
    return AddedIncrement(scanner.expect_uint("added_increment"))


_INCREMENT_ALTERNATIVES = (_parse_delay, _parse_bronstein, _parse_added)


def parse_increment(scanner: Scanner) -> TimeControlIncrement:
    """Parse ``+N``, ``+N{delay}`` or ``+N{Bronstien type delay}``."""
    return scanner.first_of("time_control_increment", _INCREMENT_ALTERNATIVES)


def _parse_no_time_control(scanner: Scanner) -> TimeControlPeriod:
    scanner.expect("-", "no_time_control")
    return NoTimeControlPeriod()


def _parse_correspondence(scanner: Scanner) -> TimeControlPeriod:
    scanner.expect("?{", "correspondence")
    seconds = scanner.expect_uint("correspondence")
    scanner.expect(" seconds per move}", "correspondence")
    return CorrespondencePeriod(seconds)


def _parse_unknown(scanner: Scanner) -> TimeControlPeriod:
    scanner.expect("?", "unknown_time_control")
    return UnknownPeriod()


def _parse_hourglass(scanner: Scanner) -> TimeControlPeriod:
    scanner.expect("*", "hourglass")
    return HourGlassPeriod(scanner.expect_uint("hourglass"))


def _parse_incremental(scanner: Scanner) -> TimeControlPeriod:
    seconds = scanner.expect_uint("incremental")
    return IncrementalPeriod(seconds, parse_increment(scanner))


def _parse_moves_per_period(scanner: Scanner) -> TimeControlPeriod:
    # The ":" continuation is handled by parse_time_control's loop.
    moves = scanner.expect_uint("moves_per_period")
    scanner.expect("/", "moves_per_period")
    seconds = scanner.expect_uint("moves_per_period")
    increment = scanner.optional(parse_increment)
    return MovesPerPeriod(moves, seconds, increment)


def _parse_sudden_death(scanner: Scanner) -> TimeControlPeriod:
    return SuddenDeathPeriod(scanner.expect_uint("sudden_death"))


# Load-bearing order, see the module docstring.
_PERIOD_ALTERNATIVES = (
    _parse_no_time_control,
    _parse_correspondence,
    _parse_unknown,
    _parse_hourglass,
    _parse_incremental,
    _parse_moves_per_period,
    _parse_sudden_death,
)


def parse_time_control(
    scanner: Scanner, max_periods: int = DEFAULT_MAX_PERIODS
) -> TimeControlPeriod:
    """Parse a (possibly ``:``-chained) time control at the cursor."""
    chain = [scanner.first_of("time_control", _PERIOD_ALTERNATIVES)]
    while isinstance(chain[-1], MovesPerPeriod):
        before_colon = scanner.pos
        if not scanner.accept(":"):
            break
        try:
            period = scanner.first_of("time_control", _PERIOD_ALTERNATIVES)
        except PgnGrammarError:
            # Leave an unusable ":" tail for the caller to reject.
            scanner.reset(before_colon)
            break
        chain.append(period)
        if len(chain) > max_periods:
            raise scanner.fail(
                "time_control", f"more than {max_periods} chained periods"
            )

    # Link back to front so each period owns the one after it.
    linked: TimeControlPeriod | None = None
    for period in reversed(chain):
        if isinstance(period, MovesPerPeriod):
            period = MovesPerPeriod(
                period.moves, period.period_seconds, period.increment, linked
            )
        linked = period
    assert linked is not None
    return linked


def time_control_from_text(
    text: str, max_periods: int = DEFAULT_MAX_PERIODS
) -> TimeControlPeriod:
    """Parse a complete TimeControl tag value."""
    scanner = Scanner(text)
    period = parse_time_control(scanner, max_periods)
    if not scanner.at_end():
        raise scanner.fail("time_control", f"unexpected {scanner.remaining()!r}")
    return period
