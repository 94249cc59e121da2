"""Tests for the TimeControl tag grammar."""

import pytest

from pgnkit.core.errors import PgnGrammarError
from pgnkit.core.notation import (
    AddedIncrement,
    BronsteinIncrement,
    CorrespondencePeriod,
    DelayIncrement,
    HourGlassPeriod,
    IncrementalPeriod,
    MovesPerPeriod,
    NoTimeControlPeriod,
    SuddenDeathPeriod,
    UnknownPeriod,
    iter_periods,
    time_control_from_text,
)


class TestPeriods:
    def test_no_time_control(self) -> None:
        assert time_control_from_text("-") == NoTimeControlPeriod()

    def test_unknown(self) -> None:
        assert time_control_from_text("?") == UnknownPeriod()

    def test_correspondence_wins_over_unknown(self) -> None:
        assert time_control_from_text("?{1234 seconds per move}") == CorrespondencePeriod(1234)

    def test_hourglass(self) -> None:
        assert time_control_from_text("*100") == HourGlassPeriod(100)

    def test_sudden_death(self) -> None:
        assert time_control_from_text("98765") == SuddenDeathPeriod(98765)

    def test_incremental_with_added_seconds(self) -> None:
        assert time_control_from_text("123+456") == IncrementalPeriod(123, AddedIncrement(456))

    def test_incremental_with_delay(self) -> None:
        period = time_control_from_text("300+5{delay}")
        assert period == IncrementalPeriod(300, DelayIncrement(5))

    def test_incremental_with_bronstein_delay(self) -> None:
        period = time_control_from_text("300+5{Bronstien type delay}")
        assert period == IncrementalPeriod(300, BronsteinIncrement(5))

    def test_moves_per_period(self) -> None:
        assert time_control_from_text("40/40") == MovesPerPeriod(40, 40)


class TestChains:
    def test_delay_then_sudden_death(self) -> None:
        period = time_control_from_text("40/7200+30{delay}:900")
        assert period == MovesPerPeriod(
            moves=40,
            period_seconds=7200,
            increment=DelayIncrement(30),
            next_period=SuddenDeathPeriod(900),
        )
        assert str(period) == "40/7200+30{delay}:900"

    def test_long_chain(self) -> None:
        text = "23/45:10/10+12{delay}:255/456+123{Bronstien type delay}:*100"
        period = time_control_from_text(text)
        assert [type(p) for p in iter_periods(period)] == [
            MovesPerPeriod,
            MovesPerPeriod,
            MovesPerPeriod,
            HourGlassPeriod,
        ]
        assert str(period) == text

    def test_chain_bound(self) -> None:
        text = ":".join(["40/60"] * 5)
        assert len(list(iter_periods(time_control_from_text(text, max_periods=5)))) == 5
        with pytest.raises(PgnGrammarError, match="chained periods"):
            time_control_from_text(text, max_periods=4)

    def test_dangling_colon_is_rejected(self) -> None:
        with pytest.raises(PgnGrammarError):
            time_control_from_text("40/60:")


class TestRender:
    @pytest.mark.parametrize(
        "text",
        ["-", "?", "?{86400 seconds per move}", "*60", "180+2", "5400", "40/5400+30:1800+30"],
    )
    def test_render_is_exact_inverse(self, text: str) -> None:
        assert str(time_control_from_text(text)) == text

    def test_increment_suffixes(self) -> None:
        assert str(AddedIncrement(3)) == "+3"
        assert str(DelayIncrement(3)) == "+3{delay}"
        assert str(BronsteinIncrement(3)) == "+3{Bronstien type delay}"


class TestErrors:
    @pytest.mark.parametrize("text", ["", "abc", "40/", "+5", "10+x", "40/60 extra"])
    def test_malformed_values(self, text: str) -> None:
        with pytest.raises(PgnGrammarError):
            time_control_from_text(text)
