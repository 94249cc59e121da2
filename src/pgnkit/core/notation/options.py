"""Parse policy settings."""

from __future__ import annotations

from dataclasses import dataclass

from pgnkit.core.notation.time_control import DEFAULT_MAX_PERIODS


@dataclass(slots=True, frozen=True)
class PgnOptions:
    """Knobs for :func:`pgnkit.core.notation.parse_pgn`.

    Attributes:
        check_result_consistency: Reject games whose Result tag differs from
            the movetext termination marker. Off by default: both values are
            kept exactly as read.
        max_time_control_periods: Upper bound on ``:``-chained TimeControl
            periods.
    """

    check_result_consistency: bool = False
    max_time_control_periods: int = DEFAULT_MAX_PERIODS

    def __post_init__(self) -> None:
        if self.max_time_control_periods < 1:
            raise ValueError("max_time_control_periods must be at least 1")
