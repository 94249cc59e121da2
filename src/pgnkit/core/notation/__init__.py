"""Notation package: SAN, time-control and PGN parsing and serialization."""

from pgnkit.core.notation.models import (
    PgnDateTag,
    PgnFile,
    PgnMove,
    PgnMovetext,
    PgnRoundTag,
    PgnTagPairRoster,
    PgnTimeTag,
    RoundName,
    RoundNotApplicable,
    RoundUnknown,
    SanBasic,
    SanCapture,
    SanCapturePromotion,
    SanCastle,
    SanCoordinates,
    SanPly,
    SanPromotion,
    TagPair,
)
from pgnkit.core.notation.options import PgnOptions
from pgnkit.core.notation.pgn import canonicalize_pgn, parse_pgn, render_pgn
from pgnkit.core.notation.san import parse_san
from pgnkit.core.notation.time_control import (
    AddedIncrement,
    BronsteinIncrement,
    CorrespondencePeriod,
    DelayIncrement,
    HourGlassPeriod,
    IncrementalPeriod,
    MovesPerPeriod,
    NoTimeControlPeriod,
    SuddenDeathPeriod,
    TimeControlIncrement,
    TimeControlPeriod,
    UnknownPeriod,
    iter_periods,
    time_control_from_text,
)

__all__ = [
    # SAN
    "SanBasic",
    "SanCapture",
    "SanCapturePromotion",
    "SanCastle",
    "SanCoordinates",
    "SanPly",
    "SanPromotion",
    "parse_san",
    # Movetext
    "PgnMove",
    "PgnMovetext",
    # Tags
    "PgnDateTag",
    "PgnRoundTag",
    "PgnTagPairRoster",
    "PgnTimeTag",
    "RoundName",
    "RoundNotApplicable",
    "RoundUnknown",
    "TagPair",
    # Time control
    "AddedIncrement",
    "BronsteinIncrement",
    "CorrespondencePeriod",
    "DelayIncrement",
    "HourGlassPeriod",
    "IncrementalPeriod",
    "MovesPerPeriod",
    "NoTimeControlPeriod",
    "SuddenDeathPeriod",
    "TimeControlIncrement",
    "TimeControlPeriod",
    "UnknownPeriod",
    "iter_periods",
    "time_control_from_text",
    # Whole game
    "PgnFile",
    "PgnOptions",
    "canonicalize_pgn",
    "parse_pgn",
    "render_pgn",
]
