"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

FISCHER_SPASSKY = """[Event "F/S Return Match"];
[Site "Belgrade, Serbia JUG"]
[Date "1992.11.04"]
[Round "29"]
[White "Fischer, Robert J."]
[Black "Spassky, Boris V."]
[Result "1/2-1/2"]
[TimeControl "?"]

1. e4!! e5!? 2. Nf3?! Nc6?? 3. Bb5$120 a6 {This opening is called the Ruy Lopez.}
4. Ba4 Nf6 5. O-O Be7 6. Re1 b5{Another Random Comment.} 7. Bb3 d6 8. c3 O-O
9. h3 Nb8 10. d4 Nbd7 11. c4 c6 12. cxb5 axb5 13. Nc3 Bb7
14. Bg5 (14. Bg5 b4 15. Nb1 h6) 14... b4 15. Nb1 h6 16. Bh4 c5 17. dxe5
Nxe4 18. Bxe7 Qxe7 19. exd6 {Another Random Comment.} 19... Qf6 20. Nbd2 Nxd6
43. Re6# {Another Random Comment.}1/2-1/2"""

FISCHER_SPASSKY_CANONICAL = (
    '[Event "F/S Return Match"]\n'
    '[Site "Belgrade, Serbia JUG"]\n'
    '[Date "1992.11.04"]\n'
    '[Round "29"]\n'
    '[White "Fischer, Robert J."]\n'
    '[Black "Spassky, Boris V."]\n'
    '[Result "1/2-1/2"]\n'
    '[Time "??:??:??"]\n'
    '[TimeControl "?"]\n'
    '[Setup "0"]\n'
    "\n"
    "1. e4!! e5!? 2. Nf3?! Nc6?? 3. Bb5$120 a6 4. Ba4 Nf6 5. O-O Be7 "
    "6. Re1 b5 7. Bb3 d6 8. c3 O-O 9. h3 Nb8 10. d4 Nbd7 11. c4 c6 "
    "12. cxb5 axb5 13. Nc3 Bb7 14. Bg5 b4 15. Nb1 h6 16. Bh4 c5 "
    "17. dxe5 Nxe4 18. Bxe7 Qxe7 19. exd6 Qf6 20. Nbd2 Nxd6 21. Re6# "
    "1/2-1/2"
)

CHESS960 = (
    '[Event "Chess960: 2005 Fischer Random Dropout Tournament, Round 6"] '
    '[Site "SchemingMind.com"] [Time "14:06:56"] [Date "????.??.??"] '
    '[Round "-"] [White "gvhill"] [Black "saxon"] [Result "1-0"] '
    '[Variant "fischerandom"] [SetUp "1"] '
    '[FEN "rbbkqnnr/pppppppp/8/8/8/8/PPPPPPPP/RBBKQNNR w KQkq - 0 1"] '
    '[WhiteCountry "USA"] [BlackCountry "GER"] [TimeControl "123+456"] '
    "1. d4 { Congratulations on making the final round! } 1... d5 2. Nf3 Nf6 "
    "3. Ne3 Ne6 4. c4 dxc4 5. Nxc4 c5 6. dxc5 Qd7+ 7. Qd2 Nxc5 8. Qxd7+ Bxd7 "
    "9. O-O O-O 10. Rd1 { I think we have a draw from here. } "
    "{ looks like a very drawish position. } 1-0"
)

CHESS960_CANONICAL = (
    '[Event "Chess960: 2005 Fischer Random Dropout Tournament, Round 6"]\n'
    '[Site "SchemingMind.com"]\n'
    '[Date "????.??.??"]\n'
    '[Round "-"]\n'
    '[White "gvhill"]\n'
    '[Black "saxon"]\n'
    '[Result "1-0"]\n'
    '[Time "14:06:56"]\n'
    '[TimeControl "123+456"]\n'
    '[Setup "1"]\n'
    '[FEN "rbbkqnnr/pppppppp/8/8/8/8/PPPPPPPP/RBBKQNNR w KQkq - 0 1"]\n'
    '[Variant "fischerandom"]\n'
    '[WhiteCountry "USA"]\n'
    '[BlackCountry "GER"]\n'
    "\n"
    "1. d4 d5 2. Nf3 Nf6 3. Ne3 Ne6 4. c4 dxc4 5. Nxc4 c5 6. dxc5 Qd7+ "
    "7. Qd2 Nxc5 8. Qxd7+ Bxd7 9. O-O O-O 10. Rd1 1-0"
)

CAPABLANCA = """[Event "State Ch."]
[Site "New York, USA"]
[Date "1910.??.??"]
[Round "?"]
[White "Capablanca"]
[Black "Jaffe"]
[Result "1-0"]
[ECO "D46"]
[Opening "Queen's Gambit Dec."]
[Annotator "Reinfeld, Fred"]
[Time "??:??:??"]
[TimeControl "?{1234 seconds per move}"]

1. d4 d5 2. Nf3 Nf6 3. e3 c6 4. c4 e6 5. Nc3 Nbd7 6. Bd3 Bd6
7. O-O O-O 8. e4 dxe4 9. Nxe4 Nxe4 10. Bxe4 Nf6 11. Bc2 h6
12. b3 b6 13. Bb2 Bb7 14. Qd3 g6 15. Rae1 Nh5 16. Bc1 Kg7
17. Rxe6 Nf6 18. Ne5 c5 19. Bxh6+ Kxh6 20. Nxf7+ 1-0
"""


@pytest.fixture
def fischer_spassky() -> str:
    return FISCHER_SPASSKY


@pytest.fixture
def chess960_game() -> str:
    return CHESS960


@pytest.fixture
def capablanca_game() -> str:
    return CAPABLANCA


@pytest.fixture(params=[FISCHER_SPASSKY, CHESS960, CAPABLANCA], ids=["annotated", "chess960", "overflow-tags"])
def sample_game(request: pytest.FixtureRequest) -> str:
    """Every bundled sample game, one per test run."""
    return request.param


@pytest.fixture
def fischer_spassky_canonical() -> str:
    return FISCHER_SPASSKY_CANONICAL


@pytest.fixture
def chess960_canonical() -> str:
    return CHESS960_CANONICAL
