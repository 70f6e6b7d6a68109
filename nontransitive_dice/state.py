"""
state.py
Match phases and the mutable record the sequencer fills in as a match
progresses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

Outcome = Literal["user_win", "opponent_win", "tie"]


class MatchPhase(Enum):
    DETERMINING_FIRST_MOVE = "determining_first_move"
    SELECTING_DICE = "selecting_dice"
    ROLLING_OPPONENT = "rolling_opponent"
    ROLLING_USER = "rolling_user"
    DECLARING = "declaring"
    TERMINAL = "terminal"
    CANCELLED = "cancelled"

    @property
    def is_final(self) -> bool:
        return self in (MatchPhase.TERMINAL, MatchPhase.CANCELLED)


@dataclass(frozen=True)
class RoundResult:
    combined_index: int
    face: int
    verified: bool = True


@dataclass
class MatchState:
    """
    Fields:
        phase (MatchPhase): Current state of the match.
        user_moves_first (bool|None): Set once the first-move guess is evaluated.
        user_die_index (int|None): Index of the user's die in the session dice.
        opponent_die_index (int|None): Index of the opponent's die.
        opponent_roll (RoundResult|None): Result of the opponent's roll.
        user_roll (RoundResult|None): Result of the user's roll.
        outcome (Outcome|None): Set in the declaring phase.
    """
    phase: MatchPhase = MatchPhase.DETERMINING_FIRST_MOVE
    user_moves_first: bool | None = None
    user_die_index: int | None = None
    opponent_die_index: int | None = None
    opponent_roll: RoundResult | None = None
    user_roll: RoundResult | None = None
    outcome: Outcome | None = None
