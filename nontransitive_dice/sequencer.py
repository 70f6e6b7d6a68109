"""
sequencer.py
Turn state machine for one match.

Each phase has a step function taking the session and the match state.
A step either reads input through the session and advances `state.phase`,
or raises GameCancelled, which `play_match` turns into the CANCELLED phase.
"""

import logging

from .dice import Die
from .errors import GameCancelled
from .fairness import fair_exchange
from .session import GameSession
from .state import MatchPhase, MatchState, Outcome, RoundResult

logger = logging.getLogger(__name__)

FIRST_MOVE_HELP = """
How to play:
- I have picked 0 or 1 and published its HMAC. Guess it to pick your die first.
- After your guess I show my number and the key so you can check the HMAC.
- Type X to exit at any prompt, or ? to see this help again.
"""

SELECT_HELP = """
Help:
- Enter the number of the die you want to play with.
- The table below shows how often each die beats the others.
- Type X to exit the game, or ? to see this help again.
"""

ROLL_HELP = """
Help:
- I have picked a secret number in 0..{top} and published its HMAC.
- Pick any number in 0..{top}. The sum of both numbers modulo {size} selects the face.
- Neither of us can steer the result: my number is fixed by the HMAC, yours is chosen freely.
- Type X to exit the game, or ? to see this help again.
"""


def resolve_collision(preferred: int, taken: int, count: int) -> int:
    """Return `preferred` unless it equals `taken`; then the lowest free index."""
    if preferred != taken:
        return preferred
    return next(i for i in range(count) if i != taken)


def determine_outcome(user_face: int, opponent_face: int) -> Outcome:
    if user_face > opponent_face:
        return "user_win"
    if user_face < opponent_face:
        return "opponent_win"
    return "tie"


def determine_first_move(session: GameSession, state: MatchState):
    ui = session.ui
    ui.display_message("\nLet's determine who makes the first move.")
    exchange = fair_exchange(
        session,
        session.config.first_move_range,
        "Try to guess my selection.",
        FIRST_MOVE_HELP,
    )
    # (secret + guess) mod 2 is zero exactly when the guess matches.
    state.user_moves_first = exchange.combined == 0
    if state.user_moves_first:
        ui.display_message(f"You guessed right ({exchange.counterpart_value}). You choose your die first.")
    else:
        ui.display_message(f"You guessed wrong ({exchange.counterpart_value}). I choose my die first.")
    state.phase = MatchPhase.SELECTING_DICE


def select_dice(session: GameSession, state: MatchState):
    ui = session.ui
    dice = session.dice
    preferred = session.crypto.generate_secure_random(len(dice))

    if state.user_moves_first:
        ui.display_message("You make the first move and choose the dice.")
        options = {i: str(d) for i, d in enumerate(dice)}
        user_index = session.ask("Choose your dice:", options, SELECT_HELP)
        opponent_index = resolve_collision(preferred, user_index, len(dice))
    else:
        opponent_index = preferred
        ui.display_message(f"I make the first move and choose the [{dice[opponent_index]}] dice.")
        options = {i: str(d) for i, d in enumerate(dice) if i != opponent_index}
        user_index = session.ask("Choose your dice:", options, SELECT_HELP)

    state.user_die_index = user_index
    state.opponent_die_index = opponent_index
    ui.display_message(f"\nYour die: {user_index} - [{dice[user_index]}]")
    ui.display_message(f"My die:   {opponent_index} - [{dice[opponent_index]}]")
    state.phase = MatchPhase.ROLLING_OPPONENT


def _roll(session: GameSession, die: Die) -> RoundResult:
    size = len(die)
    exchange = fair_exchange(
        session,
        size,
        f"Add your number modulo {size}.",
        ROLL_HELP.format(top=size - 1, size=size),
    )
    return RoundResult(
        combined_index=exchange.combined,
        face=die.faces[exchange.combined],
        verified=exchange.verified,
    )


def roll_opponent(session: GameSession, state: MatchState):
    session.ui.display_message("\nIt is my time to roll.")
    state.opponent_roll = _roll(session, session.dice[state.opponent_die_index])
    session.ui.display_message(f"My roll result is {state.opponent_roll.face}.")
    state.phase = MatchPhase.ROLLING_USER


def roll_user(session: GameSession, state: MatchState):
    session.ui.display_message("\nIt is your time to roll.")
    state.user_roll = _roll(session, session.dice[state.user_die_index])
    session.ui.display_message(f"Your roll result is {state.user_roll.face}.")
    state.phase = MatchPhase.DECLARING


def declare(session: GameSession, state: MatchState):
    ui = session.ui
    user_face = state.user_roll.face
    opponent_face = state.opponent_roll.face
    state.outcome = determine_outcome(user_face, opponent_face)

    ui.display_message("\n--- Results ---")
    ui.display_message(f"You rolled {user_face}, I rolled {opponent_face}.")
    if state.outcome == "user_win":
        ui.display_message(f"You won! ({user_face} > {opponent_face})")
    elif state.outcome == "opponent_win":
        ui.display_message(f"I won! ({opponent_face} > {user_face})")
    else:
        ui.display_message("It's a draw!")
    logger.info("Match finished: %s (user %d, opponent %d)", state.outcome, user_face, opponent_face)
    state.phase = MatchPhase.TERMINAL


STEPS = {
    MatchPhase.DETERMINING_FIRST_MOVE: determine_first_move,
    MatchPhase.SELECTING_DICE: select_dice,
    MatchPhase.ROLLING_OPPONENT: roll_opponent,
    MatchPhase.ROLLING_USER: roll_user,
    MatchPhase.DECLARING: declare,
}


def play_match(session: GameSession, state: MatchState | None = None) -> MatchState:
    state = state or MatchState()
    while not state.phase.is_final:
        phase = state.phase
        logger.debug("Entering phase %s", phase.value)
        try:
            STEPS[phase](session, state)
        except GameCancelled:
            logger.info("Match cancelled during %s", phase.value)
            state.phase = MatchPhase.CANCELLED
    return state
