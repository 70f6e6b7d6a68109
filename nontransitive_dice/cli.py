"""
cli.py
Command-line entry point and the controller that plays matches until the user stops.
"""

import logging
import sys

from .config import GameConfig
from .crypto import CryptoProvider
from .dice import DiceParser
from .errors import GameCancelled, ValidationError
from .session import GameSession
from .sequencer import play_match
from .state import MatchPhase, MatchState
from .ui import GameUI

logger = logging.getLogger(__name__)


class GameController:
    def __init__(self, session: GameSession):
        self.session = session
        self.matches_played = 0

    def run(self) -> MatchState:
        """Play matches until the user stops; returns the last one."""
        ui = self.session.ui
        ui.display_message("--- Welcome to the Non-Transitive Dice Game! ---")
        while True:
            state = play_match(self.session)
            self.matches_played += 1
            if state.phase is MatchPhase.CANCELLED:
                ui.display_message("Exiting game. Goodbye!")
                break
            try:
                play_again = ui.ask_yes_no("\nPlay another round? (y/n): ")
            except GameCancelled:
                play_again = False
            if not play_again:
                ui.display_message("Thanks for playing!")
                break
        return state


def main(argv: list[str] | None = None, ui: GameUI | None = None,
         crypto: CryptoProvider | None = None) -> int:
    config = GameConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Dynamically determine the command used to invoke the script
    if 'py.exe' in sys.executable.lower():
        ValidationError.set_invocation_command('py')
    else:
        ValidationError.set_invocation_command('python')

    args = sys.argv[1:] if argv is None else argv
    try:
        dice = DiceParser.parse(args, min_dice=config.min_dice)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 1

    session = GameSession.create(dice, config, ui=ui, crypto=crypto)
    controller = GameController(session)
    try:
        controller.run()
    except (KeyboardInterrupt, EOFError):
        session.ui.display_message("\nGame interrupted. Goodbye!")
    return 0
