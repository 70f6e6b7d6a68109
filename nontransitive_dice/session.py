"""
session.py
The session context handed to every match step.
"""

from dataclasses import dataclass, field

from .config import GameConfig
from .crypto import CryptoProvider
from .dice import Die
from .probability import HelpTableGenerator
from .ui import GameUI


@dataclass
class GameSession:
    """
    Everything a match step may touch: the dice, the rules, the random
    source and the console. Passed to every step instead of living in
    module globals.
    """
    dice: list[Die]
    ui: GameUI
    crypto: CryptoProvider = field(default_factory=CryptoProvider)
    config: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def create(cls, dice: list[Die], config: GameConfig, ui: GameUI | None = None,
               crypto: CryptoProvider | None = None) -> "GameSession":
        ui = ui or GameUI(exit_token=config.exit_token, help_token=config.help_token)
        crypto = crypto or CryptoProvider(key_bytes=config.key_bytes)
        return cls(dice=dice, ui=ui, crypto=crypto, config=config)

    def show_help(self, help_text: str):
        self.ui.display_message(help_text)
        self.ui.display_message(
            HelpTableGenerator.generate_table(self.dice, self.config.probability_precision)
        )

    def ask(self, prompt: str, options: dict[int, str], help_text: str) -> int:
        while True:
            choice = self.ui.get_user_choice(prompt, options)
            if choice is None:
                self.show_help(help_text)
                continue
            return choice
