"""
config.py
Rule constants and tunables for a dice match, gathered in one frozen object.
"""

import os
from dataclasses import dataclass, replace

LOG_LEVEL_ENV = "DICE_GAME_LOG_LEVEL"


@dataclass(frozen=True)
class GameConfig:
    """
    Fields:
        min_dice (int): Fewest dice accepted on the command line.
        first_move_range (int): Range of the secret used to decide who picks first.
        key_bytes (int): Length of every HMAC key; never below 16 (128 bits).
        probability_precision (int): Decimal digits shown in the win table.
        exit_token (str): Input that cancels the session at any prompt.
        help_token (str): Input that shows help and the win table.
        log_level (str): Level name handed to logging.basicConfig.
    """
    min_dice: int = 3
    first_move_range: int = 2
    key_bytes: int = 32
    probability_precision: int = 4
    exit_token: str = "x"
    help_token: str = "?"
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.key_bytes < 16:
            raise ValueError("key_bytes must be at least 16 (128 bits of entropy).")
        if self.min_dice < 2:
            raise ValueError("A match needs at least two dice.")

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        environ = os.environ if environ is None else environ
        level = environ.get(LOG_LEVEL_ENV)
        config = cls()
        if level:
            config = replace(config, log_level=level.strip().upper())
        return config
