"""
errors.py
Exceptions for bad command-line dice, user cancellation and commitment misuse.
"""

import sys


class ValidationError(Exception):
    """
    Raised when the dice given on the command line cannot start a game.
    Provides a formatted message including an example of correct usage.
    """
    _invocation_command = "python"

    @staticmethod
    def set_invocation_command(command: str):
        """Sets the command used to run the script (e.g., 'python' or 'py')."""
        ValidationError._invocation_command = command

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    @classmethod
    def not_enough_dice(cls, count: int, minimum: int) -> "ValidationError":
        return cls(f"Please specify at least {minimum} dice (got {count}).")

    @classmethod
    def non_integer_value(cls, position: int, value: str) -> "ValidationError":
        return cls(f"Die #{position} contains a non-integer value: {value!r}.")

    @classmethod
    def empty_die(cls, position: int) -> "ValidationError":
        return cls(f"Die #{position} must have at least one face.")

    def __str__(self) -> str:
        script_name = sys.argv[0] if sys.argv else 'game.py'
        example = (
            f"{ValidationError._invocation_command} {script_name} "
            f"2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"
        )
        return f"\nArgument Error: {self.message}\n\nExample usage:\n{example}\n"


class GameCancelled(Exception):
    """The user typed the exit token at a prompt."""


class CommitmentError(Exception):
    pass
