"""
ui.py
Console input and output for the game.
"""

import re
import sys

from .errors import GameCancelled

DIGITS = re.compile(r"[0-9]+")


class GameUI:
    """Console adapter for prompts and game output."""

    def __init__(self, input_func=None, stream=None, exit_token: str = "x", help_token: str = "?"):
        self._input = input_func or input
        self._stream = stream
        self.exit_token = exit_token.lower()
        self.help_token = help_token.lower()

    def display_message(self, text: str):
        print(text, file=self._stream if self._stream is not None else sys.stdout)

    def display_hmac(self, hmac_hex: str):
        self.display_message(f"HMAC: {hmac_hex}")

    def display_key_and_move(self, key: bytes, move: int, name: str = "My choice"):
        self.display_message(f"{name}: {move} (Secret Key: {key.hex().upper()})")

    def display_verification(self, verified: bool):
        if verified:
            self.display_message("HMAC verified: the secret number and key match the published HMAC.")
        else:
            self.display_message("WARNING: HMAC verification failed, the data may have been tampered with.")

    def read_line(self, prompt: str) -> str:
        return self._input(prompt)

    def get_user_choice(self, prompt: str, options: dict[int, str]) -> int | None:
        """
        Ask until the answer is one of `options`, the help token or the exit token.

        Returns the chosen key, or None when help was requested.
        Raises GameCancelled on the exit token.
        """
        while True:
            self.display_message(f"\n{prompt}")
            for i, option in options.items():
                self.display_message(f" {i} - {option}")

            self.display_message(f"\n {self.exit_token.upper()} - Exit")
            self.display_message(f" {self.help_token} - Help")

            choice = self.read_line("Your choice: ").strip().lower()

            if choice == self.exit_token:
                raise GameCancelled()
            if choice == self.help_token:
                return None

            if DIGITS.fullmatch(choice):
                choice_int = int(choice)
                if choice_int in options:
                    return choice_int

            self.display_message(
                f"Invalid choice. Please enter a listed number, '{self.help_token}', or '{self.exit_token.upper()}'."
            )

    def ask_yes_no(self, prompt: str) -> bool:
        answer = self.read_line(prompt).strip().lower()
        if answer == self.exit_token:
            raise GameCancelled()
        return answer in ("y", "yes")
