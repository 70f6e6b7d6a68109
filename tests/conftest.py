import io

import pytest

from nontransitive_dice.crypto import CryptoProvider
from nontransitive_dice.dice import Die
from nontransitive_dice.session import GameSession
from nontransitive_dice.ui import GameUI


class ScriptedInput:
    """Stands in for input(): hands out prepared lines, then behaves like a closed stdin."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class FixedCrypto(CryptoProvider):
    """Returns queued secret values in order; optionally publishes a wrong HMAC."""

    def __init__(self, values, tamper=False):
        super().__init__()
        self.values = list(values)
        self.tamper = tamper

    def generate_key(self) -> bytes:
        return bytes(range(self.key_bytes))

    def generate_secure_random(self, max_val: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < max_val
        return value

    def calculate_hmac(self, key, message_int):
        if self.tamper:
            return "0" * 64
        return CryptoProvider.calculate_hmac(key, message_int)


@pytest.fixture
def dice():
    return [
        Die([2, 2, 4, 4, 9, 9]),
        Die([1, 1, 6, 6, 8, 8]),
        Die([3, 3, 5, 5, 7, 7]),
    ]


@pytest.fixture
def make_session(dice):
    def _make(lines, values, tamper=False, dice_override=None):
        out = io.StringIO()
        ui = GameUI(input_func=ScriptedInput(lines), stream=out)
        session = GameSession(dice=dice_override or dice, ui=ui, crypto=FixedCrypto(values, tamper=tamper))
        return session, out
    return _make


@pytest.fixture
def scripted_ui():
    def _make(lines):
        out = io.StringIO()
        return GameUI(input_func=ScriptedInput(lines), stream=out), out
    return _make


@pytest.fixture
def fixed_crypto():
    return FixedCrypto
