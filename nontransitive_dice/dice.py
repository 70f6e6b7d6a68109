"""
dice.py
Die faces and the parser that turns command-line arguments into dice.
"""

import re

from .errors import ValidationError

INTEGER = re.compile(r"[+-]?[0-9]+")


class Die:
    def __init__(self, faces):
        if not faces:
            raise ValueError("A die must have at least one face.")
        self._faces = tuple(faces)

    @property
    def faces(self) -> tuple[int, ...]:
        return self._faces

    def __str__(self) -> str:
        return ",".join(map(str, self._faces))

    def __repr__(self) -> str:
        return f"Die([{self}])"

    def __len__(self) -> int:
        return len(self._faces)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Die):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self) -> int:
        return hash(self._faces)


class DiceParser:
    @staticmethod
    def parse(args: list[str], min_dice: int = 3) -> list[Die]:
        if len(args) < min_dice:
            raise ValidationError.not_enough_dice(len(args), min_dice)
        return [DiceParser.parse_die(arg, position) for position, arg in enumerate(args, start=1)]

    @staticmethod
    def parse_die(arg: str, position: int) -> Die:
        faces = []
        for raw in arg.split(','):
            token = raw.strip()
            if not token:
                continue
            if not INTEGER.fullmatch(token):
                raise ValidationError.non_integer_value(position, token)
            faces.append(int(token))
        if not faces:
            raise ValidationError.empty_die(position)
        return Die(faces)
