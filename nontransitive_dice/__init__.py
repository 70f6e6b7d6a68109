"""
__init__.py
Non-transitive dice game with provably fair opponent rolls.
"""

from .commitment import Commitment, commit, verify
from .dice import Die, DiceParser
from .errors import CommitmentError, GameCancelled, ValidationError
from .fairness import combine
from .probability import HelpTableGenerator, ProbabilityCalculator

__all__ = [
    "Commitment",
    "CommitmentError",
    "DiceParser",
    "Die",
    "GameCancelled",
    "HelpTableGenerator",
    "ProbabilityCalculator",
    "ValidationError",
    "combine",
    "commit",
    "verify",
]
