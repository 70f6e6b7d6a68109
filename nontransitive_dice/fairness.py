"""
fairness.py
Combines the computer's committed number with the user's number into one
shared result neither side can steer.
"""

import logging
from dataclasses import dataclass

from .commitment import commit, verify

logger = logging.getLogger(__name__)


def combine(secret_value: int, counterpart_value: int, value_range: int) -> int:
    return (secret_value + counterpart_value) % value_range


@dataclass(frozen=True)
class FairExchange:
    counterpart_value: int
    combined: int
    verified: bool


def fair_exchange(session, value_range: int, prompt: str, help_text: str) -> FairExchange:
    """
    One commit, reveal, combine, verify cycle against the user.

    The HMAC is shown before the user is asked for a number, and the
    commitment is opened only after that number has been read.
    """
    ui = session.ui
    commitment = commit(session.crypto, value_range)
    ui.display_message(f"I selected a random value in the range 0..{value_range - 1}.")
    ui.display_hmac(commitment.digest)

    options = {i: str(i) for i in range(value_range)}
    counterpart_value = session.ask(prompt, options, help_text)

    key, secret_value = commitment.reveal()
    combined = combine(secret_value, counterpart_value, value_range)
    verified = verify(key, secret_value, commitment.digest)

    ui.display_key_and_move(key, secret_value, name="My number")
    ui.display_message(
        f"Fair number generation result: ({secret_value} + {counterpart_value}) mod {value_range} = {combined}"
    )
    ui.display_verification(verified)
    if not verified:
        logger.warning("HMAC verification failed for commitment %s", commitment.digest)
    logger.debug("Combined %d + %d mod %d -> %d", secret_value, counterpart_value, value_range, combined)

    return FairExchange(counterpart_value=counterpart_value, combined=combined, verified=verified)
