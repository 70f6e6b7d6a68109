"""
commitment.py
HMAC commitments to a secret value.

The digest is published first; the key and the secret stay inside the
Commitment until `reveal()` is called, once, after the counterpart has
answered.
"""

import hmac
import logging
from dataclasses import dataclass, field

from .crypto import CryptoProvider
from .errors import CommitmentError

logger = logging.getLogger(__name__)


@dataclass
class Commitment:
    digest: str
    secret_value: int = field(repr=False)
    key: bytes = field(repr=False)
    revealed: bool = False

    def reveal(self) -> tuple[bytes, int]:
        if self.revealed:
            raise CommitmentError("Commitment has already been revealed.")
        self.revealed = True
        return self.key, self.secret_value


def commit(crypto: CryptoProvider, value_range: int) -> Commitment:
    if value_range <= 0:
        raise CommitmentError(f"Commitment range must be positive, got {value_range}.")
    secret_value = crypto.generate_secure_random(value_range)
    key = crypto.generate_key()
    digest = crypto.calculate_hmac(key, secret_value)
    logger.debug("Committed to a value in 0..%d (HMAC=%s)", value_range - 1, digest)
    return Commitment(digest=digest, secret_value=secret_value, key=key)


def verify(key: bytes, secret_value: int, digest: str) -> bool:
    expected = CryptoProvider.calculate_hmac(key, secret_value).encode("ascii")
    # Bytes, so a digest with non-ASCII characters is a mismatch rather than a TypeError.
    return hmac.compare_digest(expected, digest.upper().encode("utf-8"))
