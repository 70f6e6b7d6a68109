"""
crypto.py
Entropy and HMAC primitives behind every commitment.
"""

import hashlib
import hmac
import random
import secrets

DEFAULT_KEY_BYTES = 32


class CryptoProvider:
    """
    Source of secret values and HMAC keys for commitments.

    Uses the `secrets` module unless a `random.Random` is supplied, which
    tests do to get a reproducible match.
    """

    def __init__(self, rng: random.Random | None = None, key_bytes: int = DEFAULT_KEY_BYTES):
        self._rng = rng
        self.key_bytes = key_bytes

    def generate_key(self) -> bytes:
        if self._rng is not None:
            return self._rng.randbytes(self.key_bytes)
        return secrets.token_bytes(self.key_bytes)

    def generate_secure_random(self, max_val: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(max_val)
        return secrets.randbelow(max_val)

    @staticmethod
    def calculate_hmac(key: bytes, message_int: int) -> str:
        message_bytes = str(message_int).encode('utf-8')
        h = hmac.new(key, message_bytes, hashlib.sha3_256)
        return h.hexdigest().upper()
