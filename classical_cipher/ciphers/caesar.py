"""
Caesar Shift Cipher
===================
Every letter moves the same number of places along the alphabet.
Shift 3: a -> d, x -> a. Twenty-six possible keys, so any ciphertext
falls to brute force in well under a second.
"""

import itertools
from typing import Iterator

from ..keys import CipherVariant, ShiftKey
from .base import BaseCipher


class CaesarCipher(BaseCipher):
    """Fixed-shift substitution."""

    VARIANT  = CipherVariant.CAESAR
    KEY_TYPE = ShiftKey

    def keystream(self, key: ShiftKey) -> Iterator[int]:
        self.check_key(key)
        return itertools.repeat(key.shift)
