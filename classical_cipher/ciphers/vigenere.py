"""
Vigenère Polyalphabetic Cipher
==============================
Each letter is shifted by the alphabet position of the matching
keyword letter; the keyword repeats for as long as the message runs.

    plaintext  a t t a c k a t d a w n
    keyword    l e m o n l e m o n l e
    ciphertext l x f o p v e f r n h r

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years, until Kasiski (1863) showed how the
keyword period leaks through repeated ciphertext fragments.
"""

import itertools
from typing import Iterator

from ..keys import CipherVariant, KeywordKey
from .base import BaseCipher


class VigenereCipher(BaseCipher):
    """Repeating-keyword substitution."""

    VARIANT  = CipherVariant.VIGENERE
    KEY_TYPE = KeywordKey

    def keystream(self, key: KeywordKey) -> Iterator[int]:
        """Shift for letter i is the keyword letter at i mod len(keyword)."""
        self.check_key(key)
        return itertools.cycle(key.shifts)
