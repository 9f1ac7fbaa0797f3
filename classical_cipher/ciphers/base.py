"""
Shared shape of a classical substitution cipher.

A cipher contributes two things: the key type it accepts, and a
keystream -- the shift applied to each successive *letter* of the
source. The translator pulls one shift from the keystream per letter
and none for pass-through characters, which is what keeps the
Vigenère keyword cursor aligned to letters only.
"""

from typing import Iterator

from ..alphabet import ENGLISH
from ..errors import InvalidKeyType
from ..keys import CipherVariant, Direction


class BaseCipher:
    """Per-variant encode/decode rule."""

    VARIANT: CipherVariant = None
    KEY_TYPE: type = None

    def check_key(self, key) -> None:
        """Raise InvalidKeyType unless `key` is this cipher's key shape."""
        if not isinstance(key, self.KEY_TYPE):
            raise InvalidKeyType(
                f"{self.VARIANT.name.title()} needs a {self.KEY_TYPE.__name__}, "
                f"got {type(key).__name__}."
            )

    def keystream(self, key) -> Iterator[int]:
        raise NotImplementedError

    @staticmethod
    def encode(position: int, shift: int) -> int:
        return (position + shift) % len(ENGLISH)

    @staticmethod
    def decode(position: int, shift: int) -> int:
        size = len(ENGLISH)
        return (position + size - shift) % size

    def rule(self, direction: Direction):
        """encode or decode, depending on direction."""
        return self.encode if direction is Direction.ENCRYPT else self.decode

    def __repr__(self):
        return f"{type(self).__name__}()"
