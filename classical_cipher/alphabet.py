"""
Alphabet Map
============
Fixed correspondence between the 26 lowercase Latin letters and the
positions 0-25. Anything outside a-z (space, punctuation, digits,
accented letters) resolves to the sentinel NOT_A_LETTER.

Case folding is ASCII-only: "A"-"Z" become "a"-"z" and every other
character is left exactly as it is, so one input character always
maps to one output character.
"""

import string
from types import MappingProxyType
from typing import Iterator, NamedTuple

NOT_A_LETTER = -1

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_case(text: str) -> str:
    """Lowercase ASCII letters, leave everything else untouched."""
    return text.translate(_ASCII_FOLD)


class TranslationUnit(NamedTuple):
    """One source character and its alphabet position (or sentinel)."""
    char: str
    position: int

    @property
    def is_letter(self) -> bool:
        return self.position != NOT_A_LETTER


class AlphabetMap:
    """Immutable letter <-> position table."""

    SIZE = 26

    def __init__(self, letters: str = string.ascii_lowercase):
        if len(letters) != self.SIZE or len(set(letters)) != self.SIZE:
            raise ValueError(f"Alphabet must hold {self.SIZE} distinct letters.")
        self._letters  = letters
        self._position = MappingProxyType({c: i for i, c in enumerate(letters)})

    @property
    def letters(self) -> str:
        return self._letters

    def position_of(self, char: str) -> int:
        """Position 0-25 for a letter (either case), NOT_A_LETTER otherwise."""
        return self._position.get(fold_case(char), NOT_A_LETTER)

    def char_of(self, position: int) -> str:
        """Inverse of position_of. Raises ValueError outside 0-25."""
        if isinstance(position, bool) or not isinstance(position, int) \
                or not 0 <= position < self.SIZE:
            raise ValueError(f"No letter at alphabet position {position!r}.")
        return self._letters[position]

    def scan(self, text: str) -> Iterator[TranslationUnit]:
        """Classify every character of text, in order."""
        for ch in text:
            yield TranslationUnit(ch, self.position_of(ch))

    def __contains__(self, char) -> bool:
        return self.position_of(char) != NOT_A_LETTER

    def __len__(self) -> int:
        return self.SIZE

    def __repr__(self):
        return f"AlphabetMap({self._letters!r})"


ENGLISH = AlphabetMap()
