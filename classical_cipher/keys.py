"""
Keys
====
Cipher variants, directions, and the two key shapes:

    ShiftKey(shift)      Caesar    -- integer shift in [0, 26)
    KeywordKey(letters)  Vigenère  -- non-empty lowercase keyword

Raw key text from an input field goes through normalize_key(), which
is the only supported way to build a key from user input. The key
dataclasses validate themselves as well, so an out-of-range shift or
empty keyword cannot be constructed directly either.
"""

import enum
import logging
import re
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives import hashes

from .alphabet import ENGLISH, fold_case
from .errors import EmptyKey, InvalidKeyFormat, UnsupportedVariant

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class CipherVariant(enum.Enum):
    CAESAR   = "caesar"
    VIGENERE = "vigenere"

    @classmethod
    def parse(cls, value) -> "CipherVariant":
        """
        Accept a member, its name or value (any case), or its dropdown
        index. Raises UnsupportedVariant for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        elif isinstance(value, str):
            wanted = value.strip().lower().replace("è", "e")
            for member in cls:
                if wanted in (member.value, member.name.lower()):
                    return member
        raise UnsupportedVariant(f"Unsupported cipher variant: {value!r}")


class Direction(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value == wanted:
                    return member
        return None


def _fingerprint(material: str) -> str:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(material.encode("utf-8"))
    return digest.finalize().hex()[:12]


@dataclass(frozen=True)
class ShiftKey:
    """Caesar key. `shift` is always already reduced into [0, 26)."""
    shift: int

    variant = CipherVariant.CAESAR

    def __post_init__(self):
        if isinstance(self.shift, bool) or not isinstance(self.shift, int):
            raise InvalidKeyFormat(f"Shift must be an integer, got {self.shift!r}.")
        if not 0 <= self.shift < len(ENGLISH):
            raise InvalidKeyFormat(
                f"Shift {self.shift} is not normalized; use ShiftKey.of()."
            )

    @classmethod
    def of(cls, n: int) -> "ShiftKey":
        """Normalize any integer shift, negative or large."""
        size = len(ENGLISH)
        return cls(((n % size) + size) % size)

    @property
    def fingerprint(self) -> str:
        return _fingerprint(f"shift:{self.shift}")


@dataclass(frozen=True)
class KeywordKey:
    """Vigenère key: one or more lowercase letters a-z."""
    letters: str

    variant = CipherVariant.VIGENERE

    def __post_init__(self):
        if not isinstance(self.letters, str) or not self.letters:
            raise EmptyKey("Keyword must contain at least one letter.")
        if any(c not in ENGLISH.letters for c in self.letters):
            raise EmptyKey(
                "Keyword must be lowercase letters only; use normalize_key()."
            )

    @property
    def shifts(self) -> tuple:
        return tuple(ENGLISH.position_of(c) for c in self.letters)

    @property
    def fingerprint(self) -> str:
        return _fingerprint(f"keyword:{self.letters}")


Key = Union[ShiftKey, KeywordKey]


def _reduce_shift(text: str) -> int:
    """Signed digit string mod 26, folded digit by digit; any length works."""
    size  = len(ENGLISH)
    shift = 0
    for digit in text.lstrip("+-"):
        shift = (shift * 10 + int(digit)) % size
    if text.startswith("-"):
        shift = (size - shift) % size
    return shift


def normalize_key(variant, raw) -> Key:
    """
    Turn raw key input into a validated key for `variant`.

    Caesar:   integer text (optional sign, surrounding whitespace ok),
              reduced mod 26. Raises InvalidKeyFormat.
    Vigenère: letters are case-folded; non-letters are skipped with a
              warning. Raises EmptyKey when nothing usable is left.
    """
    variant = CipherVariant.parse(variant)

    if variant is CipherVariant.CAESAR:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return ShiftKey.of(raw)
        text = raw.strip() if isinstance(raw, str) else ""
        if not _INTEGER.fullmatch(text):
            raise InvalidKeyFormat(f"Caesar key must be an integer, got {raw!r}.")
        key = ShiftKey(_reduce_shift(text))
        logger.debug(f"Caesar key normalized to {key.shift}")
        return key

    if variant is CipherVariant.VIGENERE:
        if not isinstance(raw, str) or not raw:
            raise EmptyKey("Vigenère keyword is empty.")
        folded  = fold_case(raw)
        letters = "".join(c for c in folded if c in ENGLISH.letters)
        if not letters:
            raise EmptyKey("Vigenère keyword contains no letters.")
        skipped = len(folded) - len(letters)
        if skipped:
            logger.warning(f"Skipped {skipped} non-letter character(s) in keyword")
        return KeywordKey(letters)

    raise UnsupportedVariant(f"Unsupported cipher variant: {variant!r}")
