"""
classical_cipher
================
Caesar and Vigenère text transformation for interactive front-ends.

    translate("hello", "caesar", "encrypt", "3")          -> "khoor"
    translate("attackatdawn", "vigenere", "encrypt", "lemon")
                                                           -> "lxfopvefrnhr"

Letters come out lowercase; spaces, digits and punctuation pass
through untouched and keep their positions. These ciphers are for
teaching and puzzles; they protect nothing.

Modules:
    alphabet    letter <-> position map, sentinel for non-letters
    keys        cipher variants, ShiftKey / KeywordKey, normalize_key()
    ciphers     per-variant keystream rules
    translator  bulk and streaming translation
    session     caller-owned input/output state, paced reveal

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet   import ENGLISH, NOT_A_LETTER, AlphabetMap, TranslationUnit, fold_case
from .errors     import (CipherError, KeyValidationError, InvalidKeyFormat, EmptyKey,
                         TranslationError, InvalidKeyType, UnsupportedVariant)
from .keys       import CipherVariant, Direction, ShiftKey, KeywordKey, normalize_key
from .ciphers    import CaesarCipher, VigenereCipher
from .translator import (Translator, TranslationRequest, build_request,
                         translate, translate_request, stream)
from .session    import CipherSession, Reveal, constant_pacing, letters_only_pacing

__all__ = [
    "ENGLISH",
    "NOT_A_LETTER",
    "AlphabetMap",
    "TranslationUnit",
    "fold_case",
    "CipherError",
    "KeyValidationError",
    "InvalidKeyFormat",
    "EmptyKey",
    "TranslationError",
    "InvalidKeyType",
    "UnsupportedVariant",
    "CipherVariant",
    "Direction",
    "ShiftKey",
    "KeywordKey",
    "normalize_key",
    "CaesarCipher",
    "VigenereCipher",
    "Translator",
    "TranslationRequest",
    "build_request",
    "translate",
    "translate_request",
    "stream",
    "CipherSession",
    "Reveal",
    "constant_pacing",
    "letters_only_pacing",
]
