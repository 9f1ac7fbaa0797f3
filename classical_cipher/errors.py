"""
Errors raised by the cipher core.

    CipherError
    ├── KeyValidationError     raised while normalizing raw key text
    │   ├── InvalidKeyFormat
    │   └── EmptyKey
    └── TranslationError       raised by the translator
        ├── InvalidKeyType
        └── UnsupportedVariant

All of them are ValueErrors, so callers that only care about "bad
input" can catch that.
"""


class CipherError(ValueError):
    """Base class. `kind` names the error for user-facing rendering."""

    kind = "CipherError"


class KeyValidationError(CipherError):
    kind = "KeyValidationError"


class InvalidKeyFormat(KeyValidationError):
    """Shift key text is not an integer."""
    kind = "InvalidKeyFormat"


class EmptyKey(KeyValidationError):
    """Keyword is empty or holds no letters."""
    kind = "EmptyKey"


class TranslationError(CipherError):
    kind = "TranslationError"


class InvalidKeyType(TranslationError):
    """Key shape does not belong to the selected cipher variant."""
    kind = "InvalidKeyType"


class UnsupportedVariant(TranslationError):
    kind = "UnsupportedVariant"
