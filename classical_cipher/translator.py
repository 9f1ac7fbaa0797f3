"""
Translator
==========
The encode/decode engine. One linear pass over the source text:

  * letters (either case) are shifted and emitted in lowercase;
  * every other character is emitted exactly as it came in and does
    not consume a keystream shift.

So the output is always exactly as long as the input.

Two delivery modes share the same per-character rule:

  translate_request()  bulk; returns the whole string or raises,
                       never a half-translated result
  stream()             lazy; yields one character at a time, each
                       call with its own keystream cursor
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from .alphabet import ENGLISH, AlphabetMap
from .ciphers import BaseCipher, CaesarCipher, VigenereCipher
from .errors import UnsupportedVariant
from .keys import CipherVariant, Direction, Key, normalize_key

logger = logging.getLogger(__name__)

CharCallback = Callable[[int, str], None]


@dataclass(frozen=True)
class TranslationRequest:
    direction: Direction
    variant: CipherVariant
    key: Key
    text: str


class Translator:
    """Stateless between requests; safe to share across threads."""

    def __init__(self, alphabet: AlphabetMap = ENGLISH, ciphers=None):
        self._alphabet = alphabet
        if ciphers is None:
            ciphers = (CaesarCipher(), VigenereCipher())
        self._ciphers = {c.VARIANT: c for c in ciphers}

    def cipher_for(self, variant) -> BaseCipher:
        variant = CipherVariant.parse(variant)
        try:
            return self._ciphers[variant]
        except KeyError:
            raise UnsupportedVariant(
                f"No cipher registered for {variant.name}"
            ) from None

    def _chars(self, request: TranslationRequest, keystream, rule) -> Iterator[str]:
        alphabet = self._alphabet
        for unit in alphabet.scan(request.text):
            if not unit.is_letter:
                yield unit.char
                continue
            yield alphabet.char_of(rule(unit.position, next(keystream)))

    def _prepare(self, request: TranslationRequest):
        cipher    = self.cipher_for(request.variant)
        direction = Direction(request.direction)
        # check_key runs here, before a single character is produced
        keystream = cipher.keystream(request.key)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"{direction.value} {cipher.VARIANT.name} "
                f"key={request.key.fingerprint} chars={len(request.text)}"
            )
        return keystream, cipher.rule(direction)

    def translate_request(self, request: TranslationRequest) -> str:
        keystream, rule = self._prepare(request)
        # Built in full before joining: a failure leaves no partial output.
        buffer = list(self._chars(request, keystream, rule))
        return "".join(buffer)

    def stream(self, request: TranslationRequest,
               on_char: Optional[CharCallback] = None) -> Iterator[str]:
        """
        Lazily yield translated characters in order. Key/variant
        mismatches raise here, not on first iteration. `on_char(index,
        char)` is called for every emitted character, pass-through
        characters included.
        """
        keystream, rule = self._prepare(request)
        chars = self._chars(request, keystream, rule)
        if on_char is None:
            return chars
        return self._notify(chars, on_char)

    @staticmethod
    def _notify(chars: Iterator[str], on_char: CharCallback) -> Iterator[str]:
        for index, ch in enumerate(chars):
            on_char(index, ch)
            yield ch

    def translate(self, text: str, variant, direction, raw_key) -> str:
        """Normalize `raw_key` for `variant`, then translate `text`."""
        request = build_request(text, variant, direction, raw_key)
        return self.translate_request(request)

    def __repr__(self):
        names = ", ".join(v.name for v in self._ciphers)
        return f"Translator({names})"


def build_request(text: str, variant, direction, raw_key) -> TranslationRequest:
    """Validate raw inputs into a request. Key errors raise here."""
    variant = CipherVariant.parse(variant)
    return TranslationRequest(
        direction=Direction(direction),
        variant=variant,
        key=normalize_key(variant, raw_key),
        text=text,
    )


_default = Translator()


def translate(text: str, variant, direction, raw_key) -> str:
    return _default.translate(text, variant, direction, raw_key)


def translate_request(request: TranslationRequest) -> str:
    return _default.translate_request(request)


def stream(request: TranslationRequest,
           on_char: Optional[CharCallback] = None) -> Iterator[str]:
    return _default.stream(request, on_char)
