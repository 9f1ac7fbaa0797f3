"""
Cipher Session
==============
The caller-owned state behind a cipher front-end: the text being
translated, the key text, the selected cipher, and the output shown
to the user. A front-end keeps one CipherSession per window and calls
encode_text() / decode_text() (or reveal() for the letter-by-letter
animation) from its button handlers.

Errors raised by user input (key text, cipher selection) never escape
a session. They are turned into the message shown in the output
field, and kept on `last_error` for callers that want the structured
form. Constructor arguments and directions come from code, not the
user, and raise as usual.
"""

import asyncio
import logging
import time
from typing import Callable, Iterator, List, Optional

from .config import Settings, settings
from .errors import CipherError, EmptyKey, InvalidKeyFormat
from .keys import CipherVariant, Direction
from .translator import Translator, TranslationRequest, build_request

logger = logging.getLogger(__name__)

Pacing = Callable[[int, str], float]


def constant_pacing(delay: float) -> Pacing:
    """Same pause before every character."""
    def pacing(index: int, char: str) -> float:
        return delay
    return pacing


def letters_only_pacing(delay: float) -> Pacing:
    """Pause before letters only; spaces and punctuation appear at once."""
    def pacing(index: int, char: str) -> float:
        return delay if char.isalpha() else 0.0
    return pacing


class Reveal:
    """
    A paced, cancellable run over a stream of translated characters.

    Iterate it synchronously (pauses via `sleep`) or with `async for`
    (pauses via asyncio.sleep). Cancellation is checked around every
    pause, so at most the character already being emitted gets out
    after cancel().
    """

    def __init__(self, chars: Iterator[str], pacing: Pacing,
                 sleep: Callable[[float], None] = time.sleep,
                 on_char: Optional[Callable[[int, str], None]] = None,
                 on_done: Optional[Callable[[str], None]] = None):
        self._chars     = chars
        self._pacing    = pacing
        self._sleep     = sleep
        self._on_char   = on_char
        self._on_done   = on_done
        self._emitted   = []
        self._cancelled = False
        self._done      = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    @property
    def text(self) -> str:
        """Everything emitted so far."""
        return "".join(self._emitted)

    def cancel(self) -> None:
        if not self._done and not self._cancelled:
            logger.debug(f"Reveal cancelled after {len(self._emitted)} chars")
        self._cancelled = True

    def _emit(self, index: int, char: str) -> None:
        self._emitted.append(char)
        if self._on_char is not None:
            self._on_char(index, char)

    def _finish(self) -> None:
        if self._done:
            return
        self._done = True
        if self._on_done is not None:
            self._on_done(self.text)

    def __iter__(self):
        if self._done:
            return
        for char in self._chars:
            index = len(self._emitted)
            if self._cancelled:
                return
            delay = self._pacing(index, char)
            if delay > 0:
                self._sleep(delay)
            if self._cancelled:
                return
            self._emit(index, char)
            yield char
        if not self._cancelled:
            self._finish()

    async def _arun(self):
        if self._done:
            return
        for char in self._chars:
            index = len(self._emitted)
            if self._cancelled:
                return
            delay = self._pacing(index, char)
            if delay > 0:
                await asyncio.sleep(delay)
            if self._cancelled:
                return
            self._emit(index, char)
            yield char
        if not self._cancelled:
            self._finish()

    def __aiter__(self):
        return self._arun()

    def run(self) -> str:
        """Drive the reveal to the end (or cancellation) and return its text."""
        for _ in self:
            pass
        return self.text

    async def arun(self) -> str:
        async for _ in self:
            pass
        return self.text


class CipherSession:
    """One user's cipher workspace."""

    NEED_INTEGER = "Need an integer for the key"
    FAILED       = "Translation Failed"
    EMPTY_KEY_NOTES = {
        CipherVariant.CAESAR:   "Input a shift value for the key first!",
        CipherVariant.VIGENERE: "Input a word for the key first!",
    }

    def __init__(self, variant=None, translator: Translator = None,
                 config: Settings = None, pacing: Pacing = None,
                 sleep: Callable[[float], None] = time.sleep):
        self._config     = config or settings
        self._translator = translator or Translator()
        self._pacing     = pacing or constant_pacing(self._config.reveal_delay)
        self._sleep      = sleep
        self.variant     = CipherVariant.parse(
            self._config.default_variant if variant is None else variant
        )
        self.text        = ""
        self._key_text   = ""
        self.output_text = ""
        self.copied_text: Optional[str] = None
        self.last_error: Optional[CipherError] = None
        self.on_encrypted: List[Callable[[str], None]] = []
        self.on_decrypted: List[Callable[[str], None]] = []
        self._reveal: Optional[Reveal] = None

    # ── input fields ─────────────────────────────────────────────────────────

    @property
    def key_text(self) -> str:
        return self._key_text

    @key_text.setter
    def key_text(self, raw: str) -> None:
        self.set_key_text(raw)

    def set_key_text(self, raw: str) -> None:
        """Store key text; Caesar keys are cut to the integer field's limit."""
        raw = raw or ""
        limit = self._config.caesar_key_max_length
        if self.variant is CipherVariant.CAESAR and limit > 0 and len(raw) > limit:
            logger.debug(f"Caesar key truncated to {limit} characters")
            raw = raw[:limit]
        self._key_text = raw

    def select_cipher(self, variant) -> CipherVariant:
        """
        Switch cipher. Clears the key field, as the key shape changes.
        An unknown variant leaves the selection as it was and shows the
        failure message.
        """
        try:
            selected = CipherVariant.parse(variant)
        except CipherError as exc:
            self._fail(exc)
            return self.variant
        self.variant   = selected
        self._key_text = ""
        logger.info(f"Cipher selected: {self.variant.name}")
        return self.variant

    # ── translation ──────────────────────────────────────────────────────────

    def build_request(self, direction) -> TranslationRequest:
        """Validate the current fields. Raises CipherError."""
        if not self._key_text:
            raise EmptyKey("No key entered.")
        return build_request(self.text, self.variant, direction, self._key_text)

    def _message_for(self, exc: CipherError) -> str:
        if isinstance(exc, InvalidKeyFormat):
            return self.NEED_INTEGER
        if isinstance(exc, EmptyKey):
            return self.EMPTY_KEY_NOTES[self.variant]
        return self.FAILED

    def _fail(self, exc: CipherError) -> None:
        self.last_error  = exc
        self.output_text = self._message_for(exc)
        logger.info(f"Translation rejected ({exc.kind}): {exc}")

    def _complete(self, direction: Direction, output: str) -> None:
        self.output_text = output
        self.copied_text = output
        listeners = (self.on_encrypted if direction is Direction.ENCRYPT
                     else self.on_decrypted)
        for listener in listeners:
            listener(output)

    def translate(self, direction) -> str:
        """Translate the current text in one go; returns the output field."""
        self.cancel_reveal()
        direction = Direction(direction)
        self.last_error  = None
        self.output_text = ""
        try:
            request = self.build_request(direction)
            output  = self._translator.translate_request(request)
        except CipherError as exc:
            self._fail(exc)
            return self.output_text
        self._complete(direction, output)
        return self.output_text

    def encode_text(self) -> str:
        return self.translate(Direction.ENCRYPT)

    def decode_text(self) -> str:
        return self.translate(Direction.DECRYPT)

    # ── animated reveal ──────────────────────────────────────────────────────

    @property
    def active_reveal(self) -> Optional[Reveal]:
        return self._reveal

    def cancel_reveal(self) -> None:
        if self._reveal is not None:
            self._reveal.cancel()
            self._reveal = None

    def reveal(self, direction, on_char: Callable[[int, str], None] = None,
               pacing: Pacing = None) -> Optional[Reveal]:
        """
        Start a letter-by-letter reveal of the translation, cancelling any
        reveal still running. The output field grows as characters are
        emitted. Returns None (with the error message in the output field)
        if the key is rejected.
        """
        self.cancel_reveal()
        direction = Direction(direction)
        self.last_error  = None
        self.output_text = ""
        try:
            request = self.build_request(direction)
            chars   = self._translator.stream(request)
        except CipherError as exc:
            self._fail(exc)
            return None

        def show(index: int, char: str) -> None:
            self.output_text += char
            if on_char is not None:
                on_char(index, char)

        def done(output: str) -> None:
            if self._reveal is reveal:
                self._reveal = None
            self._complete(direction, output)

        reveal = Reveal(chars, pacing or self._pacing, sleep=self._sleep,
                        on_char=show, on_done=done)
        self._reveal = reveal
        return reveal
