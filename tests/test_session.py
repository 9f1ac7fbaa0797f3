"""
classical_cipher — Session & Reveal Test Suite
==============================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_session.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio

import pytest
from classical_cipher import (
    CipherSession, CipherVariant, Direction, Reveal,
    EmptyKey, InvalidKeyFormat, UnsupportedVariant, constant_pacing, letters_only_pacing,
)
from classical_cipher.config import Settings

CONFIG = Settings(reveal_delay=0.0, caesar_key_max_length=9, default_variant="caesar")


def make_session(variant=None, text="", key="", sleep=None):
    s = CipherSession(variant=variant, config=CONFIG,
                      sleep=sleep or (lambda seconds: None))
    s.text = text
    s.key_text = key
    return s

# ── Settings ──────────────────────────────────────────────────────────────────
def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CIPHER_REVEAL_DELAY", "0.2")
    monkeypatch.setenv("CIPHER_DEFAULT_VARIANT", "vigenere")
    cfg = Settings()
    assert cfg.reveal_delay == 0.2
    assert CipherSession(config=cfg).variant is CipherVariant.VIGENERE

# ── Selection & key field ────────────────────────────────────────────────────
def test_default_variant_is_caesar():
    assert make_session().variant is CipherVariant.CAESAR

def test_select_cipher_clears_key():
    s = make_session(key="3")
    assert s.select_cipher(1) is CipherVariant.VIGENERE
    assert s.key_text == ""

def test_caesar_key_truncated_to_field_limit():
    s = make_session(key="12345678901234")
    assert s.key_text == "123456789"

def test_vigenere_key_not_truncated():
    s = make_session(variant="vigenere", key="averyveryverylongkeyword")
    assert s.key_text == "averyveryverylongkeyword"

def test_select_unknown_cipher_keeps_selection():
    s = make_session(key="3")
    assert s.select_cipher("playfair") is CipherVariant.CAESAR
    assert s.output_text == CipherSession.FAILED
    assert isinstance(s.last_error, UnsupportedVariant)
    assert s.key_text == "3"

def test_unlimited_caesar_key_field_accepts_huge_shift():
    s = CipherSession(config=Settings(reveal_delay=0.0, caesar_key_max_length=0))
    s.text = "hello"
    s.key_text = "9" * 5000
    assert len(s.encode_text()) == 5
    assert s.last_error is None

def test_direction_name_in_any_case():
    s = make_session(text="hello", key="3")
    assert s.translate("Encrypt") == "khoor"

# ── Bulk translation ──────────────────────────────────────────────────────────
def test_encode_and_decode():
    s = make_session(text="Hello", key="3")
    assert s.encode_text() == "khoor"
    assert s.copied_text == "khoor"
    assert s.last_error is None
    s.text = s.output_text
    assert s.decode_text() == "hello"

def test_vigenere_session_roundtrip():
    s = make_session(variant=CipherVariant.VIGENERE, text="attack at dawn", key="LEMON")
    assert s.encode_text() == "lxfopv ef rnhr"
    s.text = s.output_text
    assert s.decode_text() == "attack at dawn"

@pytest.mark.parametrize("variant,message", [
    ("caesar",   "Input a shift value for the key first!"),
    ("vigenere", "Input a word for the key first!"),
])
def test_empty_key_prompts(variant, message):
    s = make_session(variant=variant, text="hello")
    assert s.encode_text() == message
    assert isinstance(s.last_error, EmptyKey)
    assert s.copied_text is None

def test_non_integer_caesar_key():
    s = make_session(text="hello", key="abc")
    assert s.encode_text() == CipherSession.NEED_INTEGER
    assert isinstance(s.last_error, InvalidKeyFormat)

def test_keyword_without_letters():
    s = make_session(variant="vigenere", text="hello", key="1234")
    assert s.decode_text() == "Input a word for the key first!"

def test_completion_callbacks_follow_direction():
    s = make_session(text="abc", key="1")
    encrypted, decrypted = [], []
    s.on_encrypted.append(encrypted.append)
    s.on_decrypted.append(decrypted.append)
    s.encode_text()
    s.decode_text()
    assert encrypted == ["bcd"]
    assert decrypted == ["zab"]

def test_failed_translation_fires_no_callback():
    s = make_session(text="abc", key="x")
    fired = []
    s.on_encrypted.append(fired.append)
    s.encode_text()
    assert fired == []

def test_sessions_are_independent():
    a = make_session(text="hello", key="1")
    b = make_session(variant="vigenere", text="hello", key="b")
    a.encode_text()
    assert b.output_text == ""
    assert b.encode_text() == a.output_text == "ifmmp"

# ── Reveal ────────────────────────────────────────────────────────────────────
def test_reveal_streams_into_output():
    slept = []
    s = make_session(text="hi there", key="1", sleep=slept.append)
    seen = []
    reveal = s.reveal(Direction.ENCRYPT, on_char=lambda i, c: seen.append(s.output_text),
                      pacing=constant_pacing(0.5))
    assert s.output_text == ""
    assert reveal.run() == "ij uifsf"
    assert reveal.done
    assert s.output_text == s.copied_text == "ij uifsf"
    assert seen[:3] == ["i", "ij", "ij "]
    assert slept == [0.5] * 8
    assert s.active_reveal is None

def test_letters_only_pacing_skips_pauses_for_spaces():
    slept = []
    s = make_session(text="a b", key="1", sleep=slept.append)
    s.reveal("encrypt", pacing=letters_only_pacing(0.1)).run()
    assert slept == [0.1, 0.1]

def test_new_reveal_cancels_previous():
    s = make_session(text="hello world", key="3")
    done = []
    s.on_encrypted.append(done.append)
    first = s.reveal(Direction.ENCRYPT)
    it = iter(first)
    assert next(it) == "k"
    assert next(it) == "h"
    second = s.reveal(Direction.DECRYPT)
    assert first.cancelled
    assert list(it) == []
    assert first.text == "kh"
    assert second.run() == "ebiil tloia"
    assert s.output_text == "ebiil tloia"
    assert done == []

def test_cancel_reveal_stops_output():
    s = make_session(text="abcdef", key="1")
    reveal = s.reveal(Direction.ENCRYPT)
    it = iter(reveal)
    next(it)
    s.cancel_reveal()
    assert list(it) == []
    assert s.output_text == "b"
    assert not reveal.done
    assert s.copied_text is None

def test_bulk_translate_cancels_reveal():
    s = make_session(text="abc", key="1")
    reveal = s.reveal(Direction.ENCRYPT)
    assert s.encode_text() == "bcd"
    assert reveal.cancelled

def test_reveal_with_bad_key_returns_none():
    s = make_session(text="abc", key="nope")
    assert s.reveal(Direction.ENCRYPT) is None
    assert s.output_text == CipherSession.NEED_INTEGER

def test_async_reveal():
    s = make_session(variant="vigenere", text="attack at dawn", key="lemon")
    reveal = s.reveal(Direction.ENCRYPT, pacing=constant_pacing(0))

    async def collect():
        return [c async for c in reveal]

    assert "".join(asyncio.run(collect())) == "lxfopv ef rnhr"
    assert s.output_text == "lxfopv ef rnhr"

def test_async_reveal_cancelled_midway():
    s = make_session(text="abcdef", key="1")
    reveal = s.reveal(Direction.ENCRYPT)

    async def collect():
        out = []
        async for c in reveal:
            out.append(c)
            if len(out) == 3:
                reveal.cancel()
        return out

    assert asyncio.run(collect()) == ["b", "c", "d"]
    assert not reveal.done

def test_reveal_standalone():
    r = Reveal(iter("xyz"), constant_pacing(0))
    assert r.run() == "xyz"
    assert r.done and not r.cancelled

def test_finished_reveal_completes_once():
    fired = []
    r = Reveal(iter("ab"), constant_pacing(0), on_done=fired.append)
    assert r.run() == "ab"
    assert r.run() == "ab"
    assert list(r) == []
    assert fired == ["ab"]

def test_session_reveal_iterated_then_run_fires_listener_once():
    s = make_session(text="abc", key="1")
    done = []
    s.on_encrypted.append(done.append)
    reveal = s.reveal(Direction.ENCRYPT)
    assert "".join(reveal) == "bcd"
    reveal.run()
    assert done == ["bcd"]

def test_resumed_reveal_keeps_indices():
    seen = []
    r = Reveal(iter("xyz"), constant_pacing(0), on_char=lambda i, c: seen.append(i))
    it = iter(r)
    next(it)
    r.run()
    assert seen == [0, 1, 2]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
