"""
classical_cipher — Live Demo: Caesar, Vigenère, errors, paced reveal
====================================================================
Run:  python examples/demo_ciphers.py

Walks a session through both ciphers the way a front-end would,
then reveals a translation letter by letter.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_cipher import CipherSession, CipherVariant, Direction, translate
from classical_cipher.config import settings

LINE = "═" * 70
MSG  = "Attack at dawn, hold the bridge!"

logging.basicConfig(level=settings.log_level, format=' %(message)s')

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classical_cipher — Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("Caesar — shift 3")
session = CipherSession(CipherVariant.CAESAR)
session.text = MSG
session.key_text = "3"
ct = session.encode_text()
ok("Encrypted", ct)
session.text = ct
ok("Decrypted", session.decode_text())
ok("Shift -23 agrees", str(translate(MSG, "caesar", "encrypt", "-23") == ct))

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header("Vigenère — keyword LEMON")
session.select_cipher(CipherVariant.VIGENERE)
session.text = MSG
session.key_text = "LEMON"
ct = session.encode_text()
ok("Encrypted", ct)
session.text = ct
ok("Decrypted", session.decode_text())

# ── ERRORS ───────────────────────────────────────────────────────────────────
header("Rejected keys")
session.key_text = ""
ok("Empty keyword", session.encode_text())
session.select_cipher(CipherVariant.CAESAR)
session.key_text = "three"
ok("Word as shift", session.encode_text())

# ── REVEAL ───────────────────────────────────────────────────────────────────
header("Letter-by-letter reveal")
session.text = MSG
session.key_text = "13"
print("  ", end="", flush=True)
for ch in session.reveal(Direction.ENCRYPT):
    print(ch, end="", flush=True)
print()
ok("Output field", session.output_text)
print(f"{LINE}\n")
