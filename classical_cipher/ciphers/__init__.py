from .base     import BaseCipher
from .caesar   import CaesarCipher
from .vigenere import VigenereCipher

__all__ = ["BaseCipher", "CaesarCipher", "VigenereCipher"]
