"""Polyalphabetic ciphers."""

from mpags_cipher.services.engines.polyalphabetic.vigenere import VigenereCipher

__all__ = [
    "VigenereCipher",
]
