"""Monoalphabetic ciphers."""

from mpags_cipher.services.engines.monoalphabetic.caesar import CaesarCipher

__all__ = [
    "CaesarCipher",
]
