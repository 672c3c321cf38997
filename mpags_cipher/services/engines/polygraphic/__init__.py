"""Polygraphic ciphers."""

from mpags_cipher.services.engines.polygraphic.playfair import PlayfairCipher

__all__ = [
    "PlayfairCipher",
]
