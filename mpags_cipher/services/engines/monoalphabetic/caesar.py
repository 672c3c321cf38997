import string
from typing import ClassVar

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType
from mpags_cipher.services.engines.base import Cipher
from mpags_cipher.services.engines.registry import CipherRegistry


@CipherRegistry.register
class CaesarCipher(Cipher):
    """
    Caesar cipher.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Every character is handled on its own, so any slice of
    the text can be processed independently of the rest.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, key: str = ""):
        if not self.validate_key(key):
            raise InvalidKeyError(self.name, key, "key must be a non-negative integer")
        super().__init__(key)
        self._shift = self._parse_key(key)

    @property
    def shift(self) -> int:
        return self._shift

    @classmethod
    def validate_key(cls, key: str) -> bool:
        """Validate that key is empty or a non-negative integer."""
        return key == "" or (key.isascii() and key.isdigit())

    def apply_cipher(self, text: str, mode: CipherMode, phase: int = 0) -> str:
        """Shift every letter; digits pass through unchanged."""
        shift = self._shift if mode == CipherMode.ENCRYPT else -self._shift
        return self._shift_text(text, shift)

    def explain(self, mode: CipherMode) -> str:
        """Generate human-readable explanation."""
        direction = "forward" if mode == CipherMode.ENCRYPT else "back"
        return (
            f"Caesar cipher with shift of {self._shift}. "
            f"Each letter was shifted {direction} {self._shift} positions in the alphabet."
        )

    @classmethod
    def _parse_key(cls, key: str) -> int:
        """Parse key to integer shift value, reducing digit by digit so any length works."""
        shift = 0
        for digit in key:
            shift = (shift * 10 + int(digit)) % len(cls.ALPHABET)
        return shift

    def _shift_text(self, text: str, shift: int) -> str:
        result = []

        for char in text:
            if char in self.ALPHABET:
                idx = self.ALPHABET.index(char)
                result.append(self.ALPHABET[(idx + shift) % 26])
            else:
                result.append(char)

        return "".join(result)
