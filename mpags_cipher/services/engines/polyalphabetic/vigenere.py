import string
from typing import ClassVar

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType
from mpags_cipher.services.engines.base import Cipher
from mpags_cipher.services.engines.registry import CipherRegistry


@CipherRegistry.register
class VigenereCipher(Cipher):
    """
    Vigenère cipher.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    Only letters advance the keyword; digits pass through and leave the
    keyword position where it was. A slice of text processed on its own must
    therefore be given the number of letters that precede it as its phase.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword."
    )

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, key: str):
        if not self.validate_key(key):
            raise InvalidKeyError(self.name, key, "key must be a non-empty alphabetic keyword")
        super().__init__(key)
        self._keyword = key.upper()
        self._shifts = tuple(self.ALPHABET.index(c) for c in self._keyword)

    @property
    def keyword(self) -> str:
        return self._keyword

    @classmethod
    def validate_key(cls, key: str) -> bool:
        """Validate that key is a non-empty ASCII alphabetic keyword."""
        return bool(key) and key.isascii() and key.isalpha()

    def apply_cipher(self, text: str, mode: CipherMode, phase: int = 0) -> str:
        """
        Shift each letter by the keyword letter at its alphabetic position.

        Args:
            text: Sanitized text
            mode: Encrypt adds the keyword shift, decrypt subtracts it
            phase: Number of letters that precede text in the full message

        Returns:
            The transformed text
        """
        sign = 1 if mode == CipherMode.ENCRYPT else -1
        period = len(self._shifts)
        position = phase
        result = []

        for char in text:
            if char in self.ALPHABET:
                shift = self._shifts[position % period]
                idx = self.ALPHABET.index(char)
                result.append(self.ALPHABET[(idx + sign * shift) % 26])
                position += 1
            else:
                result.append(char)

        return "".join(result)

    def phase_at(self, text: str, index: int) -> int:
        """Count the letters before index; digits do not advance the keyword."""
        return sum(1 for c in text[:index] if c in self.ALPHABET)

    def explain(self, mode: CipherMode) -> str:
        """Generate human-readable explanation."""
        shifts = ", ".join(str(s) for s in self._shifts)
        direction = "added to" if mode == CipherMode.ENCRYPT else "subtracted from"
        return (
            f"Vigenère cipher with keyword '{self._keyword}' "
            f"(key length {len(self._keyword)}). "
            f"Shifts [{shifts}] were {direction} successive letters in turn."
        )
