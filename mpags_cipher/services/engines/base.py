from abc import ABC, abstractmethod
from typing import ClassVar

from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType


class Cipher(ABC):
    """
    Abstract base class for all ciphers.

    A cipher instance is built once from a validated key and never changes
    afterwards, so one instance can be shared read-only by many worker threads.

    Each cipher implementation must provide:
    - validate_key(): Check a key before construction
    - apply_cipher(): Encrypt or decrypt sanitized text
    - explain(): Generate human-readable description

    Ciphers whose output depends on position override the chunking hooks:
    - prepare(): Whole-text rewrite that must happen before any split
    - align(): Move a split point onto a safe boundary
    - phase_at(): Phase a chunk starting at a given offset begins with
    """

    # Cipher metadata
    name: ClassVar[str]
    cipher_type: ClassVar[CipherType]
    cipher_family: ClassVar[CipherFamily]
    description: ClassVar[str]

    def __init__(self, key: str):
        self._key = key

    @property
    def key(self) -> str:
        """The key this cipher was constructed with."""
        return self._key

    @classmethod
    @abstractmethod
    def validate_key(cls, key: str) -> bool:
        """
        Validate that a key is valid for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        pass

    @abstractmethod
    def apply_cipher(self, text: str, mode: CipherMode, phase: int = 0) -> str:
        """
        Apply the cipher to sanitized text.

        Args:
            text: Text drawn from A-Z and 0-9
            mode: Encrypt or decrypt
            phase: Key phase the first character of text is processed at

        Returns:
            The transformed text
        """
        pass

    @abstractmethod
    def explain(self, mode: CipherMode) -> str:
        """
        Generate human-readable explanation of what the cipher does.

        Args:
            mode: Encrypt or decrypt

        Returns:
            Explanation string
        """
        pass

    def prepare(self, text: str, mode: CipherMode) -> str:
        """Rewrite the whole text before it is split. Identity by default."""
        return text

    def align(self, text: str, index: int) -> int:
        """Return the nearest split point at or after index. Any index is safe by default."""
        return index

    def phase_at(self, text: str, index: int) -> int:
        """Return the phase for a chunk of text starting at index."""
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r})"
