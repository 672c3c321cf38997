from typing import ClassVar

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType
from mpags_cipher.services.engines.base import Cipher
from mpags_cipher.services.engines.registry import CipherRegistry


@CipherRegistry.register
class PlayfairCipher(Cipher):
    """
    Playfair cipher.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON"),
    or a 'Q' when the doubled letter is itself 'X'. Digits take no part in
    pairing and stay where they are.
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    ALPHABET: ClassVar[str] = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
    PADDING: ClassVar[str] = "X"
    ALT_PADDING: ClassVar[str] = "Q"

    def __init__(self, key: str):
        if not self.validate_key(key):
            raise InvalidKeyError(self.name, key, "key must be a non-empty alphabetic keyword")
        super().__init__(key)
        self._square = self._build_key_square(key)
        self._positions = {
            char: (row, col)
            for row, letters in enumerate(self._square)
            for col, char in enumerate(letters)
        }

    @property
    def square(self) -> tuple[tuple[str, ...], ...]:
        return self._square

    @classmethod
    def validate_key(cls, key: str) -> bool:
        """Validate that key is a non-empty ASCII alphabetic keyword."""
        return bool(key) and key.isascii() and key.isalpha()

    def prepare(self, text: str, mode: CipherMode) -> str:
        """
        Form digraphs over the whole text.

        - Replace J with I
        - Insert padding between double letters (encrypt only)
        - Pad a trailing unpaired letter

        The result always holds an even number of letters, none of the
        digraphs repeat a letter when encrypting, and preparing it again
        leaves it unchanged.
        """
        result: list[str] = []
        pending: int | None = None  # index in result of an unpaired letter

        for char in text.replace("J", "I"):
            if char not in self.ALPHABET:
                result.append(char)
                continue

            if pending is None:
                pending = len(result)
                result.append(char)
            elif mode == CipherMode.ENCRYPT and result[pending] == char:
                result.insert(pending + 1, self._padding_for(char))
                pending = len(result)
                result.append(char)
            else:
                result.append(char)
                pending = None

        if pending is not None:
            result.insert(pending + 1, self._padding_for(result[pending]))

        return "".join(result)

    def apply_cipher(self, text: str, mode: CipherMode, phase: int = 0) -> str:
        """Encrypt or decrypt each digraph of the prepared text."""
        prepared = list(self.prepare(text, mode))
        step = 1 if mode == CipherMode.ENCRYPT else -1
        letter_positions = [i for i, c in enumerate(prepared) if c in self.ALPHABET]

        for i in range(0, len(letter_positions), 2):
            first, second = letter_positions[i], letter_positions[i + 1]
            prepared[first], prepared[second] = self._transform_digraph(
                prepared[first], prepared[second], step
            )

        return "".join(prepared)

    def align(self, text: str, index: int) -> int:
        """Move index forward until an even number of letters precede it."""
        letters = sum(1 for c in text[:index] if c in self.ALPHABET)
        if letters % 2 == 0:
            return index

        for pos in range(index, len(text)):
            if text[pos] in self.ALPHABET:
                return pos + 1
        return len(text)

    def explain(self, mode: CipherMode) -> str:
        """Generate human-readable explanation."""
        square_preview = "\n".join(" ".join(row) for row in self._square)
        verb = "encrypted" if mode == CipherMode.ENCRYPT else "decrypted"

        return (
            f"Playfair cipher with keyword '{self.key.upper()}'. "
            f"5x5 key square:\n{square_preview}\n"
            f"Letters are {verb} in pairs using row/column rules."
        )

    def _padding_for(self, char: str) -> str:
        return self.ALT_PADDING if char == self.PADDING else self.PADDING

    def _build_key_square(self, keyword: str) -> tuple[tuple[str, ...], ...]:
        """Build the 5x5 key square from a keyword."""
        keyword = keyword.upper().replace("J", "I")

        # Remove duplicates while preserving order
        seen = set()
        key_letters = []
        for char in keyword + self.ALPHABET:
            if char in self.ALPHABET and char not in seen:
                seen.add(char)
                key_letters.append(char)

        return tuple(tuple(key_letters[i * 5:(i + 1) * 5]) for i in range(5))

    def _transform_digraph(self, a: str, b: str, step: int) -> tuple[str, str]:
        row_a, col_a = self._positions[a]
        row_b, col_b = self._positions[b]
        square = self._square

        if row_a == row_b:
            # Same row: shift right (left when decrypting)
            return square[row_a][(col_a + step) % 5], square[row_b][(col_b + step) % 5]
        if col_a == col_b:
            # Same column: shift down (up when decrypting)
            return square[(row_a + step) % 5][col_a], square[(row_b + step) % 5][col_b]
        # Rectangle: swap columns
        return square[row_a][col_b], square[row_b][col_a]
