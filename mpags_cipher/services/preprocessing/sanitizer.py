import string
from dataclasses import dataclass


@dataclass
class SanitizedText:
    """Result of text sanitization."""

    text: str
    original: str
    removed_chars: dict[str, int]


class TextSanitizer:
    """
    Reduces raw input to the cipher-safe alphabet.

    Handles:
    - Case conversion (ASCII letters are upper-cased)
    - Digit passthrough
    - Removal of everything else (whitespace, punctuation, control characters)
    """

    LETTERS = frozenset(string.ascii_letters)
    DIGITS = frozenset(string.digits)

    def sanitize_char(self, char: str) -> str | None:
        """
        Map a single character into the cipher-safe alphabet.

        Args:
            char: A single input character

        Returns:
            The upper-cased letter, the unchanged digit, or None if dropped
        """
        if char in self.LETTERS:
            return char.upper()
        if char in self.DIGITS:
            return char
        return None

    def sanitize(self, text: str) -> str:
        """
        Sanitize a whole string.

        Args:
            text: Raw input text

        Returns:
            Text containing only A-Z and 0-9
        """
        return self.sanitize_full(text).text

    def sanitize_full(self, text: str) -> SanitizedText:
        """
        Sanitize text and return detailed result.

        Args:
            text: Raw input text

        Returns:
            SanitizedText with counts of the dropped characters
        """
        result = []
        removed_chars: dict[str, int] = {}

        for char in text:
            sanitized = self.sanitize_char(char)
            if sanitized is None:
                removed_chars[char] = removed_chars.get(char, 0) + 1
            else:
                result.append(sanitized)

        return SanitizedText(
            text="".join(result),
            original=text,
            removed_chars=removed_chars,
        )
