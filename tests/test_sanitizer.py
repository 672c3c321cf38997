"""Tests for the input sanitizer."""

import string

import pytest

from mpags_cipher.services.preprocessing.sanitizer import TextSanitizer


class TestTextSanitizer:
    """Test suite for the text sanitizer."""

    @pytest.fixture
    def sanitizer(self):
        return TextSanitizer()

    def test_letters_are_uppercased(self, sanitizer):
        for char in string.ascii_lowercase:
            assert sanitizer.sanitize_char(char) == char.upper()
        for char in string.ascii_uppercase:
            assert sanitizer.sanitize_char(char) == char

    def test_digits_pass_through(self, sanitizer):
        for char in string.digits:
            assert sanitizer.sanitize_char(char) == char

    def test_other_characters_dropped(self, sanitizer):
        for char in " \t\n!?.,;:'\"-_()[]{}@#$%^&*\x00\x7f":
            assert sanitizer.sanitize_char(char) is None

    def test_non_ascii_letters_dropped(self, sanitizer):
        assert sanitizer.sanitize_char("é") is None
        assert sanitizer.sanitize_char("ß") is None
        assert sanitizer.sanitize_char("٣") is None  # Arabic-Indic digit

    def test_idempotent(self, sanitizer):
        for code in range(256):
            char = chr(code)
            once = sanitizer.sanitize_char(char)
            if once is not None:
                assert sanitizer.sanitize_char(once) == once

    def test_sanitize_text(self, sanitizer):
        assert sanitizer.sanitize("Attack at Dawn!") == "ATTACKATDAWN"
        assert sanitizer.sanitize("Meet at 10pm, ok?") == "MEETAT10PMOK"
        assert sanitizer.sanitize("") == ""

    def test_sanitize_full_tracks_removed(self, sanitizer):
        result = sanitizer.sanitize_full("a b, c!")

        assert result.text == "ABC"
        assert result.original == "a b, c!"
        assert result.removed_chars == {" ": 2, ",": 1, "!": 1}
