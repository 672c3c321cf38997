"""Tests for Playfair cipher."""

import pytest

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherMode
from mpags_cipher.services.engines.polygraphic.playfair import PlayfairCipher


class TestPlayfairCipher:
    """Test suite for Playfair cipher."""

    @pytest.fixture
    def cipher(self):
        return PlayfairCipher("PLAYFAIR")

    def test_key_square(self, cipher):
        assert cipher.square == (
            ("P", "L", "A", "Y", "F"),
            ("I", "R", "B", "C", "D"),
            ("E", "G", "H", "K", "M"),
            ("N", "O", "Q", "S", "T"),
            ("U", "V", "W", "X", "Z"),
        )

    def test_key_square_merges_j(self):
        square = PlayfairCipher("JUMP").square
        letters = [c for row in square for c in row]

        assert letters[:4] == ["I", "U", "M", "P"]
        assert "J" not in letters
        assert len(set(letters)) == 25

    def test_textbook_padding(self, cipher):
        assert cipher.prepare("HELLO", CipherMode.ENCRYPT) == "HELXLO"

    def test_textbook_encrypt(self, cipher):
        assert cipher.apply_cipher("HELLO", CipherMode.ENCRYPT) == "KGYVRV"

    def test_textbook_decrypt(self, cipher):
        assert cipher.apply_cipher("KGYVRV", CipherMode.DECRYPT) == "HELXLO"

    def test_double_letters_separated(self, cipher):
        assert cipher.prepare("BALLOON", CipherMode.ENCRYPT) == "BALXLOON"

    def test_double_x_uses_q(self, cipher):
        assert cipher.prepare("XX", CipherMode.ENCRYPT) == "XQXQ"

    def test_odd_length_padded(self, cipher):
        assert cipher.prepare("ABC", CipherMode.ENCRYPT) == "ABCX"
        assert cipher.prepare("ABX", CipherMode.ENCRYPT) == "ABXQ"

    def test_j_folded_into_i(self, cipher):
        assert cipher.prepare("JAM", CipherMode.ENCRYPT) == "IAMX"

    def test_digits_keep_position(self, cipher):
        assert cipher.prepare("HE1LLO", CipherMode.ENCRYPT) == "HE1LXLO"
        assert cipher.apply_cipher("HE1LLO", CipherMode.ENCRYPT) == "KG1YVRV"

    def test_digits_do_not_affect_pairing(self, cipher):
        with_digits = cipher.apply_cipher("H9ELL0O", CipherMode.ENCRYPT)
        without_digits = cipher.apply_cipher("HELLO", CipherMode.ENCRYPT)

        assert "".join(c for c in with_digits if c.isalpha()) == without_digits

    def test_decrypt_does_not_split_doubles(self, cipher):
        assert cipher.prepare("AAB", CipherMode.DECRYPT) == "AABX"

    def test_prepare_is_idempotent(self, cipher):
        for text in ["HELLO", "BALLOON", "XX", "A1B2C3", "MISSISSIPPI"]:
            once = cipher.prepare(text, CipherMode.ENCRYPT)
            assert cipher.prepare(once, CipherMode.ENCRYPT) == once

    def test_roundtrip(self, cipher):
        """Text with no doubled pairs, no J and even length survives unchanged."""
        plaintext = "THEQUICKBROWNFOX"
        ciphertext = cipher.apply_cipher(plaintext, CipherMode.ENCRYPT)
        assert cipher.apply_cipher(ciphertext, CipherMode.DECRYPT) == plaintext

    def test_roundtrip_returns_padded_text(self, cipher):
        plaintext = "MISSISSIPPI"
        ciphertext = cipher.apply_cipher(plaintext, CipherMode.ENCRYPT)
        decrypted = cipher.apply_cipher(ciphertext, CipherMode.DECRYPT)

        assert decrypted == cipher.prepare(plaintext, CipherMode.ENCRYPT)

    def test_align_moves_to_digraph_boundary(self, cipher):
        text = "HE1LXLO"
        assert cipher.align(text, 0) == 0
        assert cipher.align(text, 1) == 2
        assert cipher.align(text, 2) == 2
        assert cipher.align(text, 3) == 3
        assert cipher.align(text, 4) == 5

    def test_validate_key(self):
        assert PlayfairCipher.validate_key("PLAYFAIR") is True
        assert PlayfairCipher.validate_key("monarchy") is True

        assert PlayfairCipher.validate_key("") is False
        assert PlayfairCipher.validate_key("PLAY FAIR") is False
        assert PlayfairCipher.validate_key("KEY2") is False

    @pytest.mark.parametrize("key", ["", "12", "AB-CD"])
    def test_invalid_key_raises(self, key):
        with pytest.raises(InvalidKeyError):
            PlayfairCipher(key)

    def test_explain(self, cipher):
        explanation = cipher.explain(CipherMode.ENCRYPT)

        assert "PLAYFAIR" in explanation
        assert "P L A Y F" in explanation
