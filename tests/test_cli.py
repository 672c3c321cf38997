"""Tests for the command-line interface."""

import io

import pytest

from mpags_cipher import __version__
from mpags_cipher.cli import main
from mpags_cipher.models.schemas import CipherMode
from mpags_cipher.services.engines.monoalphabetic.caesar import CaesarCipher


@pytest.fixture
def stdin(monkeypatch):
    def _set(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set


class TestCommandLine:
    """Test the mpags-cipher command."""

    def test_encrypt_from_stdin(self, stdin, capsys):
        stdin("Attack at Dawn!\n")

        assert main(["-c", "caesar", "-k", "3"]) == 0
        assert capsys.readouterr().out == "DWWDFNDWGDZQ\n"

    def test_default_is_null_caesar(self, stdin, capsys):
        stdin("Hello, World 2024")

        assert main([]) == 0
        assert capsys.readouterr().out == "HELLOWORLD2024\n"

    def test_decrypt(self, stdin, capsys):
        stdin("LXFOPVEFRNHR")

        assert main(["-c", "vigenere", "-k", "lemon", "--decrypt"]) == 0
        assert capsys.readouterr().out == "ATTACKATDAWN\n"

    def test_file_input_and_output(self, tmp_path, capsys):
        input_file = tmp_path / "in.txt"
        output_file = tmp_path / "out.txt"
        input_file.write_text("Hello\n", encoding="utf-8")

        status = main([
            "-c", "playfair", "-k", "PLAYFAIR",
            "-i", str(input_file), "-o", str(output_file),
        ])

        assert status == 0
        assert output_file.read_text(encoding="utf-8") == "KGYVRV\n"
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("workers", ["1", "3", "16"])
    def test_worker_count_does_not_change_output(self, stdin, capsys, workers):
        stdin("The quick brown fox jumps over the lazy dog 123")

        assert main(["-c", "vigenere", "-k", "KEY", "-n", workers]) == 0
        assert capsys.readouterr().out == "DLCAYGMOZBSUXJMHNSWTQYZCBXFOPYJCBYK123\n"

    def test_very_long_caesar_key(self, stdin, capsys):
        stdin("ABC")

        assert main(["-k", "1" * 5000]) == 0
        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out == CaesarCipher("1" * 5000).apply_cipher("ABC", CipherMode.ENCRYPT) + "\n"

    def test_missing_input_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.txt"

        assert main(["-i", str(missing)]) == 1
        assert f"failed to create istream on file '{missing}'" in capsys.readouterr().err

    def test_unwritable_output_file(self, tmp_path, stdin, capsys):
        stdin("ABC")
        target = tmp_path / "no-such-dir" / "out.txt"

        assert main(["-o", str(target)]) == 1
        assert "failed to create ostream" in capsys.readouterr().err

    def test_invalid_key(self, stdin, capsys):
        stdin("HELLO")

        assert main(["-c", "playfair"]) == 1
        captured = capsys.readouterr()
        assert "[error] problem constructing requested cipher" in captured.err
        assert captured.out == ""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0
        assert "-c CIPHER" in capsys.readouterr().out

    def test_unknown_cipher_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-c", "enigma"])

        assert exc_info.value.code == 2

    def test_encrypt_and_decrypt_exclusive(self, capsys):
        with pytest.raises(SystemExit):
            main(["--encrypt", "--decrypt"])
