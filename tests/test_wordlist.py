"""Tests for wordlist files."""

from pathlib import Path

import pytest

from clawbrute.errors import ConfigurationError
from clawbrute.wordlist import Wordlist


class TestWordlist:
    """Test reading wordlists."""

    def test_reads_one_word_per_line(self, write_wordlist):
        path = write_wordlist("words.txt", ["admin", "root", "guest"])
        assert list(Wordlist(path)) == ["admin", "root", "guest"]

    def test_strips_crlf_and_skips_blank_lines(self, temp_dir: Path):
        path = temp_dir / "words.txt"
        path.write_bytes(b"admin\r\n\r\nroot\n\nguest")
        assert list(Wordlist(path)) == ["admin", "root", "guest"]

    def test_keeps_surrounding_spaces(self, temp_dir: Path):
        path = temp_dir / "words.txt"
        path.write_text(" pass word \n")
        assert list(Wordlist(path)) == [" pass word "]

    def test_strips_bom(self, temp_dir: Path):
        path = temp_dir / "words.txt"
        path.write_bytes(b"\xef\xbb\xbfadmin\nroot\n")
        assert list(Wordlist(path)) == ["admin", "root"]

    def test_undecodable_bytes_are_replaced(self, temp_dir: Path):
        path = temp_dir / "words.txt"
        path.write_bytes(b"caf\xe9\n")
        assert list(Wordlist(path)) == ["caf\ufffd"]

    def test_can_be_iterated_repeatedly(self, write_wordlist):
        wordlist = Wordlist(write_wordlist("words.txt", ["a", "b"]))
        assert list(wordlist) == list(wordlist) == ["a", "b"]

    def test_open_missing_file(self, temp_dir: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            Wordlist.open(temp_dir / "missing.txt")

    def test_open_directory(self, temp_dir: Path):
        with pytest.raises(ConfigurationError, match="not a file"):
            Wordlist.open(temp_dir)

    def test_open_returns_wordlist(self, write_wordlist):
        path = write_wordlist("words.txt", ["a"])
        wordlist = Wordlist.open(str(path))
        assert wordlist.path == path
        assert "words.txt" in repr(wordlist)
