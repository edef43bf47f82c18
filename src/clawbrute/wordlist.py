"""Wordlist files used as username and password sources."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from clawbrute.errors import ConfigurationError

_BOM = "\ufeff"


class Wordlist:
    """A wordlist file read lazily, one word per line.

    Every iteration re-opens the file, so the same wordlist can be walked once
    per username without being held in memory. Blank lines are skipped and a
    leading byte-order mark is removed.
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @classmethod
    def open(cls, path: Path | str, encoding: str = "utf-8") -> Wordlist:
        """Return a wordlist for ``path`` after checking the file exists."""
        wordlist_path = Path(path).expanduser()
        if not wordlist_path.exists():
            raise ConfigurationError(f"wordlist not found: {wordlist_path}")
        if not wordlist_path.is_file():
            raise ConfigurationError(f"wordlist is not a file: {wordlist_path}")
        return cls(wordlist_path, encoding=encoding)

    def __iter__(self) -> Iterator[str]:
        with self.path.open("r", encoding=self.encoding, errors="replace", newline="") as handle:
            for lineno, line in enumerate(handle):
                word = line.rstrip("\r\n")
                if lineno == 0 and word.startswith(_BOM):
                    word = word[len(_BOM) :]
                if word:
                    yield word

    def __repr__(self) -> str:
        return f"Wordlist({str(self.path)!r})"
