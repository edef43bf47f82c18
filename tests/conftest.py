"""Test configuration and fixtures for ClawBrute."""

import asyncio
import tempfile
from collections.abc import Callable, Collection, Generator
from pathlib import Path

import pytest

from clawbrute.engine import AttemptProbe, Credentials


class MatcherProbe(AttemptProbe):
    """In-memory probe: a pair is valid when ``matcher`` says so."""

    name = "test/matcher"
    summary = "Matches pairs in memory"

    def __init__(
        self,
        matcher: Callable[[str, str], bool],
        attempts: list[Credentials],
        delay: float = 0.0,
    ):
        super().__init__()
        self.matcher = matcher
        self.attempts = attempts
        self.delay = delay

    async def attempt(self, username: str, password: str) -> bool:
        self.attempts.append(Credentials(username, password))
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.matcher(username, password)


class ProbeRecorder:
    """Builds MatcherProbe factories and keeps every attempt they make."""

    def __init__(self) -> None:
        self.attempts: list[Credentials] = []
        self.created = 0

    def factory(
        self,
        matcher: Callable[[str, str], bool],
        delay: float = 0.0,
    ) -> Callable[[], MatcherProbe]:
        def build() -> MatcherProbe:
            self.created += 1
            return MatcherProbe(matcher, self.attempts, delay=delay)

        return build

    def matching(self, valid: Collection[tuple[str, str]], delay: float = 0.0):
        pairs = set(valid)
        return self.factory(lambda u, p: (u, p) in pairs, delay=delay)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recorder() -> ProbeRecorder:
    """Return a fresh probe recorder."""
    return ProbeRecorder()


@pytest.fixture
def write_wordlist(temp_dir: Path) -> Callable[..., Path]:
    """Return a helper writing words (one per line) to a file in temp_dir."""

    def write(name: str, words: list[str], newline: str = "\n") -> Path:
        path = temp_dir / name
        path.write_text("".join(f"{word}{newline}" for word in words), encoding="utf-8")
        return path

    return write


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Point HOME and the working directory at temp_dir and clear CLAWBRUTE_* vars."""
    for key in ("CLAWBRUTE_CONCURRENCY", "CLAWBRUTE_TIMEOUT", "CLAWBRUTE_VERBOSE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    monkeypatch.chdir(temp_dir)
    return temp_dir
