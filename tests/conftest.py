"""
Shared fixtures: deterministic random sources and throwaway word lists.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pwdgen.entropy import RandomSource
from pwdgen.wordlist import WordSource


class MinimumRandom(RandomSource):
    """Always returns the low end of the range."""

    def __init__(self):
        super().__init__(seed=0)

    def uniform_int(self, low, high):
        return low


class MaximumRandom(RandomSource):
    """Always returns the high end of the range."""

    def __init__(self):
        super().__init__(seed=0)

    def uniform_int(self, low, high):
        return high


class ScriptedRandom(RandomSource):
    """Returns queued values in order; records every range requested."""

    def __init__(self, values):
        super().__init__(seed=0)
        self.values = list(values)
        self.calls = []

    def uniform_int(self, low, high):
        self.calls.append((low, high))
        value = self.values.pop(0)
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value


@pytest.fixture
def min_rng():
    return MinimumRandom()


@pytest.fixture
def max_rng():
    return MaximumRandom()


@pytest.fixture
def words_dir(tmp_path):
    """Word lists: en = cat/dog/eagle, nl = kat/hond."""
    directory = tmp_path / "words"
    directory.mkdir()
    (directory / "en.txt").write_text("cat\ndog\neagle\n", encoding="utf-8")
    (directory / "nl.txt").write_text("kat\nhond\n", encoding="utf-8")
    return directory


@pytest.fixture
def word_source(words_dir, min_rng):
    return WordSource(words_dir=words_dir, rng=min_rng)
