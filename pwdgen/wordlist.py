#!/usr/bin/env python3
"""
Word Source
===========
Picks uniformly random words from language word lists.

A word list is a text file ``<words_dir>/<language>.txt`` holding one word
per line. Lines are streamed, never loaded whole: a first pass counts the
records (memoized per file), a second pass returns the chosen one.

Usage:
    from pwdgen.wordlist import WordSource

    source = WordSource()
    source.word_for('en')      # -> 'harbour'
    source.languages()         # -> ['en', 'nl']
"""

import logging
import re
import threading
from itertools import islice
from pathlib import Path
from typing import Dict, List, Optional, Union

from .entropy import RandomSource, get_rng
from .errors import (
    EmptyWordListError,
    MissingWordListError,
    ResourceUnreadableError,
)
from .settings import get_setting, resolve_path

logger = logging.getLogger(__name__)

WORDLIST_SUFFIX = '.txt'

# Language codes are bare file stems; anything else could escape words_dir.
_LANGUAGE_RE = re.compile(r'^[A-Za-z0-9_-]+$')


def default_words_dir() -> Path:
    """Word list directory from settings (relative to the package)."""
    return resolve_path(get_setting('wordlists.directory', 'words'))


class WordSource:
    """
    Random word lookup over a directory of word lists.

    Parameters
    ----------
    words_dir : path, optional
        Directory holding ``<language>.txt`` files. Defaults to the
        ``wordlists.directory`` setting.
    rng : RandomSource, optional
        Source of index draws. Defaults to the shared source.
    encoding : str, optional
        Text encoding of the lists. Defaults to ``wordlists.encoding``.
    """

    def __init__(self, words_dir: Union[str, Path, None] = None,
                 rng: Optional[RandomSource] = None,
                 encoding: Optional[str] = None):
        self.words_dir = Path(words_dir) if words_dir is not None else default_words_dir()
        self.rng = rng or get_rng()
        self.encoding = encoding or get_setting('wordlists.encoding', 'utf-8')
        self._line_counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Language lookup
    # -------------------------------------------------------------------------

    def path_for(self, language: str) -> Path:
        """Conventional path of a language's list (existence not checked)."""
        return self.words_dir / f"{language}{WORDLIST_SUFFIX}"

    def has_language(self, language: str) -> bool:
        if not isinstance(language, str) or not _LANGUAGE_RE.match(language):
            return False
        return self.path_for(language).is_file()

    def resolve(self, language: str) -> Path:
        """Return the word list for a language or raise MissingWordListError."""
        if not self.has_language(language):
            raise MissingWordListError(
                f"No word list for language {language!r}: "
                f"expected {self.words_dir / (str(language) + WORDLIST_SUFFIX)}"
            )
        return self.path_for(language)

    def languages(self) -> List[str]:
        """Sorted codes of every language with a word list."""
        if not self.words_dir.is_dir():
            return []
        return sorted(
            p.stem for p in self.words_dir.glob(f"*{WORDLIST_SUFFIX}")
            if p.is_file() and _LANGUAGE_RE.match(p.stem)
        )

    # -------------------------------------------------------------------------
    # Word selection
    # -------------------------------------------------------------------------

    def word_for(self, language: str) -> str:
        """Return a uniformly random word from the language's list."""
        return self.random_line_from(self.resolve(language))

    def random_line_from(self, path: Union[str, Path]) -> str:
        """Return a uniformly random line of a file, whitespace-trimmed."""
        path = Path(path)
        count = self.line_count(path)
        if count == 0:
            raise EmptyWordListError(f"Word list {path} is empty")

        index = self.rng.uniform_int(0, count - 1)
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                line = next(islice(f, index, None), '')
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceUnreadableError(f"Unable to read word list {path}: {e}") from e
        return line.strip()

    def line_count(self, path: Union[str, Path]) -> int:
        """Number of records in a file. Memoized per file for this source."""
        key = self._cache_key(path)
        with self._lock:
            if key in self._line_counts:
                return self._line_counts[key]

        count = self._count_lines(Path(path))
        logger.debug(f"Counted {count} lines in {path}")

        with self._lock:
            self._line_counts.setdefault(key, count)
            return self._line_counts[key]

    def clear_cache(self) -> None:
        """Forget memoized line counts (e.g. after editing a list)."""
        with self._lock:
            self._line_counts.clear()

    def _count_lines(self, path: Path) -> int:
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                return sum(1 for _ in f)
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceUnreadableError(f"Unable to count lines in {path}: {e}") from e

    @staticmethod
    def _cache_key(path: Union[str, Path]) -> str:
        return str(Path(path).resolve())


__all__ = ['WordSource', 'default_words_dir', 'WORDLIST_SUFFIX']
