#!/usr/bin/env python3
"""
Password Engine
===============
The three password strategies:

- random:   random alphanumeric characters with the digit and punctuation
            blocks dropped in at random positions
- words:    dictionary words from the configured language
- nonsense: invented CV(V)C syllables

Word and syllable passwords are built by appending words until the body
reaches the threshold (min_length minus the injected characters). The digit
and punctuation blocks then go in front of the last word appended.

Usage:
    from pwdgen import PasswordEngine

    engine = PasswordEngine()
    engine.configure('min_length', 16)
    engine.generate_word_password()      # -> 'Harbour42!Lantern'
    engine.generate_nonsense_password()  # -> 'Tak07?Boum'
    engine.generate_random()             # -> 'x8Fq31;pLd2mW'
"""

import logging
import string
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .config import PasswordConfig
from .entropy import RandomSource, get_rng
from .errors import EmptyWordListError, InvalidArgumentError
from .injector import Injector
from .settings import get_setting
from .syllables import SyllableBuilder
from .wordlist import WordSource

logger = logging.getLogger(__name__)

ALPHANUMERIC = string.digits + string.ascii_lowercase + string.ascii_uppercase

METHODS = ('random', 'words', 'nonsense')


def capitalize_first(word: str) -> str:
    """Upper-case the first character only (unlike str.capitalize)."""
    return word[:1].upper() + word[1:]


class PasswordEngine:
    """
    Generates passwords under a PasswordConfig.

    Parameters
    ----------
    config : PasswordConfig, optional
        Policy. Defaults to the ``password`` section of app.yaml.
    rng : RandomSource, optional
        Shared by every component the engine creates.
    word_source : WordSource, optional
        Word lists. Defaults to the config's word source; replacing it
        requires the config's language to exist in the new source.
    """

    def __init__(self, config: Optional[PasswordConfig] = None,
                 rng: Optional[RandomSource] = None,
                 word_source: Optional[WordSource] = None):
        self.rng = rng or get_rng()
        if config is None:
            word_source = word_source or WordSource(rng=self.rng)
            config = PasswordConfig.from_settings(word_source=word_source)
        elif word_source is None:
            word_source = config.word_source
        else:
            config.word_source = word_source
        self.word_source = word_source
        self.config = config
        self.syllables = SyllableBuilder(rng=self.rng)
        self.injector = Injector(rng=self.rng)
        self.max_empty_words = get_setting('generation.max_empty_words', 100)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(self, field: str, value: Any) -> None:
        """Set one policy field; see PasswordConfig.set()."""
        self.config.set(field, value)

    def get(self, field: str) -> Any:
        return self.config.get(field)

    # -------------------------------------------------------------------------
    # Strategies
    # -------------------------------------------------------------------------

    def generate_random(self, num_characters: Optional[int] = None) -> str:
        """
        Generate a password of random alphanumeric characters.

        The digit block and the punctuation block are each placed after a
        randomly chosen body character. A block whose drawn position is
        ``num_characters`` goes at the very end.

        Args:
            num_characters: Body length. Defaults to the config threshold.

        Returns:
            Password of length num_characters + num_digits +
            num_punctuation_symbols.
        """
        if num_characters is None:
            num_characters = self.config.threshold
        if isinstance(num_characters, bool) or not isinstance(num_characters, int) \
                or num_characters < 0:
            raise InvalidArgumentError(
                f"Invalid number of characters {num_characters!r} for generate_random"
            )

        if num_characters == 0:
            digits, punctuation = self.injector.blocks(self.config)
            return digits + punctuation

        digits_position = self.rng.uniform_int(0, num_characters)
        punctuation_position = self.rng.uniform_int(0, num_characters)
        digits, punctuation = self.injector.blocks(self.config)

        parts = []
        for i in range(num_characters):
            parts.append(self.rng.choice(ALPHANUMERIC))
            if i == digits_position:
                parts.append(digits)
            if i == punctuation_position:
                parts.append(punctuation)
        if digits_position == num_characters:
            parts.append(digits)
        if punctuation_position == num_characters:
            parts.append(punctuation)
        return ''.join(parts)

    def generate_word_password(self) -> str:
        """Generate a password from words of the configured language."""
        return self.build_from_generator(
            lambda: self.word_source.word_for(self.config.language)
        )

    def generate_nonsense_password(self) -> str:
        """Generate a password from nonsense syllables."""
        return self.build_from_generator(self.syllables.build_syllable)

    def build_from_generator(self, word_fn: Callable[[], str]) -> str:
        """
        Build a password from words produced by ``word_fn``.

        Words are appended (capitalized if configured) until the body reaches
        the threshold; digits and punctuation are injected at the start of
        the last word.
        """
        threshold = self.config.threshold
        body = ''
        last_boundary = 0
        empty_draws = 0

        while len(body) < threshold:
            word = word_fn()
            if not word:
                empty_draws += 1
                logger.warning(f"Word generator returned an empty word ({empty_draws} in a row)")
                if empty_draws >= self.max_empty_words:
                    raise EmptyWordListError(
                        f"Word generator returned {empty_draws} empty words in a row"
                    )
                continue
            empty_draws = 0
            last_boundary = len(body)
            if self.config.capitalize_words:
                word = capitalize_first(word)
            body += word

        return self.injector.inject(body, last_boundary, self.config)

    # -------------------------------------------------------------------------
    # Conveniences
    # -------------------------------------------------------------------------

    def generate(self, method: str = 'words') -> str:
        """Generate one password by strategy name (random, words, nonsense)."""
        strategies = {
            'random': self.generate_random,
            'words': self.generate_word_password,
            'nonsense': self.generate_nonsense_password,
        }
        strategy = strategies.get(method)
        if strategy is None:
            raise InvalidArgumentError(
                f"Unknown method {method!r}. Available methods: {', '.join(METHODS)}"
            )
        return strategy()

    def generate_sheet(self, languages: Optional[Iterable[str]] = None,
                       random_length: Optional[int] = None) -> List[Tuple[str, str]]:
        """
        One password of every kind.

        Args:
            languages: Word-list languages, one word password each (the
                configured language is left untouched). Defaults
                to the ``sheet.languages`` setting, else every available list.
            random_length: Body length of the random password. Defaults to
                ``sheet.random_length``, else the config threshold.

        Returns:
            List of (label, password) pairs: one per language, then
            'nonsense', then 'random'.
        """
        if languages is None:
            languages = get_setting('sheet.languages') or self.word_source.languages()
        if random_length is None:
            random_length = get_setting('sheet.random_length')

        sheet = []
        for language in languages:
            password = self.build_from_generator(
                lambda: self.word_source.word_for(language)
            )
            sheet.append((language, password))
        sheet.append(('nonsense', self.generate_nonsense_password()))
        sheet.append(('random', self.generate_random(random_length)))
        return sheet


__all__ = ['PasswordEngine', 'ALPHANUMERIC', 'METHODS', 'capitalize_first']
