#!/usr/bin/env python3
"""
Password Policy Configuration
=============================
Validated policy consumed by every generator: length, digit and punctuation
quotas, punctuation alphabet, capitalization and word-list language.

Every setter validates before it mutates, so a rejected value leaves the
configuration exactly as it was.

Usage:
    from pwdgen.config import PasswordConfig

    config = PasswordConfig()
    config.min_length = 16
    config.set('numDigits', 3)          # generic accessor, camelCase ok
    config.add_punctuation_symbol('#')
"""

from typing import Any, Dict, Iterable, List, Optional

from .errors import InvalidValueError, MissingWordListError, UnknownPropertyError
from .settings import get_setting

DEFAULT_MIN_LENGTH = 12
DEFAULT_NUM_DIGITS = 2
DEFAULT_NUM_PUNCTUATION_SYMBOLS = 1
DEFAULT_PUNCTUATION_SYMBOLS = ['!', '(', ')', '[', ']', ':', ';', ',', '?']
DEFAULT_CAPITALIZE_WORDS = True
DEFAULT_LANGUAGE = 'en'

FIELDS = (
    'min_length',
    'num_digits',
    'num_punctuation_symbols',
    'punctuation_symbols',
    'capitalize_words',
    'language',
)

# camelCase spellings accepted by get() and set().
FIELD_ALIASES = {
    'minLength': 'min_length',
    'numDigits': 'num_digits',
    'numPunctuationSymbols': 'num_punctuation_symbols',
    'punctuationSymbols': 'punctuation_symbols',
    'punctuationAlphabet': 'punctuation_symbols',
    'punctuation_alphabet': 'punctuation_symbols',
    'capitalizeWords': 'capitalize_words',
}


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_symbol(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def _check_count(name: str, value: Any) -> int:
    if not _is_count(value):
        raise InvalidValueError(
            f"Invalid value {value!r} for {name}: must be a non-negative integer"
        )
    return value


class PasswordConfig:
    """
    Password policy.

    Parameters
    ----------
    min_length : int
        Minimum total password length.
    num_digits : int
        Digits injected into every password.
    num_punctuation_symbols : int
        Punctuation symbols injected into every password.
    punctuation_symbols : sequence of str, optional
        Single-character punctuation alphabet.
    capitalize_words : bool
        Capitalize the first letter of each word or syllable.
    language : str, optional
        Word-list language code. Validated against ``word_source`` when
        given; the built-in default is trusted.
    word_source : WordSource, optional
        Used to check that a language has a word list.
    """

    def __init__(self,
                 min_length: int = DEFAULT_MIN_LENGTH,
                 num_digits: int = DEFAULT_NUM_DIGITS,
                 num_punctuation_symbols: int = DEFAULT_NUM_PUNCTUATION_SYMBOLS,
                 punctuation_symbols: Optional[Iterable[str]] = None,
                 capitalize_words: bool = DEFAULT_CAPITALIZE_WORDS,
                 language: Optional[str] = None,
                 word_source=None):
        self._word_source = word_source
        self._min_length = DEFAULT_MIN_LENGTH
        self._num_digits = DEFAULT_NUM_DIGITS
        self._num_punctuation_symbols = DEFAULT_NUM_PUNCTUATION_SYMBOLS
        self._punctuation_symbols = list(DEFAULT_PUNCTUATION_SYMBOLS)
        self._capitalize_words = DEFAULT_CAPITALIZE_WORDS
        self._language = DEFAULT_LANGUAGE

        self.min_length = min_length
        self.num_digits = num_digits
        self.num_punctuation_symbols = num_punctuation_symbols
        if punctuation_symbols is not None:
            self.punctuation_symbols = punctuation_symbols
        self.capitalize_words = capitalize_words
        if language is not None:
            self.language = language

    @classmethod
    def from_settings(cls, word_source=None) -> 'PasswordConfig':
        """Build a config from the ``password`` section of app.yaml."""
        section = get_setting('password') or {}
        return cls(
            min_length=section.get('min_length', DEFAULT_MIN_LENGTH),
            num_digits=section.get('num_digits', DEFAULT_NUM_DIGITS),
            num_punctuation_symbols=section.get(
                'num_punctuation_symbols', DEFAULT_NUM_PUNCTUATION_SYMBOLS),
            punctuation_symbols=section.get('punctuation_symbols'),
            capitalize_words=section.get('capitalize_words', DEFAULT_CAPITALIZE_WORDS),
            language=section.get('language'),
            word_source=word_source,
        )

    # -------------------------------------------------------------------------
    # Word source
    # -------------------------------------------------------------------------

    @property
    def word_source(self):
        if self._word_source is None:
            from .wordlist import WordSource
            self._word_source = WordSource()
        return self._word_source

    @word_source.setter
    def word_source(self, source) -> None:
        """Switch word lists; the current language must exist in the new source."""
        if not source.has_language(self._language):
            raise MissingWordListError(
                f"Language {self._language!r} has no word list in {source.words_dir}"
            )
        self._word_source = source

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    @property
    def min_length(self) -> int:
        return self._min_length

    @min_length.setter
    def min_length(self, value: int) -> None:
        self._min_length = _check_count('min_length', value)

    @property
    def num_digits(self) -> int:
        return self._num_digits

    @num_digits.setter
    def num_digits(self, value: int) -> None:
        self._num_digits = _check_count('num_digits', value)

    @property
    def num_punctuation_symbols(self) -> int:
        return self._num_punctuation_symbols

    @num_punctuation_symbols.setter
    def num_punctuation_symbols(self, value: int) -> None:
        self._num_punctuation_symbols = _check_count('num_punctuation_symbols', value)

    @property
    def punctuation_symbols(self) -> List[str]:
        return list(self._punctuation_symbols)

    @punctuation_symbols.setter
    def punctuation_symbols(self, value: Iterable[str]) -> None:
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise InvalidValueError(
                f"Invalid value {value!r} for punctuation_symbols: must be a list"
            )
        for item in value:
            if not _is_symbol(item):
                raise InvalidValueError(
                    f"Invalid punctuation symbol {item!r}: must be a single character"
                )
        self._punctuation_symbols = list(value)

    @property
    def capitalize_words(self) -> bool:
        return self._capitalize_words

    @capitalize_words.setter
    def capitalize_words(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise InvalidValueError(
                f"Invalid value {value!r} for capitalize_words: must be True or False"
            )
        self._capitalize_words = value

    @property
    def language(self) -> str:
        return self._language

    @language.setter
    def language(self, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidValueError(f"Invalid value {value!r} for language: must be a string")
        if not self.word_source.has_language(value):
            raise MissingWordListError(
                f"Invalid language {value!r}: there must be a word list "
                f"{self.word_source.path_for(value)}"
            )
        self._language = value

    # -------------------------------------------------------------------------
    # Punctuation helpers
    # -------------------------------------------------------------------------

    def add_punctuation_symbol(self, symbol: str) -> None:
        """Append a symbol to the alphabet unless it is already there."""
        if not _is_symbol(symbol):
            raise InvalidValueError(
                f"Unable to add symbol {symbol!r} to punctuation list: "
                f"must be a single character"
            )
        if symbol not in self._punctuation_symbols:
            self._punctuation_symbols.append(symbol)

    def remove_punctuation_symbol(self, symbol: str) -> None:
        """Remove one occurrence of a symbol; absent symbols are ignored."""
        if symbol in self._punctuation_symbols:
            self._punctuation_symbols.remove(symbol)

    # -------------------------------------------------------------------------
    # Generic access
    # -------------------------------------------------------------------------

    @staticmethod
    def field_name(name: str) -> str:
        """Canonical field name for ``name`` or raise UnknownPropertyError."""
        canonical = FIELD_ALIASES.get(name, name)
        if canonical not in FIELDS:
            raise UnknownPropertyError(f"Unknown configuration property {name!r}")
        return canonical

    def get(self, name: str) -> Any:
        return getattr(self, self.field_name(name))

    def set(self, name: str, value: Any) -> None:
        setattr(self, self.field_name(name), value)

    @property
    def threshold(self) -> int:
        """Body length required before digits and punctuation are injected."""
        return max(0, self._min_length - self._num_digits - self._num_punctuation_symbols)

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in FIELDS}

    def __repr__(self) -> str:
        fields = ', '.join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"PasswordConfig({fields})"


__all__ = [
    'PasswordConfig',
    'FIELDS',
    'FIELD_ALIASES',
    'DEFAULT_PUNCTUATION_SYMBOLS',
]
