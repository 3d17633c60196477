#!/usr/bin/env python3
"""
pwdgen - Memorable Password Generator
=====================================

Generates passwords that people can read and type: a fixed number of
digits and punctuation symbols combined with a body of random characters,
dictionary words or invented syllables, up to a minimum length.

Quick Start
-----------
    from pwdgen import PasswordEngine

    engine = PasswordEngine()

    engine.generate_word_password()      # 'Harbour42!Lantern'
    engine.generate_nonsense_password()  # 'Tak07?Boum'
    engine.generate_random()             # 'x8Fq31;pLd2mW'

    # Change the policy
    engine.configure('min_length', 16)
    engine.configure('language', 'nl')
    engine.config.add_punctuation_symbol('#')

Modules
-------
    pwdgen.engine    - PasswordEngine, the three strategies
    pwdgen.config    - PasswordConfig, validated policy
    pwdgen.wordlist  - WordSource, random words from word lists
    pwdgen.syllables - SyllableBuilder, nonsense syllables
    pwdgen.injector  - Injector, digit/punctuation blocks
    pwdgen.entropy   - RandomSource, swappable randomness
    pwdgen.errors    - error types
    pwdgen.settings  - app.yaml defaults
"""

__version__ = "0.1.0"
__author__ = "pwdgen"

from typing import Optional

from .errors import (
    PwdGenError,
    InvalidValueError,
    UnknownPropertyError,
    MissingWordListError,
    ResourceUnreadableError,
    EmptyWordListError,
    EmptyAlphabetError,
    InvalidArgumentError,
    InvalidPositionError,
)
from .entropy import RandomSource, get_rng
from .config import PasswordConfig
from .wordlist import WordSource
from .syllables import SyllableBuilder
from .injector import Injector
from .engine import PasswordEngine


# =============================================================================
# Default engine
# =============================================================================

_engine = None

def get_engine() -> PasswordEngine:
    """Get the shared engine built from app.yaml defaults."""
    global _engine
    if _engine is None:
        _engine = PasswordEngine()
    return _engine


def generate_random(num_characters: Optional[int] = None) -> str:
    """Random-character password from the default engine."""
    return get_engine().generate_random(num_characters)


def generate_word_password() -> str:
    """Word password from the default engine."""
    return get_engine().generate_word_password()


def generate_nonsense_password() -> str:
    """Nonsense-syllable password from the default engine."""
    return get_engine().generate_nonsense_password()


__all__ = [
    '__version__',
    # Engine
    'PasswordEngine',
    'PasswordConfig',
    'WordSource',
    'SyllableBuilder',
    'Injector',
    'RandomSource',
    'get_rng',
    'get_engine',
    'generate_random',
    'generate_word_password',
    'generate_nonsense_password',
    # Errors
    'PwdGenError',
    'InvalidValueError',
    'UnknownPropertyError',
    'MissingWordListError',
    'ResourceUnreadableError',
    'EmptyWordListError',
    'EmptyAlphabetError',
    'InvalidArgumentError',
    'InvalidPositionError',
]
