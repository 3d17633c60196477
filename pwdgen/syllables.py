#!/usr/bin/env python3
"""
Nonsense Syllables
==================
Pronounceable consonant-vowel(s)-consonant syllables such as ``tak``,
``boum`` or ``zeix``.
"""

from typing import Optional

from .entropy import RandomSource, get_rng
from .errors import InvalidArgumentError

CONSONANTS = 'bcdfghjklmnpqrstvwxzy'
VOWELS = 'aeiou'


class SyllableBuilder:
    """
    Builds CV(V)C syllables with uniform letter selection.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or get_rng()
        self.consonants = CONSONANTS
        self.vowels = VOWELS

    def build_syllable(self, num_vowels: Optional[int] = None) -> str:
        """
        Build one syllable.

        Args:
            num_vowels: Vowels between the two consonants. Random 1-2 if None.

        Returns:
            Consonant, ``num_vowels`` vowels, consonant.
        """
        if num_vowels is None:
            num_vowels = self.rng.uniform_int(1, 2)
        elif isinstance(num_vowels, bool) or not isinstance(num_vowels, int) or num_vowels < 0:
            raise InvalidArgumentError(
                f"num_vowels must be a non-negative integer, got {num_vowels!r}"
            )

        result = [self.rng.choice(self.consonants)]
        result.extend(self.rng.choice(self.vowels) for _ in range(num_vowels))
        result.append(self.rng.choice(self.consonants))
        return ''.join(result)


__all__ = ['SyllableBuilder', 'CONSONANTS', 'VOWELS']
