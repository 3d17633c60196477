#!/usr/bin/env python3
"""
Random Source
=============
Uniform integer draws for every generator in the package.

All randomness flows through RandomSource.uniform_int(), so a test (or a
caller wanting reproducible output) can swap in a subclass that overrides
that single method.

Unseeded sources use secrets.SystemRandom(); seeded sources use a private
random.Random so they do not disturb the global generator.
"""

import random
import secrets
from typing import Any, Optional, Sequence

from .errors import InvalidArgumentError


class RandomSource:
    """
    Uniform random integers over an inclusive range.

    Parameters
    ----------
    seed : int, optional
        Seed for a reproducible sequence. None uses system entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = random.Random(seed)

    def uniform_int(self, low: int, high: int) -> int:
        """Return random integer N such that low <= N <= high."""
        if high < low:
            raise InvalidArgumentError(f"Empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def choice(self, seq: Sequence) -> Any:
        """Return a uniformly chosen element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return seq[self.uniform_int(0, len(seq) - 1)]


# Global instance
_default_rng = None

def get_rng() -> RandomSource:
    """Get the shared default random source."""
    global _default_rng
    if _default_rng is None:
        _default_rng = RandomSource()
    return _default_rng


__all__ = ['RandomSource', 'get_rng']
