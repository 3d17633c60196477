#!/usr/bin/env python3
"""
Digit & Punctuation Injection
=============================
Builds the digit block and the punctuation block required by a password
policy and splices them into a password body.
"""

import string
from typing import Optional, Sequence

from .entropy import RandomSource, get_rng
from .errors import EmptyAlphabetError, InvalidPositionError

DIGITS = string.digits


class Injector:
    """Splices policy-mandated digits and punctuation into a body."""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or get_rng()

    def digit_block(self, count: int) -> str:
        return ''.join(self.rng.choice(DIGITS) for _ in range(count))

    def punctuation_block(self, count: int, alphabet: Sequence[str]) -> str:
        if count > 0 and not alphabet:
            raise EmptyAlphabetError(
                f"{count} punctuation symbol(s) requested but the punctuation alphabet is empty"
            )
        return ''.join(self.rng.choice(alphabet) for _ in range(count))

    def blocks(self, config) -> tuple:
        """Digit block and punctuation block for a config, in that order."""
        digits = self.digit_block(config.num_digits)
        punctuation = self.punctuation_block(
            config.num_punctuation_symbols, config.punctuation_symbols
        )
        return digits, punctuation

    def inject(self, body: str, position: int, config) -> str:
        """
        Insert the digit block, then the punctuation block, at ``position``.

        Args:
            body: Password body
            position: Split point, 0 <= position <= len(body)
            config: PasswordConfig supplying block sizes and the alphabet

        Returns:
            ``body[:position] + digits + punctuation + body[position:]``
        """
        if isinstance(position, bool) or not isinstance(position, int) \
                or not 0 <= position <= len(body):
            raise InvalidPositionError(
                f"Injection position {position!r} outside body of length {len(body)}"
            )
        digits, punctuation = self.blocks(config)
        return body[:position] + digits + punctuation + body[position:]


__all__ = ['Injector', 'DIGITS']
