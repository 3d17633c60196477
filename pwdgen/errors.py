#!/usr/bin/env python3
"""
Error Types
===========
Every failure raised by pwdgen derives from PwdGenError and from the
builtin exception that best describes it, so callers may catch either.
"""


class PwdGenError(Exception):
    """Base class for all pwdgen errors."""


class InvalidValueError(PwdGenError, ValueError):
    """A configuration value failed validation."""


class UnknownPropertyError(PwdGenError, AttributeError):
    """Get or set of a configuration field that does not exist."""


class MissingWordListError(PwdGenError, LookupError):
    """No word list exists for the requested language."""


class ResourceUnreadableError(PwdGenError, OSError):
    """A word list could not be opened or read."""


class EmptyWordListError(PwdGenError, ValueError):
    """A word list contains no records."""


class EmptyAlphabetError(PwdGenError, ValueError):
    """Punctuation was requested but the punctuation alphabet is empty."""


class InvalidArgumentError(PwdGenError, ValueError):
    """Bad argument passed to a generation call."""


class InvalidPositionError(PwdGenError, IndexError):
    """Injection position lies outside the body."""


__all__ = [
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
