"""Error types.

Parse failures are always raised, never downgraded to plain text.
What to do about them (show the raw string, reject the input, ...) is the caller's call.
"""

from __future__ import annotations
from typing import Optional


class TokenizedStringError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(TokenizedStringError, ValueError):
    """Delimited text could not be parsed into a TokenSequence."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnterminatedTokenError(ParseError):
    """A token prefix was found with no matching suffix before end of input."""

    def __init__(self, position: Optional[int] = None):
        where = f" at offset {position}" if position is not None else ""
        super().__init__(f"Encountered token prefix without a corresponding suffix{where}.", position)


class UnknownTokenError(ParseError):
    """A well-formed token body did not decode to a known token."""

    def __init__(self, candidate: str, position: Optional[int] = None):
        super().__init__(f"Unrecognized token: {candidate!r}.", position)
        self.candidate = candidate


class InterchangeError(TokenizedStringError, ValueError):
    """A structured record list is malformed (wrong shape, key or value type)."""


class ConfigError(TokenizedStringError, ValueError):
    """Configuration file is missing required values or holds invalid ones."""


# Short names used throughout the docs.
UnterminatedToken = UnterminatedTokenError
UnknownToken = UnknownTokenError
