"""tokenized_string

Model and codec for strings made of plain-text spans and typed token placeholders.

Public API surface:
- tokenized_string.sequence : Element / Token / Text and TokenSequence
- tokenized_string.codec : delimited text codec, token codecs, structured records
- tokenized_string.vocabulary : token sets with substitution values
- tokenized_string.cli.main : CLI entrypoint

The GUI layer that edits these sequences lives elsewhere; this package only
holds the data model and its text formats.
"""

from __future__ import annotations

from .codec.base import EnumTokenCodec, FunctionTokenCodec, StringTokenCodec, TokenCodec
from .codec.delimited import DEFAULT_PREFIX, DEFAULT_SUFFIX, TokenizedStringCodec, parse, serialize
from .errors import (
    InterchangeError,
    ParseError,
    TokenizedStringError,
    UnknownTokenError,
    UnterminatedTokenError,
)
from .sequence.element import Element, Text, Token
from .sequence.tokenized import TokenSequence

__all__ = [
    "__version__",
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    "Element",
    "EnumTokenCodec",
    "FunctionTokenCodec",
    "InterchangeError",
    "ParseError",
    "StringTokenCodec",
    "Text",
    "Token",
    "TokenCodec",
    "TokenSequence",
    "TokenizedStringCodec",
    "TokenizedStringError",
    "UnknownTokenError",
    "UnterminatedTokenError",
    "parse",
    "serialize",
]
__version__ = "0.1.0"
