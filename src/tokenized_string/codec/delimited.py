"""Delimited text codec.

Converts between a TokenSequence and a flat string where each token is written as
`prefix + identifier + suffix` (default `%[` and `]`), e.g.

    "Hello %[name], it is %[time]."

Parsing is a single left-to-right scan that never backtracks:
- text before a prefix becomes a Text element (only if non-empty)
- the first suffix after a prefix closes the token; everything between is the candidate
- the candidate is passed to decode unchanged (no trimming, case-sensitive)
- a prefix with no later suffix, or a candidate that does not decode, fails the whole parse

There is no escaping. Plain text that contains the prefix cannot be represented,
and a second prefix inside a token body simply becomes part of the candidate.
"""

from __future__ import annotations
import logging
from typing import Callable, Generic, List, Optional, TypeVar

from ..errors import UnknownTokenError, UnterminatedTokenError
from ..sequence.element import Element, Text, Token
from ..sequence.tokenized import TokenSequence
from .base import FunctionTokenCodec, StringTokenCodec, TokenCodec

log = logging.getLogger("tokenized_string.codec.delimited")

T = TypeVar("T")

DEFAULT_PREFIX = "%["
DEFAULT_SUFFIX = "]"


class TokenizedStringCodec(Generic[T]):
    """Parses and serializes delimited text with a fixed prefix/suffix pair.

    Instances are immutable and can be shared freely.
    """

    def __init__(
        self,
        token_codec: Optional[TokenCodec[T]] = None,
        *,
        prefix: str = DEFAULT_PREFIX,
        suffix: str = DEFAULT_SUFFIX,
    ):
        if not prefix:
            raise ValueError("token prefix must be a non-empty string")
        if not suffix:
            raise ValueError("token suffix must be a non-empty string")
        self.token_codec: TokenCodec[T] = token_codec if token_codec is not None else StringTokenCodec()  # type: ignore[assignment]
        self.prefix = prefix
        self.suffix = suffix

    def serialize(self, sequence: TokenSequence[T]) -> str:
        parts = []
        for element in sequence:
            if isinstance(element, Token):
                parts.append(self.prefix + self.token_codec.encode(element.value) + self.suffix)
            else:
                parts.append(element.value)
        return "".join(parts)

    def parse(self, text: str) -> TokenSequence[T]:
        elements: List[Element] = []
        cursor = 0
        end = len(text)

        while cursor < end:
            start = text.find(self.prefix, cursor)
            if start < 0:
                elements.append(Text(text[cursor:]))
                break

            body_start = start + len(self.prefix)
            body_end = text.find(self.suffix, body_start)
            if body_end < 0:
                log.debug("unterminated token at offset %d", start)
                raise UnterminatedTokenError(position=start)

            candidate = text[body_start:body_end]
            if start > cursor:
                elements.append(Text(text[cursor:start]))

            token = self.token_codec.decode(candidate)
            if token is None:
                log.debug("unknown token %r at offset %d", candidate, start)
                raise UnknownTokenError(candidate, position=start)

            elements.append(Token(token))
            cursor = body_end + len(self.suffix)

        return TokenSequence(elements)

    def __repr__(self) -> str:
        return (
            f"TokenizedStringCodec(token_codec={self.token_codec.name!r}, "
            f"prefix={self.prefix!r}, suffix={self.suffix!r})"
        )


def _codec_from(
    encode: Optional[Callable[[T], str]],
    decode: Optional[Callable[[str], Optional[T]]],
) -> TokenCodec:
    if encode is None and decode is None:
        return StringTokenCodec()
    identity = lambda value: value  # noqa: E731
    return FunctionTokenCodec(encode or identity, decode or identity)


def parse(
    text: str,
    decode: Optional[Callable[[str], Optional[T]]] = None,
    *,
    prefix: str = DEFAULT_PREFIX,
    suffix: str = DEFAULT_SUFFIX,
) -> TokenSequence[T]:
    """Parse delimited text. Without `decode`, tokens are their identifier strings."""
    return TokenizedStringCodec(_codec_from(None, decode), prefix=prefix, suffix=suffix).parse(text)


def serialize(
    sequence: TokenSequence[T],
    encode: Optional[Callable[[T], str]] = None,
    *,
    prefix: str = DEFAULT_PREFIX,
    suffix: str = DEFAULT_SUFFIX,
) -> str:
    """Serialize to delimited text. Without `encode`, tokens must already be strings."""
    return TokenizedStringCodec(_codec_from(encode, None), prefix=prefix, suffix=suffix).serialize(sequence)
