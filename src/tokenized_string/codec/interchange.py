"""Structured interchange format.

A sequence is written as an ordered list of single-key records:

    [{"string": "Hello "}, {"token": "name"}, {"string": "."}]

Decoding is strict. A record with zero keys, more than one key, an unknown key or a
non-string value is rejected; this is the only guard against malformed payloads.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, TypeVar

from ..errors import InterchangeError, UnknownTokenError
from ..sequence.element import Element, Text, Token
from ..sequence.tokenized import TokenSequence
from .base import StringTokenCodec, TokenCodec

log = logging.getLogger("tokenized_string.codec.interchange")

T = TypeVar("T")

TOKEN_KEY = "token"
STRING_KEY = "string"


def element_to_record(element: Element, codec: TokenCodec) -> Dict[str, str]:
    if isinstance(element, Token):
        return {TOKEN_KEY: codec.encode(element.value)}
    return {STRING_KEY: element.value}


def element_from_record(record: Any, codec: TokenCodec, index: int = 0) -> Element:
    if not isinstance(record, Mapping):
        raise InterchangeError(f"Record {index}: expected a mapping, got {type(record).__name__}.")
    if len(record) != 1:
        raise InterchangeError(f"Record {index}: expected exactly one dictionary entry, got {len(record)}.")
    ((key, value),) = record.items()
    if key not in (TOKEN_KEY, STRING_KEY):
        raise InterchangeError(f"Record {index}: unrecognized key: {key!r}.")
    if not isinstance(value, str):
        raise InterchangeError(f"Record {index}: value for {key!r} must be a string, got {type(value).__name__}.")
    if key == STRING_KEY:
        return Text(value)
    token = codec.decode(value)
    if token is None:
        raise UnknownTokenError(value)
    return Token(token)


def to_records(sequence: TokenSequence[T], codec: Optional[TokenCodec[T]] = None) -> List[Dict[str, str]]:
    codec = codec or StringTokenCodec()
    return [element_to_record(e, codec) for e in sequence]


def from_records(records: Iterable[Any], codec: Optional[TokenCodec[T]] = None) -> TokenSequence[T]:
    codec = codec or StringTokenCodec()
    elements = []
    for i, record in enumerate(records):
        try:
            elements.append(element_from_record(record, codec, i))
        except (InterchangeError, UnknownTokenError) as e:
            log.debug("rejected record %d: %s", i, e)
            raise
    return TokenSequence(elements)


def dumps(sequence: TokenSequence[T], codec: Optional[TokenCodec[T]] = None, **json_kwargs: Any) -> str:
    json_kwargs.setdefault("ensure_ascii", False)
    return json.dumps(to_records(sequence, codec), **json_kwargs)


def loads(text: str, codec: Optional[TokenCodec[T]] = None) -> TokenSequence[T]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InterchangeError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise InterchangeError(f"Expected a JSON list of records, got {type(data).__name__}.")
    return from_records(data, codec)
