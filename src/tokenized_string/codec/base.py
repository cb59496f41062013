"""Token codec interface.

A TokenCodec is the pair of functions the text formats need to turn a token into
its textual identifier and back:

- encode(token) -> str
- decode(identifier) -> token, or None when the identifier is not a valid token

decode must be a partial left-inverse of encode for every token the caller
considers valid. Encoded identifiers must not contain the suffix delimiter.
Both functions must be pure; nothing here guards against side effects.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Generic, Optional, Type, TypeVar

from ..utils.ordered import index_by

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class TokenCodec(ABC, Generic[T]):
    name: str = "codec"

    @abstractmethod
    def encode(self, token: T) -> str:
        raise NotImplementedError

    @abstractmethod
    def decode(self, identifier: str) -> Optional[T]:
        raise NotImplementedError


class StringTokenCodec(TokenCodec[str]):
    """Tokens are plain strings; every identifier is accepted as-is."""

    name = "string"

    def encode(self, token: str) -> str:
        return token

    def decode(self, identifier: str) -> Optional[str]:
        return identifier


class EnumTokenCodec(TokenCodec[E]):
    """Tokens are members of a str-valued Enum, identified by their value."""

    name = "enum"

    def __init__(self, enum_cls: Type[E]):
        self.enum_cls = enum_cls
        self._by_value: Dict[str, E] = index_by(enum_cls, lambda member: member.value)

    def encode(self, token: E) -> str:
        return token.value

    def decode(self, identifier: str) -> Optional[E]:
        return self._by_value.get(identifier)


class FunctionTokenCodec(TokenCodec[T]):
    """Adapts two plain callables to the TokenCodec interface."""

    name = "function"

    def __init__(self, encode: Callable[[T], str], decode: Callable[[str], Optional[T]]):
        self._encode = encode
        self._decode = decode

    def encode(self, token: T) -> str:
        return self._encode(token)

    def decode(self, identifier: str) -> Optional[T]:
        return self._decode(identifier)
