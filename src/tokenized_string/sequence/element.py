"""Sequence elements.

An element is exactly one of:
- Token(value): a placeholder for a substitutable value (value is the consumer's token type)
- Text(value): a literal span of plain text

Both are frozen dataclasses, so equality and hashing come from the variant and the payload.
`Token("a") != Text("a")` because dataclass equality also compares the class.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Element:
    """Common base of Token and Text. Not instantiated directly."""

    __slots__ = ()

    @property
    def is_token(self) -> bool:
        return isinstance(self, Token)

    @property
    def is_text(self) -> bool:
        return isinstance(self, Text)

    @property
    def raw_value(self) -> str:
        """Token identifier for str / str-valued Enum tokens, literal for text."""
        value = self.value  # type: ignore[attr-defined]
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str):
            raise TypeError(f"raw_value needs a str or str-valued Enum token, got {type(value).__name__}")
        return value

    def matches(self, value: Any) -> bool:
        """True if this element is Token(value) or Text(value)."""
        return self == Token(value) or self == Text(value)


@dataclass(frozen=True)
class Token(Element, Generic[T]):
    value: T

    def __repr__(self) -> str:
        return f"Token({self.value!r})"


@dataclass(frozen=True)
class Text(Element):
    value: str

    def __repr__(self) -> str:
        return f"Text({self.value!r})"
