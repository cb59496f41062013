"""TokenSequence: the in-memory model of a tokenized string.

The sequence is the source of truth for an editor. It keeps elements in insertion
order and never merges neighbours, so `[Text("a"), Text("b")]` stays two elements.
Converting to and from delimited text is done by `tokenized_string.codec`.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union, overload

from .element import Element, Text, Token

if TYPE_CHECKING:
    from ..codec.base import TokenCodec

T = TypeVar("T")


class TokenSequence(Generic[T]):
    """Ordered list of Token / Text elements.

    Equality and hashing are structural: same length, equal elements, same order.
    The owner mutates it directly (append, insert, remove, ...); validation and
    duplicate policies belong to the caller.
    """

    __slots__ = ("elements",)

    def __init__(self, elements: Optional[Iterable[Element]] = None):
        self.elements: List[Element] = list(elements) if elements is not None else []

    # --- flattening ---

    def string(self, substitution: Callable[[T], str], separator: str = "") -> str:
        """Flatten to display text, replacing each token with `substitution(value)`.

        Delimiters are never reinserted; use the codec for that.
        """
        parts = []
        for element in self.elements:
            if isinstance(element, Token):
                parts.append(substitution(element.value))
            else:
                parts.append(element.value)
        return separator.join(parts)

    # --- queries ---

    def contains_token(self, token: T) -> bool:
        return any(isinstance(e, Token) and e.value == token for e in self.elements)

    def contains_text(self, text: str) -> bool:
        """Exact match against a Text element, not a substring search."""
        return any(isinstance(e, Text) and e.value == text for e in self.elements)

    def tokens(self) -> List[T]:
        return [e.value for e in self.elements if isinstance(e, Token)]

    def texts(self) -> List[str]:
        return [e.value for e in self.elements if isinstance(e, Text)]

    # --- codec shortcuts ---

    @classmethod
    def parse(
        cls,
        text: str,
        codec: Optional["TokenCodec[T]"] = None,
        *,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
    ) -> "TokenSequence[T]":
        from ..codec.delimited import DEFAULT_PREFIX, DEFAULT_SUFFIX, TokenizedStringCodec

        prefix = DEFAULT_PREFIX if prefix is None else prefix
        suffix = DEFAULT_SUFFIX if suffix is None else suffix
        return TokenizedStringCodec(codec, prefix=prefix, suffix=suffix).parse(text)

    def serialize(
        self,
        codec: Optional["TokenCodec[T]"] = None,
        *,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
    ) -> str:
        from ..codec.delimited import DEFAULT_PREFIX, DEFAULT_SUFFIX, TokenizedStringCodec

        prefix = DEFAULT_PREFIX if prefix is None else prefix
        suffix = DEFAULT_SUFFIX if suffix is None else suffix
        return TokenizedStringCodec(codec, prefix=prefix, suffix=suffix).serialize(self)

    # --- mutation ---

    def append(self, element: Element) -> None:
        self.elements.append(element)

    def extend(self, elements: Iterable[Element]) -> None:
        self.elements.extend(elements)

    def insert(self, index: int, element: Element) -> None:
        self.elements.insert(index, element)

    def remove(self, element: Element) -> None:
        self.elements.remove(element)

    def pop(self, index: int = -1) -> Element:
        return self.elements.pop(index)

    def clear(self) -> None:
        self.elements.clear()

    def copy(self) -> "TokenSequence[T]":
        return TokenSequence(self.elements)

    # --- container protocol ---

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __contains__(self, element: object) -> bool:
        return element in self.elements

    @overload
    def __getitem__(self, index: int) -> Element: ...

    @overload
    def __getitem__(self, index: slice) -> "TokenSequence[T]": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return TokenSequence(self.elements[index])
        return self.elements[index]

    def __setitem__(self, index: int, element: Element) -> None:
        self.elements[index] = element

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self.elements[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenSequence):
            return self.elements == other.elements
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.elements))

    def __repr__(self) -> str:
        return f"TokenSequence({self.elements!r})"
