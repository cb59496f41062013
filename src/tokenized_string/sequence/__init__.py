"""Sequence data model: elements and the ordered TokenSequence."""

from .element import Element, Text, Token
from .tokenized import TokenSequence

__all__ = ["Element", "Text", "Token", "TokenSequence"]
