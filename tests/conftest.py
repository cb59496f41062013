from __future__ import annotations
from enum import Enum

import pytest

from tokenized_string import EnumTokenCodec, TokenizedStringCodec


class Tok(str, Enum):
    ONE = "one"
    TWO = "t-wo"  # contains a hyphen
    THREE = "th ree"  # contains a space

    @property
    def number(self) -> int:
        return {"one": 1, "t-wo": 2, "th ree": 3}[self.value]


@pytest.fixture
def tok_codec():
    return EnumTokenCodec(Tok)


@pytest.fixture
def codec(tok_codec):
    return TokenizedStringCodec(tok_codec)
