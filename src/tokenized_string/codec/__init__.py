"""Text formats for TokenSequence.

- delimited : flat `"Hello %[name]"` text, the primary format
- interchange : ordered `{"token": ...}` / `{"string": ...}` records (JSON)
- base : TokenCodec, the encode/decode pair every format is given
"""

from .base import EnumTokenCodec, FunctionTokenCodec, StringTokenCodec, TokenCodec
from .delimited import DEFAULT_PREFIX, DEFAULT_SUFFIX, TokenizedStringCodec, parse, serialize
from .interchange import dumps, from_records, loads, to_records

__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    "EnumTokenCodec",
    "FunctionTokenCodec",
    "StringTokenCodec",
    "TokenCodec",
    "TokenizedStringCodec",
    "dumps",
    "from_records",
    "loads",
    "parse",
    "serialize",
    "to_records",
]
