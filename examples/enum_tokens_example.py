"""Example: strongly-typed tokens with an Enum.

Shows parsing user text into a TokenSequence, previewing it with resolved values,
and falling back to verbatim text when parsing fails (the caller's policy).
"""

from datetime import datetime
from enum import Enum

from tokenized_string import EnumTokenCodec, ParseError, Text, TokenizedStringCodec, TokenSequence
from tokenized_string.codec import dumps


class Token(str, Enum):
    FOOBAR = "foobar"
    DATE = "date"
    TIME = "time"

    def substitution(self) -> str:
        now = datetime.now()
        if self is Token.DATE:
            return now.strftime("%d %b %Y")
        if self is Token.TIME:
            return now.strftime("%H:%M:%S")
        return "all messed up"


codec = TokenizedStringCodec(EnumTokenCodec(Token))

for raw in ["Saved on %[date] at %[time]", "Status: %[foobar]", "Broken %[dat]"]:
    try:
        seq = codec.parse(raw)
    except ParseError as e:
        print(f"{raw!r}: {e} -> keeping as plain text")
        seq = TokenSequence([Text(raw)])
    print(f"  preview: {seq.string(Token.substitution)}")
    print(f"  records: {dumps(seq, codec.token_codec)}")
    print(f"  text:    {codec.serialize(seq)}")
