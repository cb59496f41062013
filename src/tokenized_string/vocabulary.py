"""Token vocabularies.

A vocabulary is a closed set of string token ids, each with a substitution used
when a sequence is flattened for preview. Substitutions are either literal text or
a `strftime` format rendered against one instant, so every `%[date]` and `%[time]`
in a preview agrees.

YAML form (the `tokens:` mapping of a config file, or a standalone file):

    tokens:
      foobar: all messed up
      date: {strftime: "%d %b %Y"}
      time: {strftime: "%H:%M:%S"}

A bare id with no value (`foobar:`) substitutes as its own id.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

import yaml

from .codec.base import TokenCodec
from .errors import ConfigError


@dataclass(frozen=True)
class Substitution:
    text: Optional[str] = None
    strftime: Optional[str] = None

    def render(self, token_id: str, now: datetime) -> str:
        if self.strftime is not None:
            return now.strftime(self.strftime)
        if self.text is not None:
            return self.text
        return token_id

    @classmethod
    def from_value(cls, token_id: str, value: Any) -> "Substitution":
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls(text=value)
        if isinstance(value, Mapping):
            unknown = set(value) - {"text", "strftime"}
            if unknown:
                raise ConfigError(f"Token {token_id!r}: unknown substitution keys {sorted(unknown)}")
            if "text" in value and "strftime" in value:
                raise ConfigError(f"Token {token_id!r}: use either 'text' or 'strftime', not both")
            text, fmt = value.get("text"), value.get("strftime")
            if text is not None and not isinstance(text, str):
                raise ConfigError(f"Token {token_id!r}: 'text' must be a string")
            if fmt is not None and not isinstance(fmt, str):
                raise ConfigError(f"Token {token_id!r}: 'strftime' must be a string")
            return cls(text=text, strftime=fmt)
        raise ConfigError(f"Token {token_id!r}: unsupported substitution {value!r}")


class VocabularyTokenCodec(TokenCodec[str]):
    """String tokens restricted to the ids of a vocabulary."""

    name = "vocabulary"

    def __init__(self, vocabulary: "TokenVocabulary"):
        self.vocabulary = vocabulary

    def encode(self, token: str) -> str:
        return token

    def decode(self, identifier: str) -> Optional[str]:
        return identifier if identifier in self.vocabulary else None


class TokenVocabulary:
    def __init__(self, entries: Optional[Mapping[str, Substitution]] = None):
        self._entries: Dict[str, Substitution] = dict(entries or {})

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "TokenVocabulary":
        entries: Dict[str, Substitution] = {}
        for token_id, value in mapping.items():
            if not isinstance(token_id, str) or not token_id:
                raise ConfigError(f"Token ids must be non-empty strings, got {token_id!r}")
            entries[token_id] = Substitution.from_value(token_id, value)
        return cls(entries)

    def ids(self) -> List[str]:
        return list(self._entries)

    def codec(self) -> VocabularyTokenCodec:
        return VocabularyTokenCodec(self)

    def substitute(self, token_id: str, now: Optional[datetime] = None) -> str:
        if token_id not in self._entries:
            raise KeyError(f"Unknown token: {token_id}")
        return self._entries[token_id].render(token_id, now or datetime.now())

    def substitution(self, now: Optional[datetime] = None) -> Callable[[str], str]:
        """Callable for `TokenSequence.string`, pinned to a single instant."""
        instant = now or datetime.now()
        return lambda token_id: self.substitute(token_id, instant)

    def __contains__(self, token_id: object) -> bool:
        return token_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TokenVocabulary({self.ids()!r})"


def load_vocabulary(path: str) -> TokenVocabulary:
    """Load a vocabulary from YAML; the ids live under a top-level `tokens:` key."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path}: expected a mapping at top level")
    tokens = data.get("tokens") or {}
    if not isinstance(tokens, Mapping):
        raise ConfigError(f"{path}: 'tokens' must be a mapping")
    return TokenVocabulary.from_dict(tokens)
