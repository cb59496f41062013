"""Configuration loader.

Configs are small YAML files:

    prefix: "%["
    suffix: "]"
    tokens:                      # inline vocabulary (optional)
      name: Ada
      date: {strftime: "%Y-%m-%d"}
    # or: vocabulary_file: tokens.yaml   (relative to this file)

Missing keys fall back to the defaults; without a vocabulary every identifier is
accepted as a string token.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from .codec.base import StringTokenCodec, TokenCodec
from .codec.delimited import DEFAULT_PREFIX, DEFAULT_SUFFIX, TokenizedStringCodec
from .errors import ConfigError
from .vocabulary import TokenVocabulary, load_vocabulary


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e


@dataclass
class TokenizerConfig:
    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    vocabulary: Optional[TokenVocabulary] = None

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any], base_dir: str = ".") -> "TokenizerConfig":
        prefix = cfg.get("prefix", DEFAULT_PREFIX)
        suffix = cfg.get("suffix", DEFAULT_SUFFIX)
        for key, value in (("prefix", prefix), ("suffix", suffix)):
            if not isinstance(value, str) or not value:
                raise ConfigError(f"'{key}' must be a non-empty string, got {value!r}")

        if "tokens" in cfg and "vocabulary_file" in cfg:
            raise ConfigError("use either 'tokens' or 'vocabulary_file', not both")
        vocabulary = None
        if cfg.get("tokens") is not None:
            if not isinstance(cfg["tokens"], Mapping):
                raise ConfigError("'tokens' must be a mapping of token id to substitution")
            vocabulary = TokenVocabulary.from_dict(cfg["tokens"])
        elif cfg.get("vocabulary_file") is not None:
            vocabulary_file = cfg["vocabulary_file"]
            if not isinstance(vocabulary_file, str) or not vocabulary_file:
                raise ConfigError(f"'vocabulary_file' must be a non-empty path string, got {vocabulary_file!r}")
            vocabulary = load_vocabulary(os.path.join(base_dir, vocabulary_file))

        return cls(prefix=prefix, suffix=suffix, vocabulary=vocabulary)

    def token_codec(self) -> TokenCodec[str]:
        return self.vocabulary.codec() if self.vocabulary is not None else StringTokenCodec()

    def codec(self) -> TokenizedStringCodec[str]:
        return TokenizedStringCodec(self.token_codec(), prefix=self.prefix, suffix=self.suffix)


def load_config(path: str) -> TokenizerConfig:
    cfg = load_yaml(path)
    if not isinstance(cfg, Mapping):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return TokenizerConfig.from_dict(cfg, base_dir=os.path.dirname(os.path.abspath(path)))
