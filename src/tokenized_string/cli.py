"""CLI entrypoint.

Commands:
- `tokenized-string parse "Hello %[name]"` : print the structured records as JSON
- `tokenized-string serialize [records.json]` : records (file or stdin) -> delimited text
- `tokenized-string preview "Hello %[name]"` : substitute tokens from the vocabulary
- `tokenized-string inspect "Hello %[name]"` : table of parsed elements

Common options: `--config tokens.yaml`, `--prefix`, `--suffix`, `--log-level`, `--log-dir`.
Parse and record errors are reported on stderr with exit status 1.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .codec import interchange
from .config import TokenizerConfig, load_config
from .errors import ConfigError, TokenizedStringError
from .logging_ import setup_logging
from .sequence.element import Token
from .sequence.tokenized import TokenSequence

log = logging.getLogger("tokenized_string.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _resolve_config(args: argparse.Namespace) -> TokenizerConfig:
    cfg = load_config(args.config) if args.config else TokenizerConfig()
    if args.prefix is not None:
        cfg.prefix = args.prefix
    if args.suffix is not None:
        cfg.suffix = args.suffix
    if not cfg.prefix or not cfg.suffix:
        raise ConfigError("token prefix and suffix must be non-empty")
    return cfg


def _inspect_table(seq: TokenSequence[str]) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column("#", style="dim", justify="right")
    table.add_column("kind", style="cyan")
    table.add_column("value", style="magenta")
    for i, element in enumerate(seq):
        kind = "token" if isinstance(element, Token) else "string"
        table.add_row(str(i), kind, repr(element.value))
    return table


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="YAML config with delimiters and token vocabulary")
    common.add_argument("--prefix", help="Token prefix delimiter (default: %%[)")
    common.add_argument("--suffix", help="Token suffix delimiter (default: ])")
    common.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: WARNING)",
    )
    common.add_argument("--log-dir", help="Also write logs to this directory")

    p = argparse.ArgumentParser(prog="tokenized-string")
    sub = p.add_subparsers(dest="cmd", required=True)

    pp = sub.add_parser("parse", parents=[common], help="Delimited text -> JSON records")
    pp.add_argument("text")
    pp.add_argument("--indent", type=int, default=None, help="Pretty-print JSON with this indent")

    ps = sub.add_parser("serialize", parents=[common], help="JSON records -> delimited text")
    ps.add_argument("path", nargs="?", default="-", help="Records file (default: stdin)")

    pv = sub.add_parser("preview", parents=[common], help="Substitute token values")
    pv.add_argument("text")
    pv.add_argument("--separator", default="", help="Join elements with this string")

    pi = sub.add_parser("inspect", parents=[common], help="Show parsed elements as a table")
    pi.add_argument("text")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_dir)

    try:
        cfg = _resolve_config(args)
        codec = cfg.codec()
        log.info("command=%s codec=%r", args.cmd, codec)

        if args.cmd == "parse":
            seq = codec.parse(args.text)
            print(interchange.dumps(seq, codec.token_codec, indent=args.indent))
        elif args.cmd == "serialize":
            if args.path == "-":
                raw = sys.stdin.read()
            else:
                with open(args.path, "r", encoding="utf-8") as f:
                    raw = f.read()
            print(codec.serialize(interchange.loads(raw, codec.token_codec)))
        elif args.cmd == "preview":
            seq = codec.parse(args.text)
            if cfg.vocabulary is not None:
                substitution = cfg.vocabulary.substitution()
            else:
                substitution = str
            print(seq.string(substitution, separator=args.separator))
        elif args.cmd == "inspect":
            seq = codec.parse(args.text)
            Console().print(_inspect_table(seq))
    except (TokenizedStringError, OSError) as e:
        log.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
