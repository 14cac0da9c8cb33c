"""Command-line interface for scriptlex."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scriptlex.errors import TokenizeError

FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when the config file has an invalid value."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    strict: bool
    output_format: str
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="scriptlex",
        description="Tokenize a script and dump the token stream",
    )
    p.add_argument("input", help="Input script ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        default=None,
        help="Report unrecognized characters as errors",
    )
    mode.add_argument(
        "--lenient",
        dest="strict",
        action="store_false",
        default=None,
        help="Silently drop unrecognized characters (default)",
    )
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Dump format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover scriptlex.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log scanner details to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "scriptlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.input == "-":
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Strict mode: config < CLI
    strict = False
    cfg_tokenizer = config.get("tokenizer")
    if isinstance(cfg_tokenizer, dict) and "strict" in cfg_tokenizer:
        cfg_strict = cfg_tokenizer["strict"]
        if not isinstance(cfg_strict, bool):
            raise ConfigError(f"tokenizer.strict must be a boolean, got {cfg_strict!r}")
        strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "format" in cfg_output:
        cfg_format = cfg_output["format"]
        if cfg_format not in FORMATS:
            raise ConfigError(f"output.format must be one of {', '.join(FORMATS)}, got {cfg_format!r}")
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        strict=strict,
        output_format=output_format,
        verbose=args.verbose,
    )


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize the input, returning the rendered token dump."""
    from scriptlex.debug import dump_tokens, dump_tokens_json
    from scriptlex.lexer import tokenize

    if options.input_file is None:
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        source = options.input_file.read_text(encoding="utf-8")
        filename = str(options.input_file)

    tokens = tokenize(source, strict=options.strict, filename=filename)

    out = io.StringIO()
    if options.output_format == "json":
        dump_tokens_json(tokens, file=out)
    else:
        dump_tokens(tokens, file=out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
    except (ConfigError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        dump = tokenize_file(options)
    except TokenizeError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(dump, encoding="utf-8")
    else:
        sys.stdout.write(dump)

    return 0
