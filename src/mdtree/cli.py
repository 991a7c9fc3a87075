"""Command-line interface for mdtree."""

from __future__ import annotations

import argparse
import io
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mdtree.errors import ConfigError

FORMATS = ("json", "text", "tree")
DEFAULT_FORMAT = "json"
DEFAULT_INDENT = 2
CONFIG_NAME = "mdtree.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    format: str
    indent: int
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="mdtree",
        description="Parse markdown into an element tree",
    )
    p.add_argument("input", help="Input markdown file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help=f"Output format (default: {DEFAULT_FORMAT})",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help=f"JSON indentation (default: {DEFAULT_INDENT})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-parse")
    p.add_argument("--debug", action="store_true", help="Dump element tree to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path) from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    source_path = config_path if config_path is not None else input_dir / CONFIG_NAME

    cfg_output = config.get("output", {})
    if not isinstance(cfg_output, dict):
        raise ConfigError("expected a table", source_path, "output")

    # Format: config < CLI
    fmt = DEFAULT_FORMAT
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise ConfigError(
                f"unknown format {cfg_format!r} (expected one of {', '.join(FORMATS)})",
                source_path,
                "output.format",
            )
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    # Indent: config < CLI
    indent = DEFAULT_INDENT
    cfg_indent = cfg_output.get("indent")
    if cfg_indent is not None:
        if isinstance(cfg_indent, bool) or not isinstance(cfg_indent, int):
            raise ConfigError("expected an integer", source_path, "output.indent")
        indent = cfg_indent
    if args.indent is not None:
        indent = args.indent

    if args.watch and input_file is None:
        raise argparse.ArgumentTypeError("--watch needs an input file, not stdin")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        indent=indent,
        watch=args.watch,
        debug=args.debug,
    )


def convert_source(source: str, options: CliOptions) -> str:
    """Parse markdown source and render it in the configured output format."""
    from mdtree.debug import dump_tree
    from mdtree.flatten import spread
    from mdtree.parser import parse
    from mdtree.serialize import to_json

    doc = parse(source)

    if options.debug:
        dump_tree(doc)

    if options.format == "text":
        return "".join(leaf.text for leaf in spread(doc.elements))
    if options.format == "tree":
        buf = io.StringIO()
        dump_tree(doc, file=buf)
        return buf.getvalue()
    return to_json(doc, indent=options.indent) + "\n"


def convert_file(options: CliOptions) -> str:
    """Read the input (file or stdin) and convert it."""
    if options.input_file is None:
        source = sys.stdin.read()
    else:
        source = options.input_file.read_text(encoding="utf-8")
    return convert_source(source, options)


def _write(options: CliOptions, result: str) -> None:
    if options.output_file:
        options.output_file.write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-parse on each modification."""
    assert options.input_file is not None
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    _write(options, convert_file(options))
                    print(f"Parsed {options.input_file}", file=sys.stderr)
                except OSError as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        result = convert_file(options)
        _write(options, result)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0
