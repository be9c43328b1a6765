"""Command-line interface for wktkit."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wktkit.errors import LexError, ParseError, UnknownGeometryTypeError
from wktkit.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

logger = logging.getLogger(__name__)

CONFIG_NAME = "wktkit.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    split_collection: bool
    max_depth: int
    check_only: bool
    debug: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="wktkit",
        description="Validate and normalize Well-Known Text geometries",
    )
    p.add_argument("input", help="Input file with one or more WKT geometries ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--split",
        action="store_true",
        default=None,
        help="Write each GEOMETRYCOLLECTION member on its own line",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help=(
            f"Maximum collection nesting depth "
            f"(default: {DEFAULT_MAX_DEPTH}, at most {MAX_DEPTH_LIMIT})"
        ),
    )
    p.add_argument("--check", action="store_true", default=None, help="Validate only, no output")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump geometry trees to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


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

    split_collection = False
    max_depth = DEFAULT_MAX_DEPTH
    cfg_read = config.get("read")
    if isinstance(cfg_read, dict):
        cfg_split = cfg_read.get("split_collection")
        if isinstance(cfg_split, bool):
            split_collection = cfg_split
        cfg_depth = cfg_read.get("max_depth")
        if isinstance(cfg_depth, int) and not isinstance(cfg_depth, bool):
            max_depth = cfg_depth

    check_only = False
    cfg_write = config.get("write")
    if isinstance(cfg_write, dict):
        cfg_check = cfg_write.get("check_only")
        if isinstance(cfg_check, bool):
            check_only = cfg_check

    if args.split is not None:
        split_collection = args.split
    if args.max_depth is not None:
        max_depth = args.max_depth
    if args.check is not None:
        check_only = args.check

    if max_depth < 1:
        raise argparse.ArgumentTypeError(f"max depth must be at least 1, got {max_depth}")
    if max_depth > MAX_DEPTH_LIMIT:
        logger.warning("max depth %d lowered to %d", max_depth, MAX_DEPTH_LIMIT)
        max_depth = MAX_DEPTH_LIMIT

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        split_collection=split_collection,
        max_depth=max_depth,
        check_only=check_only,
        debug=args.debug,
        verbose=args.verbose,
    )


def convert_source(source: str, options: CliOptions) -> str:
    """Parse every geometry in *source* and return canonical WKT, one per line."""
    from wktkit.debug import dump_geometry
    from wktkit.format import WKTFormat
    from wktkit.parser import parse_all

    fmt = WKTFormat(split_collection=options.split_collection, max_depth=options.max_depth)
    geometries = parse_all(source, max_depth=options.max_depth)
    logger.debug("parsed %d geometries", len(geometries))

    lines: list[str] = []
    for geometry in geometries:
        if options.debug:
            dump_geometry(geometry)
        lines.extend(fmt.write_geometry(g) for g in fmt.split(geometry))
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    from wktkit.logging_config import setup_logging

    setup_logging(logging.DEBUG if options.verbose else logging.WARNING)

    if options.input_file is None:
        filename = "<stdin>"
        source = sys.stdin.read()
    else:
        filename = str(options.input_file)
        try:
            source = options.input_file.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot read {filename}: {exc.strerror}", file=sys.stderr)
            return 2

    try:
        output = convert_source(source, options)
    except (LexError, ParseError, UnknownGeometryTypeError) as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1

    if options.check_only:
        return 0

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
