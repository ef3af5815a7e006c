"""Command line driver: ``adamscript [repl|ast|tok]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from adamscript import __version__
from adamscript.config import ConfigError, resolve_config
from adamscript.diagnostics.collector import DiagnosticCollector
from adamscript.diagnostics.location import SourceLocation
from adamscript.parser.dump import to_json
from adamscript.parser.errors import InternalParserError
from adamscript.parser.lexer import tokenize
from adamscript.parser.parser import parse
from adamscript.repl import Repl

logger = logging.getLogger(__name__)

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _read_source(args: argparse.Namespace) -> tuple[str, str] | None:
    """Return ``(source, filename)`` from ``-e`` or a file, or None on failure."""
    if args.expr is not None:
        return args.expr, "<expr>"
    path = Path(args.file)
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except OSError as e:
        print(f"error: cannot read {path}: {e}", file=sys.stderr)
        return None


def cmd_repl(args: argparse.Namespace) -> int:
    """Start the interactive REPL."""
    try:
        config = resolve_config(args.config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return Repl(config).run()


def cmd_ast(args: argparse.Namespace) -> int:
    """Parse a source and print its AST dump."""
    loaded = _read_source(args)
    if loaded is None:
        return 1
    source, filename = loaded

    diag = DiagnosticCollector()
    try:
        program, error = parse(source, filename, diag)
    except InternalParserError as e:
        location = None
        if e.position is not None:
            location = SourceLocation.from_offset(source, e.position, filename)
        diag.internal(e.message, location)
        print(diag.format_all(), file=sys.stderr)
        return 3

    if error is not None and not args.partial:
        print(diag.format_all(), file=sys.stderr)
        return 1
    print(to_json(program, indent=args.indent))
    if error is not None:
        print(diag.format_all(), file=sys.stderr)
        return 1
    return 0


def cmd_tok(args: argparse.Namespace) -> int:
    """Print one token per line: ``position KIND 'lexeme'``."""
    loaded = _read_source(args)
    if loaded is None:
        return 1
    source, _ = loaded
    for tok in tokenize(source):
        print(f"{tok.position:>6}  {tok.kind.name:<16} {tok.lexeme!r}")
    return 0


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    """Source is either a positional file or ``-e SOURCE``."""
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("file", nargs="?", help="Source file to read")
    group.add_argument("-e", "--expr", help="Source text given on the command line")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adamscript", description="AdamScript parser front end")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        dest="verbosity",
        help="Increase verbosity: -v=INFO, -vv=DEBUG",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="YAML configuration file (default: $ADAMSCRIPT_CONFIG)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    p_repl = subparsers.add_parser("repl", help="Start the interactive REPL")
    p_repl.set_defaults(func=cmd_repl)

    p_ast = subparsers.add_parser("ast", help="Print the parsed AST as JSON")
    _add_source_args(p_ast)
    p_ast.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    p_ast.add_argument(
        "--partial",
        action="store_true",
        help="On a syntax error, still print the statements parsed before it",
    )
    p_ast.set_defaults(func=cmd_ast)

    p_tok = subparsers.add_parser("tok", help="Dump lexer tokens", aliases=["tokens"])
    _add_source_args(p_tok)
    p_tok.set_defaults(func=cmd_tok)

    parser.set_defaults(func=cmd_repl)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = _LOG_LEVELS[min(args.verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logger.debug("running command %s", args.command or "repl")
    return args.func(args)
