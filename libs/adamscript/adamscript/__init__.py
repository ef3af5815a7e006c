"""AdamScript front end: lexer, parser and AST tooling for a small arithmetic language."""

__version__ = "0.1.0"

from adamscript.parser import ParseError, Program, parse, to_json, tokenize

__all__ = ["parse", "tokenize", "to_json", "Program", "ParseError", "__version__"]
