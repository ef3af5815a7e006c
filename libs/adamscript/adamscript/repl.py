"""Interactive read-parse-print loop for AdamScript."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from adamscript.config import ReplConfig
from adamscript.parser.dump import to_json
from adamscript.parser.errors import InternalParserError
from adamscript.parser.parser import parse

logger = logging.getLogger(__name__)

# ANSI escape sequences.
RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
DARK_GRAY = "\033[90m"
BOLD = "\033[1m"
CLEAR_SCREEN = "\033[2J\033[H"

_BANNER = (
    "╔════════════════════════════════════════╗",
    "║                                        ║",
    "║       Welcome to the AdamScript        ║",
    "║                 REPL                   ║",
    "║                                        ║",
    "╚════════════════════════════════════════╝",
)

_COMMANDS = (
    (".help", "Show this help message"),
    (".ast", "Turn ON/OFF showing AST after parsing"),
    (".exit", "Exit the REPL"),
    (".clear", "Clear the screen"),
)


class Repl:
    """Line-oriented front end: each input line is parsed on its own.

    Lines starting with ``.`` are meta-commands; everything else goes to the
    parser, with errors written to *stderr* and, when AST display is on, the
    JSON dump of the parsed program written to *stdout*.
    """

    def __init__(
        self,
        config: ReplConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._config = config or ReplConfig()
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._err = stderr or sys.stderr
        self.show_ast = self._config.show_ast
        self._running = False

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _paint(self, text: str, *styles: str) -> str:
        if not self._config.color or not styles:
            return text
        return "".join(styles) + text + RESET

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def print_banner(self) -> None:
        self._print()
        for line in _BANNER:
            self._print(self._paint(line, PURPLE, BOLD))
        self._print()
        self._print_help_hint()
        self._print()

    def _print_help_hint(self) -> None:
        self._print(
            self._paint("Type ", YELLOW)
            + self._paint(".help", CYAN)
            + self._paint(" for available commands", YELLOW)
        )

    def print_help(self) -> None:
        self._print()
        self._print(self._paint("Available Commands:", BLUE, BOLD))
        for name, description in _COMMANDS:
            self._print(self._paint(f"  {name:<7}", CYAN) + self._paint(f"- {description}", WHITE))
        self._print()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle_show_ast(self) -> None:
        self.show_ast = not self.show_ast
        label, color = ("ON", GREEN) if self.show_ast else ("OFF", RED)
        self._print("Show ast was turned " + self._paint(label, BOLD, color) + ".")

    def clear_screen(self) -> None:
        self._out.write(CLEAR_SCREEN)
        self.print_banner()

    def handle_command(self, command: str) -> None:
        """Dispatch a ``.command`` line."""
        if command == ".help":
            self.print_help()
        elif command == ".ast":
            self.toggle_show_ast()
        elif command == ".exit":
            self._running = False
        elif command == ".clear":
            self.clear_screen()
        else:
            self._print(self._paint("Unknown command: ", RED) + self._paint(command, WHITE))
            self._print_help_hint()

    def evaluate(self, line: str) -> bool:
        """Parse one line of source. Returns False if it had a syntax error."""
        try:
            program, error = parse(line, "<repl>")
        except InternalParserError as e:
            logger.debug("internal error on %r", line, exc_info=True)
            print(self._paint(e.format(), RED, BOLD), file=self._err)
            return False
        if error is not None:
            print(self._paint(str(error), RED), file=self._err)
            return False
        if self.show_ast:
            indent = self._config.indent or None
            self._print(self._paint(to_json(program, indent=indent), DARK_GRAY))
        return True

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Run until end of input or ``.exit``. Returns the exit status."""
        if self._config.banner:
            self.print_banner()

        self._running = True
        while self._running:
            self._out.write(self._paint(self._config.prompt, CYAN))
            self._out.flush()
            raw = self._in.readline()
            if not raw:
                break
            line = raw.strip()
            if not line:
                continue
            if line.startswith("."):
                self.handle_command(line)
            else:
                self.evaluate(line)

        logger.debug("REPL finished")
        return 0
