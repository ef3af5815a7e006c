"""Tests for the interactive REPL."""

from __future__ import annotations

import io
import json

from adamscript.config import ReplConfig
from adamscript.repl import CLEAR_SCREEN, RED, Repl

PLAIN = ReplConfig(prompt="> ", color=False, banner=False)


def run(lines: str, config: ReplConfig = PLAIN) -> tuple[int, str, str]:
    """Feed *lines* to a REPL and return ``(status, stdout, stderr)``."""
    out, err = io.StringIO(), io.StringIO()
    status = Repl(config, io.StringIO(lines), out, err).run()
    return status, out.getvalue(), err.getvalue()


class TestParsing:
    def test_valid_line_prints_nothing_by_default(self) -> None:
        status, out, err = run("1 + 2\n")
        assert status == 0
        assert out == "> > "
        assert err == ""

    def test_syntax_error_goes_to_stderr(self) -> None:
        _, _, err = run("1 +\n")
        assert err == "Unexpected token '' at position 3.\n"

    def test_error_colored_red(self) -> None:
        config = ReplConfig(banner=False)
        _, _, err = run(")\n", config)
        assert err.startswith(RED)

    def test_blank_lines_ignored(self) -> None:
        _, out, err = run("\n   \n")
        assert out == "> > > "
        assert err == ""

    def test_line_is_stripped(self) -> None:
        _, _, err = run("   x )  \n")
        # Position is relative to the stripped line.
        assert err == "Unexpected token ')' at position 2.\n"

    def test_show_ast_from_config(self) -> None:
        config = ReplConfig(prompt="", color=False, banner=False, show_ast=True, indent=0)
        _, out, _ = run("x * 2\n", config)
        data = json.loads(out.strip())
        assert data["Kind"] == "Program"
        assert data["Statements"][0]["Expression"]["Operator"] == "*"

    def test_no_ast_on_error(self) -> None:
        config = ReplConfig(prompt="", color=False, banner=False, show_ast=True)
        _, out, _ = run("x y\n", config)
        assert out == ""


class TestCommands:
    def test_toggle_ast(self) -> None:
        _, out, _ = run(".ast\n7\n.ast\n7\n")
        assert "Show ast was turned ON." in out
        assert "Show ast was turned OFF." in out
        assert out.count('"NumericLiteralExpression"') == 1

    def test_help(self) -> None:
        _, out, _ = run(".help\n")
        assert "Available Commands:" in out
        for name in (".help", ".ast", ".exit", ".clear"):
            assert name in out

    def test_exit_stops_reading(self) -> None:
        _, _, err = run(".exit\n)\n")
        assert err == ""

    def test_unknown_command(self) -> None:
        _, out, _ = run(".nope\n")
        assert "Unknown command: .nope" in out
        assert "Type .help for available commands" in out

    def test_clear(self) -> None:
        _, out, _ = run(".clear\n")
        assert CLEAR_SCREEN in out
        assert "Welcome to the AdamScript" in out


class TestBanner:
    def test_banner_printed(self) -> None:
        _, out, _ = run("", ReplConfig(color=False))
        assert "Welcome to the AdamScript" in out

    def test_no_color_codes_when_disabled(self) -> None:
        _, out, _ = run(".help\n.ast\n", ReplConfig(color=False))
        assert "\033[" not in out


class TestInternalErrors:
    def test_internal_error_reported_not_raised(self, monkeypatch) -> None:
        from adamscript import repl as repl_module
        from adamscript.parser.errors import InternalParserError

        def broken_parse(source, filename):
            raise InternalParserError("bad numeric literal", 4)

        monkeypatch.setattr(repl_module, "parse", broken_parse)
        status, _, err = run("1 + 2\n")
        assert status == 0
        assert err == "internal parser error at position 4: bad numeric literal\n"
