"""Tests for cbuild.output.console module."""

from __future__ import annotations

import io

from rich.console import Console

from cbuild.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


def _rich() -> tuple[RichConsole, io.StringIO]:
    buf = io.StringIO()
    return RichConsole(Console(file=buf, force_terminal=False, width=200)), buf


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.INFO) == "info"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.info("fyi")
        console.error("oops")
        assert console.messages == ["info: fyi", "error: oops"]
        assert console.has_error() is True

    def test_find_and_count(self) -> None:
        console = MockConsole()
        console.info("building 'release'")
        console.print("cargo build", Style.DIM)
        assert len(console.find("release")) == 1
        assert console.count(Style.DIM) == 1

    def test_clear(self) -> None:
        console = MockConsole()
        console.print("one")
        console.clear()
        assert console.text == ""

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.info("ok")


class TestRichConsole:
    def test_print_is_literal(self) -> None:
        console, buf = _rich()
        console.print("usage: cbuild build [release=1] [target=<target>]")
        assert buf.getvalue() == "usage: cbuild build [release=1] [target=<target>]\n"

    def test_info_prefix(self) -> None:
        console, buf = _rich()
        console.info("Target is 'foo'")
        assert buf.getvalue() == "info: Target is 'foo'\n"

    def test_error_prefix_keeps_brackets(self) -> None:
        console, buf = _rich()
        console.error("unknown override: [x]")
        assert buf.getvalue() == "error: unknown override: [x]\n"

    def test_styled_print(self) -> None:
        console, buf = _rich()
        console.print("cargo build --release", Style.DIM)
        assert "cargo build --release" in buf.getvalue()
