import io

import pytest

from command_copy.errors import CancellationError
from command_copy.resolvers.terminal import CLEAR_PREVIOUS_LINE, TerminalValueResolver


class TtyStringIO(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestTerminalValueResolver:
    def test_reads_one_line_per_name(self) -> None:
        output = io.StringIO()
        resolver = TerminalValueResolver(io.StringIO("Bob\nexample.org\n"), output)

        values = resolver.resolve(["name", "host"])

        assert values == {"name": "Bob", "host": "example.org"}
        assert output.getvalue() == "name: host: "

    def test_values_follow_requested_order(self) -> None:
        resolver = TerminalValueResolver(io.StringIO("1\n2\n3\n"), io.StringIO())

        values = resolver.resolve(["c", "a", "b"])

        assert list(values) == ["c", "a", "b"]
        assert values == {"c": "1", "a": "2", "b": "3"}

    def test_empty_line_is_empty_value(self) -> None:
        resolver = TerminalValueResolver(io.StringIO("\n"), io.StringIO())

        assert resolver.resolve(["name"]) == {"name": ""}

    def test_end_of_input_is_empty_value(self) -> None:
        resolver = TerminalValueResolver(io.StringIO("only\n"), io.StringIO())

        assert resolver.resolve(["a", "b"]) == {"a": "only", "b": ""}

    def test_strips_crlf(self) -> None:
        resolver = TerminalValueResolver(io.StringIO("Bob Jones\r\n"), io.StringIO())

        assert resolver.resolve(["name"]) == {"name": "Bob Jones"}

    def test_inner_whitespace_is_kept(self) -> None:
        resolver = TerminalValueResolver(io.StringIO("  a  b \n"), io.StringIO())

        assert resolver.resolve(["v"]) == {"v": "  a  b "}

    def test_prompt_is_cleared_on_a_terminal(self) -> None:
        output = TtyStringIO()
        resolver = TerminalValueResolver(io.StringIO("x\n"), output)

        resolver.resolve(["name"])

        assert output.getvalue() == "name: " + CLEAR_PREVIOUS_LINE

    def test_no_names_reads_nothing(self) -> None:
        source = io.StringIO("unused\n")
        resolver = TerminalValueResolver(source, io.StringIO())

        assert resolver.resolve([]) == {}
        assert source.read() == "unused\n"


class InterruptedInput(io.StringIO):
    def readline(self, size: int = -1) -> str:
        raise KeyboardInterrupt


def test_ctrl_c_at_prompt_cancels() -> None:
    resolver = TerminalValueResolver(InterruptedInput(), io.StringIO())

    with pytest.raises(CancellationError, match="'name' interrupted"):
        resolver.resolve(["name", "host"])
