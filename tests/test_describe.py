"""Tests for the single-flag help entry."""

from conftest import make_flag

from tabflags.describe import LINE_LENGTH, describe_flag


class TestDescribeFlag:
    def test_short_entry(self) -> None:
        flag = make_flag(
            "port", type="int32", default="8080", description="Port to listen on"
        )
        assert describe_flag(flag) == "    -port (Port to listen on) type: int32 default: 8080\n"

    def test_string_values_are_quoted(self) -> None:
        flag = make_flag(
            "host",
            type="string",
            default="localhost",
            current="0.0.0.0",
            description="Bind address",
        )
        assert describe_flag(flag) == (
            '    -host (Bind address) type: string default: "localhost" currently: "0.0.0.0"\n'
        )

    def test_currently_only_when_changed(self) -> None:
        flag = make_flag("debug", type="bool", default="false", current="false")
        assert "currently" not in describe_flag(flag)

    def test_long_description_wraps(self) -> None:
        flag = make_flag("retries", type="int32", default="3", description=" ".join(["word"] * 30))
        text = describe_flag(flag)
        lines = text.splitlines()
        assert len(lines) > 1
        assert all(len(line) < LINE_LENGTH for line in lines)
        assert lines[1].startswith("      word")
        assert " type: int32" in text
        assert text.endswith("\n")

    def test_embedded_newline_is_honoured(self) -> None:
        flag = make_flag("mode", type="string", default="a", description="first\nsecond")
        lines = describe_flag(flag).splitlines()
        assert lines[0] == "    -mode (first"
        assert lines[1].startswith("      second)")

    def test_empty_fields(self) -> None:
        flag = make_flag("x", type="", default="")
        assert describe_flag(flag) == "    -x () type:  default: \n"
