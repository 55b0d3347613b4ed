"""Tests for the Rich report renderer."""

from valchain import begin, collect
from valchain.output.renderers import render_report


class TestRenderReport:
    def test_empty_report(self) -> None:
        output = render_report([], no_color=True)
        assert "OK" in output
        assert "no validation errors" in output

    def test_table_lists_every_message(self) -> None:
        report = collect(
            begin("age", 5).between(0, 10),
            begin("name", "").not_empty().min_length(2),
        )
        output = render_report(report, no_color=True, width=160)
        assert "Field" in output
        assert "Message" in output
        assert "age must be between 0 and 10." in output
        assert "name should not be empty." in output
        assert "The length of name must be at least 2 characters." in output
        assert "3 error(s) in 2 field(s)" in output

    def test_field_name_printed_once(self) -> None:
        report = collect(
            begin("zzfield", "").not_empty(message="required").min_length(2, message="short")
        )
        output = render_report(report, no_color=True, width=160)
        assert output.count("zzfield") == 1

    def test_no_ansi_when_not_a_terminal(self) -> None:
        report = collect(begin("x", None).not_nil())
        assert "\x1b" not in render_report(report)
