"""Unit tests for pipe table helpers."""

import pytest

from html2md.tables import TableBuilder, format_pipe_table, separator_segment


@pytest.mark.unit
class TestSeparatorSegment:
    """Tests for single column separator segments."""

    @pytest.mark.parametrize(
        "align,expected",
        [
            ("left", "| :--- "),
            ("right", "| ---: "),
            ("center", "| :---: "),
            ("CENTER", "| :---: "),
            (" right ", "| ---: "),
            ("", "| --- "),
            (None, "| --- "),
            ("justify", "| --- "),
        ],
    )
    def test_segments(self, align, expected):
        assert separator_segment(align) == expected


@pytest.mark.unit
class TestTableBuilder:
    """Tests for the pending separator line."""

    def test_starts_without_separator(self):
        builder = TableBuilder()
        assert not builder.has_pending_separator()

    def test_flush_returns_line_and_clears(self):
        builder = TableBuilder()
        builder.add_header_cell("left")
        builder.add_header_cell("right")
        assert builder.has_pending_separator()
        assert builder.flush_separator() == "| :--- | ---: |\n"
        assert not builder.has_pending_separator()

    def test_nested_table_starts(self):
        builder = TableBuilder()
        builder.begin(2)
        builder.begin(10)
        assert builder.end() == 10
        assert builder.end() == 2
        assert builder.end() is None


@pytest.mark.unit
class TestFormatPipeTable:
    """Tests for padding finished tables."""

    def test_pads_columns(self):
        table = "| a| bb|\n| --- | --- |\n| ccc| d|"
        assert format_pipe_table(table) == "| a   | bb  |\n| --- | --- |\n| ccc | d   |"

    def test_keeps_alignment_markers(self):
        table = "| Name| Total|\n| :--- | ---: |\n| Widget| 12|"
        assert format_pipe_table(table).split("\n") == [
            "| Name   | Total |",
            "| :----- | ----: |",
            "| Widget | 12    |",
        ]

    def test_center_alignment(self):
        table = "| Heading|\n| :---: |\n| x|"
        assert format_pipe_table(table).split("\n")[1] == "| :-----: |"

    def test_short_rows_are_filled(self):
        table = "| a| b|\n| --- | --- |\n| c|"
        assert format_pipe_table(table).split("\n")[2] == "| c   |     |"

    def test_escaped_pipe_stays_in_cell(self):
        table = "| a\\|b|\n| --- |"
        assert format_pipe_table(table).split("\n")[0] == "| a\\|b |"

    def test_non_table_lines_untouched(self):
        markdown = "before\n| a|\n| --- |\nafter"
        assert format_pipe_table(markdown) == "before\n| a   |\n| --- |\nafter"
