"""Тесты для разбиения на строки, превью и диапазонов навигации."""

import pytest

from jbv.blocks.preview import LineSpan, body_preview, line_span, split_lines


class TestSplitLines:

    def test_lf_and_crlf(self):
        assert split_lines("a\r\nb\n\nc") == ["a", "b", "", "c"]

    def test_trailing_newline_gives_empty_line(self):
        assert split_lines("a\n") == ["a", ""]

    def test_empty_text(self):
        assert split_lines("") == [""]

    def test_lone_cr_is_not_a_break(self):
        assert split_lines("a\rb") == ["a\rb"]


class TestBodyPreview:

    def test_collects_up_to_three_lines(self):
        lines = ["{% if a %}", "  one", "two  ", "three", "four"]
        assert body_preview(lines, 0) == "one\ntwo\nthree"

    def test_skips_blank_tag_and_comment_lines(self):
        lines = ["{% for x in y %}", "", "   ", "  {% if x %}", "{# note #}", "{{ x }}"]
        assert body_preview(lines, 0) == "{{ x }}"

    def test_stops_at_end_of_input(self):
        assert body_preview(["{% if a %}", "only"], 0) == "only"

    def test_placeholder(self):
        assert body_preview(["{% if a %}"], 0) == "No content"
        assert body_preview(["{% if a %}"], 0, placeholder="") == ""

    def test_max_lines(self):
        lines = ["{% if a %}", "one", "two"]
        assert body_preview(lines, 0, max_lines=1) == "one"
        assert body_preview(lines, 0, max_lines=0) == "No content"

    def test_starts_after_start_line(self):
        lines = ["a", "{% if a %}", "b"]
        assert body_preview(lines, 1) == "b"


class TestLineSpan:

    def test_from_first_non_space_to_end(self):
        assert line_span(["    {% if a %}"], 0) == LineSpan(line=0, start_col=4, end_col=14)

    def test_tab_indent(self):
        assert line_span(["x", "\t\t{% for a in b %}"], 1) == LineSpan(line=1, start_col=2, end_col=18)

    def test_empty_and_blank_lines(self):
        assert line_span([""], 0) == LineSpan(line=0, start_col=0, end_col=0)
        assert line_span(["   "], 0) == LineSpan(line=0, start_col=3, end_col=3)

    @pytest.mark.parametrize("line", [-1, 1, 10])
    def test_out_of_range(self, line):
        with pytest.raises(IndexError):
            line_span(["only"], line)
