"""Тесты для HTML-представления дерева."""

from jbv.blocks import parse_blocks
from jbv.render import highlight_condition, render_html, render_tree


class TestHighlightCondition:

    def test_keywords_strings_operators(self):
        assert highlight_condition('x == "a" and not y') == (
            'x <span class="operator">==</span> '
            '<span class="string">&quot;a&quot;</span> '
            '<span class="keyword">and</span> <span class="keyword">not</span> y'
        )

    def test_keywords_case_insensitive_and_whole_words(self):
        assert highlight_condition("flag is True") == (
            'flag <span class="keyword">is</span> <span class="keyword">True</span>'
        )
        assert highlight_condition("index") == "index"

    def test_markup_is_escaped(self):
        assert highlight_condition("a < b") == 'a <span class="operator">&lt;</span> b'
        assert "<script>" not in highlight_condition("x == '<script>'")

    def test_empty(self):
        assert highlight_condition("") == ""


class TestRenderTree:

    def test_structure(self, sample_template):
        parsed = parse_blocks(sample_template)
        out = render_tree(parsed.forest, parsed.line_count())
        assert out.count("<li>") == 4
        assert 'class="node-label for" data-line="1"' in out
        assert 'class="node-label else" data-line="6"' in out
        assert '<div class="depth-line depth-0">' in out
        assert '<div class="depth-line depth-1">' in out
        assert ">ELSE</span>" in out
        assert "L2–L9" in out

    def test_open_block_tooltip(self):
        parsed = parse_blocks("{% if a %}\nbody")
        out = render_tree(parsed.forest, parsed.line_count())
        assert "L1–L2 (open)" in out

    def test_condition_cannot_inject_markup(self):
        parsed = parse_blocks('{% if "<img src=x>" in y %}\n{% endif %}')
        out = render_tree(parsed.forest, parsed.line_count())
        assert "<img" not in out

    def test_empty(self):
        assert render_tree([], 0) == ""


class TestRenderHtml:

    def test_page(self, sample_template):
        page = render_html(parse_blocks(sample_template), title="My <tpl>")
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>My &lt;tpl&gt;</title>" in page
        assert "FOR user " in page

    def test_no_blocks(self):
        assert "No blocks found" in render_html(parse_blocks("plain"))
