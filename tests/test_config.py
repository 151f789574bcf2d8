"""Тесты для загрузки конфигурации."""

import textwrap

import pytest

from jbv.config import CONFIG_FILENAME, VisualizerCfg, load_config
from jbv.errors import ConfigError


def _write_cfg(root, text):
    p = root / CONFIG_FILENAME
    p.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return p


class TestLoadConfig:

    def test_defaults_without_file(self, tmp_path):
        cfg = load_config(root=tmp_path)
        assert cfg == VisualizerCfg()
        assert cfg.preview.max_lines == 3
        assert cfg.preview.placeholder == "No content"
        assert cfg.mermaid.direction == "TD"
        assert cfg.json.indent == 2

    def test_full_file(self, tmp_path):
        _write_cfg(tmp_path, """
            preview:
              max_lines: 5
              placeholder: "(empty)"
            mermaid:
              direction: lr
              edge_labels: true
            json:
              indent: 4
            html:
              title: Templates
        """)
        cfg = load_config(root=tmp_path)
        assert cfg.preview.max_lines == 5
        assert cfg.preview.placeholder == "(empty)"
        assert cfg.mermaid.direction == "LR"
        assert cfg.mermaid.edge_labels is True
        assert cfg.json.indent == 4
        assert cfg.html.title == "Templates"

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        _write_cfg(tmp_path, "json:\n  indent: 0\n")
        cfg = load_config(root=tmp_path)
        assert cfg.json.indent == 0
        assert cfg.preview.max_lines == 3

    def test_empty_file(self, tmp_path):
        _write_cfg(tmp_path, "")
        assert load_config(root=tmp_path) == VisualizerCfg()

    def test_explicit_path(self, tmp_path):
        p = tmp_path / "custom.yaml"
        p.write_text("mermaid:\n  direction: BT\n", encoding="utf-8")
        assert load_config(p).mermaid.direction == "BT"

    def test_explicit_path_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")


class TestInvalidConfig:

    @pytest.mark.parametrize("text, fragment", [
        ("unknown: 1\n", "unknown key"),
        ("preview:\n  lines: 2\n", "unknown key"),
        ("mermaid:\n  direction: XY\n", "mermaid.direction"),
        ("preview:\n  max_lines: -1\n", "max_lines"),
        ("preview:\n  max_lines: many\n", "many"),
        ("preview:\n  max_lines: true\n", "max_lines must be an integer"),
        ("json:\n  indent: 3.7\n", "json.indent must be an integer"),
        ("mermaid:\n  edge_labels: \"false\"\n", "edge_labels must be a boolean"),
        ("mermaid:\n  edge_labels: 1\n", "edge_labels must be a boolean"),
        ("preview: 3\n", "must be a mapping"),
        ("- a\n- b\n", "must be a mapping"),
        ("preview: [1, 2\n", "Invalid YAML"),
    ])
    def test_rejected(self, tmp_path, text, fragment):
        _write_cfg(tmp_path, text)
        with pytest.raises(ConfigError, match=fragment):
            load_config(root=tmp_path)
