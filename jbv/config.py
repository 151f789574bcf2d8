"""
Конфигурация визуализатора.

Необязательный YAML-файл (по умолчанию jbv.yaml в текущем каталоге).
Отсутствующий файл означает конфигурацию по умолчанию.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .blocks.preview import DEFAULT_PREVIEW_LINES, NO_CONTENT
from .errors import ConfigError
from .export.mermaid import DIRECTIONS

CONFIG_FILENAME = "jbv.yaml"

_yaml = YAML(typ="safe")


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ValueError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def _section(d: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    raw = d.get(key)
    if raw is not None and not isinstance(raw, dict):
        raise TypeError(f"'{key}' must be a mapping")
    return raw


def _as_int(value: Any, *, ctx: str) -> int:
    # bool является подклассом int, но true/false здесь не число
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{ctx} must be an integer, got: {value!r}")
    return value


def _as_bool(value: Any, *, ctx: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{ctx} must be a boolean, got: {value!r}")
    return value


@dataclass
class PreviewCfg:
    max_lines: int = DEFAULT_PREVIEW_LINES
    placeholder: str = NO_CONTENT

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> PreviewCfg:
        if not d:
            return PreviewCfg()
        _assert_only_keys(d, ["max_lines", "placeholder"], ctx="preview")
        max_lines = _as_int(d.get("max_lines", DEFAULT_PREVIEW_LINES), ctx="preview.max_lines")
        if max_lines < 0:
            raise ValueError("preview.max_lines must be >= 0")
        placeholder = d.get("placeholder", NO_CONTENT)
        if not isinstance(placeholder, str):
            raise TypeError("preview.placeholder must be a string")
        return PreviewCfg(max_lines=max_lines, placeholder=placeholder)


@dataclass
class MermaidCfg:
    direction: str = "TD"
    edge_labels: bool = False

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> MermaidCfg:
        if not d:
            return MermaidCfg()
        _assert_only_keys(d, ["direction", "edge_labels"], ctx="mermaid")
        direction = str(d.get("direction", "TD")).upper()
        if direction not in DIRECTIONS:
            raise ValueError(f"mermaid.direction must be one of {', '.join(DIRECTIONS)}, got: {direction!r}")
        edge_labels = _as_bool(d.get("edge_labels", False), ctx="mermaid.edge_labels")
        return MermaidCfg(direction=direction, edge_labels=edge_labels)


@dataclass
class JsonCfg:
    indent: int = 2

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> JsonCfg:
        if not d:
            return JsonCfg()
        _assert_only_keys(d, ["indent"], ctx="json")
        indent = _as_int(d.get("indent", 2), ctx="json.indent")
        if indent < 0:
            raise ValueError("json.indent must be >= 0")
        return JsonCfg(indent=indent)


@dataclass
class HtmlCfg:
    title: str = "Jinja2 Visualizer"

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> HtmlCfg:
        if not d:
            return HtmlCfg()
        _assert_only_keys(d, ["title"], ctx="html")
        title = d.get("title", "Jinja2 Visualizer")
        if not isinstance(title, str):
            raise TypeError("html.title must be a string")
        return HtmlCfg(title=title)


@dataclass
class VisualizerCfg:
    """
    Корневой конфиг визуализатора.
    """
    preview: PreviewCfg = field(default_factory=PreviewCfg)
    mermaid: MermaidCfg = field(default_factory=MermaidCfg)
    json: JsonCfg = field(default_factory=JsonCfg)
    html: HtmlCfg = field(default_factory=HtmlCfg)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> VisualizerCfg:
        if not d:
            return VisualizerCfg()
        _assert_only_keys(d, ["preview", "mermaid", "json", "html"], ctx="VisualizerCfg")
        return VisualizerCfg(
            preview=PreviewCfg.from_dict(_section(d, "preview")),
            mermaid=MermaidCfg.from_dict(_section(d, "mermaid")),
            json=JsonCfg.from_dict(_section(d, "json")),
            html=HtmlCfg.from_dict(_section(d, "html")),
        )


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Optional[Path] = None, *, root: Optional[Path] = None) -> VisualizerCfg:
    """
    Загружает конфигурацию.

    Args:
        path: Явный путь к файлу (должен существовать)
        root: Каталог для поиска jbv.yaml, если path не задан (по умолчанию cwd)

    Returns:
        Конфигурация; значения по умолчанию, если файла нет

    Raises:
        ConfigError: файл не найден (для явного пути), не читается или невалиден
    """
    if path is None:
        path = (root or Path.cwd()) / CONFIG_FILENAME
        if not path.is_file():
            return VisualizerCfg()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        return VisualizerCfg.from_dict(_read_yaml_map(path))
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{path}: {e}") from e


__all__ = [
    "CONFIG_FILENAME",
    "PreviewCfg",
    "MermaidCfg",
    "JsonCfg",
    "HtmlCfg",
    "VisualizerCfg",
    "load_config",
]
