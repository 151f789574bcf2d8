"""
Сессия просмотра документа.

Явное состояние «текущего документа» вместо глобального синглтона:
хранит текст, путь и результат последнего завершённого парсинга.
Каждое изменение текста приводит к полному повторному парсингу.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from .blocks import LineSpan, ParsedTemplate, line_span, parse_blocks
from .config import VisualizerCfg
from .errors import JBVUserError, NoActiveDocument
from .export import render_json, render_mermaid
from .render import render_html

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "mermaid", "html")


class ViewSession:
    """
    Состояние одного представления дерева блоков.

    Результат парсинга передаётся потребителям как есть и после возврата
    не изменяется: refresh() заменяет его новым объектом.
    """

    def __init__(self, cfg: Optional[VisualizerCfg] = None):
        self.cfg = cfg or VisualizerCfg()
        self.path: Optional[Path] = None
        self.text: Optional[str] = None
        self._parsed: Optional[ParsedTemplate] = None

    # ---- документ ----

    def open(self, path: Path) -> ParsedTemplate:
        """
        Открывает файл шаблона и парсит его.

        Raises:
            NoActiveDocument: если файла нет
        """
        if not path.is_file():
            raise NoActiveDocument(f"Template file not found: {path}")
        # Без universal newlines: одиночный \r не должен становиться разрывом строки
        try:
            text = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NoActiveDocument(f"Failed to read template {path}: {e}") from e
        return self.load_text(text, path=path)

    def load_text(self, text: str, *, path: Optional[Path] = None) -> ParsedTemplate:
        """Загружает текст документа (например, из stdin) и парсит его."""
        self.path = path
        return self.refresh(text)

    def refresh(self, text: str) -> ParsedTemplate:
        """Полный повторный парсинг после изменения текста."""
        self.text = text
        self._parsed = parse_blocks(
            text,
            preview_lines=self.cfg.preview.max_lines,
            placeholder=self.cfg.preview.placeholder,
        )
        logger.debug(
            f"Refreshed {self.path or '<text>'}: {self._parsed.node_count()} nodes, "
            f"{self._parsed.line_count()} lines"
        )
        return self._parsed

    def close(self) -> None:
        self.path = None
        self.text = None
        self._parsed = None

    @property
    def parsed(self) -> ParsedTemplate:
        """
        Результат последнего парсинга.

        Raises:
            NoActiveDocument: если документ не загружен
        """
        if self._parsed is None:
            raise NoActiveDocument()
        return self._parsed

    # ---- навигация и экспорт ----

    def navigate(self, line: int) -> LineSpan:
        """
        Диапазон выделения для перехода к строке узла (0-based).

        Raises:
            NoActiveDocument: если документ не загружен
            JBVUserError: если строка вне документа
        """
        parsed = self.parsed
        try:
            return line_span(parsed.lines, line)
        except IndexError as e:
            raise JBVUserError(f"Line {line + 1} is out of range (document has {parsed.line_count()} lines)") from e

    def export(self, fmt: str) -> str:
        """
        Экспортирует дерево в заданный формат.

        Raises:
            NoActiveDocument: если документ не загружен
            JBVUserError: неизвестный формат
            SerializationFailure: ошибка проекции
        """
        exporters: Dict[str, Callable[[ParsedTemplate], str]] = {
            "json": lambda p: render_json(p.forest, indent=self.cfg.json.indent),
            "mermaid": lambda p: render_mermaid(
                p.forest,
                direction=self.cfg.mermaid.direction,
                edge_labels=self.cfg.mermaid.edge_labels,
            ),
            "html": lambda p: render_html(p, title=self.cfg.html.title),
        }
        exporter = exporters.get(fmt)
        if exporter is None:
            raise JBVUserError(f"Unknown export format '{fmt}'. Expected one of: {', '.join(EXPORT_FORMATS)}")
        return exporter(self.parsed)


__all__ = ["EXPORT_FORMATS", "ViewSession"]
