"""
Пакет для извлечения структуры блоков if/elif/else/for из Jinja-шаблонов.

Предоставляет стековый парсер, строящий лес блоков с метаданными
о строках, и вспомогательные функции для превью и навигации.
"""

from .nodes import BlockKind, BlockNode, Forest, ParsedTemplate, format_forest_tree
from .parser import BlockStructureParser, parse_blocks
from .preview import LineSpan, body_preview, line_span, split_lines
from .tags import TagKind, TagMatch, recognize_tag
from .diagnostics import BlockIssue, collect_issues, has_errors

__all__ = [
    # Основная функция для использования
    "parse_blocks",
    "BlockStructureParser",

    # Модель
    "BlockKind",
    "BlockNode",
    "Forest",
    "ParsedTemplate",
    "format_forest_tree",

    # Строки, превью, навигация
    "LineSpan",
    "split_lines",
    "body_preview",
    "line_span",

    # Низкоуровневые функции (для тестирования и отладки)
    "TagKind",
    "TagMatch",
    "recognize_tag",

    # Структурная проверка
    "BlockIssue",
    "collect_issues",
    "has_errors",
]
