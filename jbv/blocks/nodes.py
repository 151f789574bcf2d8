"""
Модель дерева блоков шаблона.

Определяет узел блока (if/elif/else/for) с метаданными о строках
и лес корневых узлов, получаемый в результате парсинга.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


class BlockKind(enum.Enum):
    """Вид блока. Закрывающие теги узлами не становятся."""
    IF = "if"
    ELIF = "elif"
    ELSE = "else"
    FOR = "for"

    @property
    def is_loop(self) -> bool:
        return self is BlockKind.FOR


@dataclass
class BlockNode:
    """
    Узел структуры блоков.

    Создаётся в момент распознавания открывающего тега. Единственное
    изменение после вставки в дерево: установка end_line при снятии
    узла со стека активных блоков.
    """
    kind: BlockKind
    condition: str          # Исходный текст условия ("" для else)
    line: int               # Строка тега (0-based)
    depth: int              # Число предков в итоговом лесу
    end_line: Optional[int] = None  # Последняя строка тела; None: открыт до конца ввода
    preview: str = ""
    children: List[BlockNode] = field(default_factory=list)

    @property
    def is_resolved(self) -> bool:
        return self.end_line is not None

    def effective_end(self, line_count: int) -> int:
        """
        Последняя строка тела с учётом незакрытых блоков.

        Незакрытый узел считается открытым до конца ввода.
        """
        if self.end_line is not None:
            return self.end_line
        return max(self.line, line_count - 1)

    @property
    def label(self) -> str:
        if self.kind is BlockKind.ELSE:
            return "else"
        return f"{self.kind.value} {self.condition}".rstrip()

    def iter_nodes(self) -> Iterator[BlockNode]:
        """Обход поддерева в глубину (pre-order), включая сам узел."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()


# Лес корневых узлов
Forest = List[BlockNode]


@dataclass
class ParsedTemplate:
    """
    Результат парсинга:
      • исходные строки (нужны потребителям для превью и подсветки);
      • лес блоков.
    """
    lines: List[str]
    forest: Forest

    def iter_nodes(self) -> Iterator[BlockNode]:
        for root in self.forest:
            yield from root.iter_nodes()

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def line_count(self) -> int:
        return len(self.lines)


def format_forest_tree(forest: Forest, indent: int = 0, *, line_count: Optional[int] = None) -> str:
    """Форматирует лес как текстовое дерево (для CLI и отладки)."""
    lines = []
    prefix = "  " * indent

    for node in forest:
        if node.end_line is not None:
            span = f"L{node.line + 1}-L{node.end_line + 1}"
        elif line_count is not None:
            span = f"L{node.line + 1}-L{node.effective_end(line_count) + 1} (open)"
        else:
            span = f"L{node.line + 1}- (open)"
        lines.append(f"{prefix}{node.label}  [{span}]")
        if node.children:
            lines.append(format_forest_tree(node.children, indent + 1, line_count=line_count))

    return "\n".join(lines)


__all__ = [
    "BlockKind",
    "BlockNode",
    "Forest",
    "ParsedTemplate",
    "format_forest_tree",
]
