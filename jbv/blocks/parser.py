"""
Парсер структуры блоков Jinja-шаблона.

Однопроходный стековый алгоритм: превращает плоскую последовательность
строк с блочными тегами в лес корректно вложенных узлов. Никогда не
выбрасывает исключений на некорректном вводе: вместо этого оставляет
частичный, но чётко определённый результат.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .nodes import BlockKind, BlockNode, Forest, ParsedTemplate
from .preview import DEFAULT_PREVIEW_LINES, NO_CONTENT, body_preview, split_lines
from .tags import BlockTagRecognizer, TagKind, TagMatch

logger = logging.getLogger(__name__)

_NODE_KINDS = {
    TagKind.IF: BlockKind.IF,
    TagKind.ELIF: BlockKind.ELIF,
    TagKind.ELSE: BlockKind.ELSE,
    TagKind.FOR: BlockKind.FOR,
}


class BlockStructureParser:
    """
    Стековый построитель дерева блоков.

    Узлы хранятся в арене (списке), стек активных блоков содержит индексы
    в арене, а не владеющие ссылки. Каждый узел принадлежит ровно одному
    списку children (или лесу), поэтому завершение при снятии со стека сводится
    к простой записи по индексу.

    Правила переходов (для строки i):
    - if / for: новый узел с depth=len(stack), добавляется к вершине стека
      (или в лес), затем кладётся на стек;
    - elif / else: вершина завершается (end_line=i-1) и снимается, новый
      узел добавляется к новой вершине (или в лес, если стек опустел после
      снятия) и кладётся на стек. Если стек был пуст ещё до тега, узел
      не создаётся;
    - endif / endfor: вершина завершается и снимается; на пустом стеке: no-op.
    """

    def __init__(
        self,
        text: str,
        *,
        preview_lines: int = DEFAULT_PREVIEW_LINES,
        placeholder: str = NO_CONTENT,
    ):
        """
        Args:
            text: Полный текст шаблона
            preview_lines: Максимум строк в превью тела блока
            placeholder: Текст превью для блока без содержимого
        """
        self.text = text
        self.preview_lines = preview_lines
        self.placeholder = placeholder
        self.recognizer = BlockTagRecognizer()

    def parse(self) -> ParsedTemplate:
        """
        Парсит текст в лес блоков.

        Каждый вызов работает со своими стеком и ареной, поэтому повторный
        вызов даёт структурно идентичный результат.

        Returns:
            ParsedTemplate с исходными строками и лесом
        """
        lines = split_lines(self.text)
        arena: List[BlockNode] = []
        stack: List[int] = []
        forest: Forest = []

        for i, line in enumerate(lines):
            tag = self.recognizer.recognize(line)
            if tag is None:
                continue

            if tag.kind.opens_block:
                node = self._new_node(tag, i, depth=len(stack))
                self._attach(node, arena, stack, forest)
                arena.append(node)
                stack.append(len(arena) - 1)

            elif tag.kind.continues_block:
                if not stack:
                    logger.warning(f"Stray '{tag.kind.value}' at line {i + 1}: no open block, ignored")
                    continue
                self._close_top(arena, stack, i)
                node = self._new_node(tag, i, depth=len(stack))
                self._attach(node, arena, stack, forest)
                arena.append(node)
                stack.append(len(arena) - 1)

            elif tag.kind.closes_block:
                if not stack:
                    logger.warning(f"Stray '{tag.kind.value}' at line {i + 1}: no open block, ignored")
                    continue
                self._close_top(arena, stack, i)

        if stack:
            logger.debug(f"{len(stack)} block(s) left open at end of input")

        for node in arena:
            node.preview = body_preview(lines, node.line, self.preview_lines, self.placeholder)

        logger.debug(f"Parsed {len(lines)} lines into {len(arena)} nodes ({len(forest)} roots)")
        return ParsedTemplate(lines=lines, forest=forest)

    @staticmethod
    def _new_node(tag: TagMatch, line: int, *, depth: int) -> BlockNode:
        return BlockNode(
            kind=_NODE_KINDS[tag.kind],
            condition=tag.condition,
            line=line,
            depth=depth,
        )

    @staticmethod
    def _attach(node: BlockNode, arena: List[BlockNode], stack: List[int], forest: Forest) -> None:
        """Добавляет узел в children вершины стека или в лес."""
        if stack:
            arena[stack[-1]].children.append(node)
        else:
            forest.append(node)

    @staticmethod
    def _close_top(arena: List[BlockNode], stack: List[int], line: int) -> None:
        """Завершает узел на вершине стека: тело заканчивается строкой перед закрывающей."""
        idx = stack.pop()
        arena[idx].end_line = line - 1


def parse_blocks(
    text: str,
    *,
    preview_lines: int = DEFAULT_PREVIEW_LINES,
    placeholder: Optional[str] = None,
) -> ParsedTemplate:
    """
    Удобная функция для парсинга структуры блоков.

    Args:
        text: Исходный текст шаблона
        preview_lines: Максимум строк превью
        placeholder: Текст превью для пустого тела

    Returns:
        ParsedTemplate (строки + лес)
    """
    parser = BlockStructureParser(
        text,
        preview_lines=preview_lines,
        placeholder=NO_CONTENT if placeholder is None else placeholder,
    )
    return parser.parse()


__all__ = [
    "BlockStructureParser",
    "parse_blocks",
]
