"""
Jinja Block Visualizer.

Извлекает структуру вложенности блоков if/elif/else/for из текста
Jinja-шаблона и строит по ней навигируемое дерево с экспортом
в JSON и Mermaid.
"""

from __future__ import annotations

from .blocks import BlockKind, BlockNode, ParsedTemplate, parse_blocks
from .errors import JBVUserError, NoActiveDocument, SerializationFailure

__all__ = [
    "BlockKind",
    "BlockNode",
    "ParsedTemplate",
    "parse_blocks",
    "JBVUserError",
    "NoActiveDocument",
    "SerializationFailure",
]
