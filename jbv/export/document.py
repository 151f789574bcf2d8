"""
Документная проекция леса блоков (JSON).

Чистое рекурсивное отображение леса в дерево записей
{type, line, condition, children}. Семантической проверки не выполняет.
"""

from __future__ import annotations

from typing import List

from ..blocks.nodes import BlockKind, Forest
from ..errors import SerializationFailure
from ..jsonic import dumps
from .schema import DocumentNode


def to_document(forest: Forest) -> List[DocumentNode]:
    """
    Проецирует лес в список DocumentNode.

    Номера строк переводятся в 1-based; у else условие отсутствует.
    """
    return [
        DocumentNode(
            type=node.kind.value,
            line=node.line + 1,
            condition=None if node.kind is BlockKind.ELSE else node.condition,
            children=to_document(node.children),
        )
        for node in forest
    ]


def render_json(forest: Forest, *, indent: int = 2) -> str:
    """
    Сериализует лес в JSON.

    Raises:
        SerializationFailure: если проекция или сериализация не удалась
    """
    try:
        doc = to_document(forest)
        return dumps([node.model_dump(exclude_none=True) for node in doc], indent=indent)
    except (TypeError, ValueError) as e:
        raise SerializationFailure("json", str(e), e) from e


__all__ = ["to_document", "render_json"]
