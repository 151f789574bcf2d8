"""
Диаграммная проекция леса блоков (Mermaid flowchart).

Каждый узел становится вершиной (циклы: параллелограмм, условия: ромб),
а каждое отношение родитель→потомок становится ребром. Идентификаторы вершин
выводятся из позиции в дереве (id родителя + индекс потомка), поэтому
один и тот же лес всегда даёт одни и те же идентификаторы.
"""

from __future__ import annotations

from typing import List

from ..blocks.nodes import BlockNode, Forest
from ..errors import SerializationFailure

DIRECTIONS = ("TD", "TB", "BT", "LR", "RL")


def node_id(prefix: str, index: int) -> str:
    """Идентификатор вершины по позиции: node<i> для корней, <parent>_<j> для потомков."""
    return f"{prefix}_{index}" if prefix else f"node{index}"


def _escape_label(label: str) -> str:
    return label.replace('"', "#quot;")


def _vertex(vid: str, node: BlockNode) -> str:
    label = _escape_label(node.label)
    if node.kind.is_loop:
        return f'{vid}[/"{label}"/]'
    return f'{vid}{{"{label}"}}'


def _emit(nodes: List[BlockNode], prefix: str, out: List[str], edge_labels: bool) -> None:
    for idx, node in enumerate(nodes):
        vid = node_id(prefix, idx)
        out.append(f"  {_vertex(vid, node)}")
        for child_idx in range(len(node.children)):
            arrow = f"-->|{child_idx + 1}|" if edge_labels else "-->"
            out.append(f"  {vid} {arrow} {node_id(vid, child_idx)}")
        _emit(node.children, vid, out, edge_labels)


def render_mermaid(forest: Forest, *, direction: str = "TD", edge_labels: bool = False) -> str:
    """
    Генерирует описание графа Mermaid.

    Первая строка: объявление направления графа, далее по одной строке
    на вершину и на ребро.

    Args:
        forest: Лес блоков
        direction: Направление графа (TD, TB, BT, LR, RL)
        edge_labels: Подписывать рёбра позицией потомка (1-based)

    Raises:
        SerializationFailure: при неизвестном направлении графа
    """
    if direction not in DIRECTIONS:
        raise SerializationFailure(
            "mermaid", f"unknown graph direction {direction!r} (expected one of {', '.join(DIRECTIONS)})"
        )
    out: List[str] = [f"graph {direction}"]
    _emit(forest, "", out, edge_labels)
    return "\n".join(out) + "\n"


__all__ = ["DIRECTIONS", "node_id", "render_mermaid"]
