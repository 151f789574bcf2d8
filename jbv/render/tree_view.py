"""
Статическое HTML-представление дерева блоков.

Самодостаточная страница со вложенным списком: цветная линия глубины,
подсветка синтаксиса условий, превью тела во всплывающей подсказке
и сворачивание поддеревьев.
"""

from __future__ import annotations

import html
import re
from typing import List

from ..blocks.nodes import BlockKind, BlockNode, ParsedTemplate

DEPTH_COLORS = 5

_CONDITION_TOKEN = re.compile(
    r"(?P<string>(['\"]).*?\2)"
    r"|(?P<keyword>\b(?:and|or|not|in|is|true|false|none|defined)\b)"
    r"|(?P<operator>[=!<>]+)",
    re.IGNORECASE,
)


def highlight_condition(condition: str) -> str:
    """
    Подсвечивает ключевые слова, строки и операторы в условии.

    Текст экранируется по кусочкам, поэтому результат безопасен для вставки в HTML.
    """
    parts: List[str] = []
    pos = 0
    for m in _CONDITION_TOKEN.finditer(condition):
        parts.append(html.escape(condition[pos:m.start()]))
        kind = m.lastgroup
        parts.append(f'<span class="{kind}">{html.escape(m.group(0))}</span>')
        pos = m.end()
    parts.append(html.escape(condition[pos:]))
    return "".join(parts)


def _label_html(node: BlockNode) -> str:
    if node.kind is BlockKind.ELSE:
        return "ELSE"
    return f"{node.kind.value.upper()} {highlight_condition(node.condition)}"


def _tooltip(node: BlockNode, line_count: int) -> str:
    end = node.effective_end(line_count)
    suffix = "" if node.is_resolved else " (open)"
    return html.escape(f"L{node.line + 1}–L{end + 1}{suffix}\n{node.preview}", quote=True)


def render_tree(nodes: List[BlockNode], line_count: int) -> str:
    """Рендерит список узлов в <ul>; пустой список даёт пустую строку."""
    if not nodes:
        return ""

    items = []
    for n in nodes:
        depth_class = f"depth-{n.depth % DEPTH_COLORS}"
        has_children = bool(n.children)
        if has_children:
            expand_icon = '<span class="expand-icon">▼</span>'
            children_html = f'<div class="children expanded">{render_tree(n.children, line_count)}</div>'
        else:
            expand_icon = '<span class="expand-icon" style="visibility:hidden">▶</span>'
            children_html = ""
        items.append(
            "<li>"
            f'<div class="depth-line {depth_class}"></div>'
            '<div class="node-container">'
            f"{expand_icon}"
            f'<span class="node-label {n.kind.value}" data-line="{n.line}" '
            f'title="{_tooltip(n, line_count)}">{_label_html(n)}</span>'
            "</div>"
            f"{children_html}"
            "</li>"
        )
    return f"<ul>{''.join(items)}</ul>"


_STYLE = """
    body { font-family: monospace; padding: 12px; }
    ul { list-style: none; padding-left: 0; margin: 4px 0; }
    li { position: relative; padding-left: 24px; }
    .depth-line { position: absolute; left: 8px; top: 0; bottom: 0; width: 2px; opacity: 0.3; }
    .depth-0 { background-color: #4fc3f7; }
    .depth-1 { background-color: #ffb74d; }
    .depth-2 { background-color: #e57373; }
    .depth-3 { background-color: #81c784; }
    .depth-4 { background-color: #ba68c8; }
    .node-container { display: flex; align-items: center; margin: 2px 0; }
    .expand-icon { cursor: pointer; user-select: none; margin-right: 6px; width: 16px; display: inline-block; }
    .node-label { cursor: pointer; padding: 2px 6px; border-radius: 3px; }
    .if { color: #4fc3f7; }
    .elif { color: #ffb74d; }
    .else { color: #e57373; }
    .for { color: #81c784; }
    .keyword { font-weight: bold; }
    .string { color: #ce9178; }
    .operator { color: #d4d4d4; }
    .collapsed { display: none; }
"""

_SCRIPT = """
    document.addEventListener('click', (e) => {
      const target = e.target;
      if (!target.classList.contains('expand-icon')) return;
      const children = target.closest('li').querySelector(':scope > .children');
      if (!children) return;
      const collapsed = children.classList.toggle('collapsed');
      target.textContent = collapsed ? '▶' : '▼';
    });
"""


def render_html(parsed: ParsedTemplate, *, title: str = "Jinja2 Visualizer") -> str:
    """
    Рендерит самодостаточную HTML-страницу с деревом блоков.

    Args:
        parsed: Результат парсинга (строки нужны для границ незакрытых блоков)
        title: Заголовок страницы
    """
    safe_title = html.escape(title)
    body = render_tree(parsed.forest, parsed.line_count()) or "<p>No blocks found</p>"
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        f"  <title>{safe_title}</title>\n"
        f"  <style>{_STYLE}  </style>\n"
        "</head>\n"
        "<body>\n"
        f"  <h3>{safe_title}</h3>\n"
        f"  {body}\n"
        f"  <script>{_SCRIPT}  </script>\n"
        "</body>\n"
        "</html>\n"
    )


__all__ = ["highlight_condition", "render_tree", "render_html"]
