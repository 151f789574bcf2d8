"""
Экспорт дерева блоков: документ (JSON) и диаграмма (Mermaid).
"""

from .document import render_json, to_document
from .mermaid import render_mermaid
from .schema import DocumentNode

__all__ = [
    "DocumentNode",
    "to_document",
    "render_json",
    "render_mermaid",
]
