"""
HTML-представление дерева блоков.
"""

from .tree_view import highlight_condition, render_html, render_tree

__all__ = ["highlight_condition", "render_html", "render_tree"]
