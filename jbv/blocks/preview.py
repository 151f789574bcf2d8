"""
Вспомогательные функции для работы со строками шаблона:
разбиение на строки, превью тела блока и диапазон навигации.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .tags import is_markup_line

_LINE_BREAK = re.compile(r"\r?\n")
_NON_SPACE = re.compile(r"\S")

DEFAULT_PREVIEW_LINES = 3
NO_CONTENT = "No content"


def split_lines(text: str) -> List[str]:
    """
    Разбивает текст на строки по границам CR?LF.

    Пустые строки сохраняются и занимают свой индекс; завершающий
    перевод строки даёт последнюю пустую строку.
    """
    return _LINE_BREAK.split(text)


def body_preview(
    lines: List[str],
    start_line: int,
    max_lines: int = DEFAULT_PREVIEW_LINES,
    placeholder: str = NO_CONTENT,
) -> str:
    """
    Собирает короткое превью тела блока.

    Сканирует строки после start_line, пропуская пустые строки и строки,
    начинающиеся с открытия тега или комментария. Останавливается после
    max_lines найденных строк или в конце ввода.
    """
    collected: List[str] = []
    for i in range(start_line + 1, len(lines)):
        if len(collected) >= max_lines:
            break
        stripped = lines[i].strip()
        if stripped and not is_markup_line(stripped):
            collected.append(stripped)
    return "\n".join(collected) or placeholder


@dataclass(frozen=True)
class LineSpan:
    """Диапазон выделения строки при навигации (колонки 0-based, end исключительно)."""
    line: int
    start_col: int
    end_col: int


def line_span(lines: List[str], line: int) -> LineSpan:
    """
    Диапазон от первого непробельного символа до конца строки.

    Для пустой строки или строки из одних пробелов диапазон пустой
    и стоит в конце строки.

    Raises:
        IndexError: если строки с таким индексом нет
    """
    if line < 0 or line >= len(lines):
        raise IndexError(f"line {line} is out of range (0..{len(lines) - 1})")
    text = lines[line]
    m = _NON_SPACE.search(text)
    start = m.start() if m else len(text)
    return LineSpan(line=line, start_col=start, end_col=len(text))


__all__ = [
    "DEFAULT_PREVIEW_LINES",
    "NO_CONTENT",
    "LineSpan",
    "split_lines",
    "body_preview",
    "line_span",
]
