"""
Распознаватель блочных тегов Jinja в строке шаблона.

Классифицирует одну строку текста как ноль или одно вхождение
управляющего тега (if/elif/else/endif/for/endfor) и извлекает
текст условия или выражения цикла.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple


# Маркеры начала тега и комментария (используются и при сборе превью)
TAG_OPEN = "{%"
COMMENT_OPEN = "{#"


class TagKind(enum.Enum):
    """Типы распознаваемых блочных тегов."""
    IF = "if"
    ELIF = "elif"
    ELSE = "else"
    ENDIF = "endif"
    FOR = "for"
    ENDFOR = "endfor"

    @property
    def opens_block(self) -> bool:
        return self in (TagKind.IF, TagKind.FOR)

    @property
    def continues_block(self) -> bool:
        return self in (TagKind.ELIF, TagKind.ELSE)

    @property
    def closes_block(self) -> bool:
        return self in (TagKind.ENDIF, TagKind.ENDFOR)


@dataclass(frozen=True)
class TagMatch:
    """
    Результат распознавания тега в строке.
    """
    kind: TagKind
    condition: str  # Условие / выражение цикла ("" если нет захвата)
    column: int     # Позиция начала тега в строке (0-based)


class BlockTagRecognizer:
    """
    Распознаватель блочных тегов.

    Проверяет строку шаблонами в фиксированном порядке приоритета:
    if, elif, else, endif, for, endfor. Если строка содержит синтаксис
    нескольких тегов, побеждает первый по порядку проверки: это политика,
    а не ошибка. Допускаются пробелы и маркеры обрезки ({%- ... -%}).
    """

    # Порядок элементов задаёт приоритет
    _PATTERNS: List[Tuple[TagKind, Pattern[str]]] = [
        (TagKind.IF, re.compile(r'\{%-?\s*if\s+(.*?)\s*-?%\}')),
        (TagKind.ELIF, re.compile(r'\{%-?\s*elif\s+(.*?)\s*-?%\}')),
        (TagKind.ELSE, re.compile(r'\{%-?\s*else\s*-?%\}')),
        (TagKind.ENDIF, re.compile(r'\{%-?\s*endif\s*-?%\}')),
        (TagKind.FOR, re.compile(r'\{%-?\s*for\s+(.*?)\s*-?%\}')),
        (TagKind.ENDFOR, re.compile(r'\{%-?\s*endfor\s*-?%\}')),
    ]

    def recognize(self, line: str) -> Optional[TagMatch]:
        """
        Классифицирует строку.

        Args:
            line: Одна строка шаблона (без перевода строки)

        Returns:
            TagMatch для первого сработавшего шаблона или None
        """
        for kind, pattern in self._PATTERNS:
            match = pattern.search(line)
            if not match:
                continue
            # Отсутствие захвата (некорректный тег) даёт пустую строку
            condition = (match.group(1) or "") if pattern.groups else ""
            return TagMatch(kind=kind, condition=condition.strip(), column=match.start())
        return None


_RECOGNIZER = BlockTagRecognizer()


def recognize_tag(line: str) -> Optional[TagMatch]:
    """
    Удобная функция для распознавания тега в строке.

    Args:
        line: Строка шаблона

    Returns:
        TagMatch или None, если строка не содержит блочного тега
    """
    return _RECOGNIZER.recognize(line)


def is_markup_line(stripped: str) -> bool:
    """Начинается ли (обрезанная) строка с открытия тега или комментария."""
    return stripped.startswith(TAG_OPEN) or stripped.startswith(COMMENT_OPEN)


__all__ = [
    "TAG_OPEN",
    "COMMENT_OPEN",
    "TagKind",
    "TagMatch",
    "BlockTagRecognizer",
    "recognize_tag",
    "is_markup_line",
]
