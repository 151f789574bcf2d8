"""
Структурная проверка блочных тегов.

Независимая от парсера проверка: находит теги без пары, несовпадающие
закрывающие теги и незакрытые блоки. Парсер на такие случаи не реагирует
(он лишь оставляет частичный результат), а здесь они превращаются
в понятные пользователю сообщения.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from .preview import split_lines
from .tags import TagKind, recognize_tag

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class BlockIssue:
    line: int           # 0-based
    severity: Severity
    message: str


@dataclass
class _OpenBlock:
    kind: TagKind       # IF или FOR (для цепочки if/elif/else: IF)
    line: int           # строка открывающего тега
    branch: TagKind     # текущая ветка: IF, ELIF, ELSE или FOR


def collect_issues(text: str) -> List[BlockIssue]:
    """
    Проверяет последовательность блочных тегов на корректность структуры.

    Args:
        text: Исходный текст шаблона

    Returns:
        Список проблем (пустой, если структура корректна)
    """
    issues: List[BlockIssue] = []
    stack: List[_OpenBlock] = []

    def error(line: int, message: str) -> None:
        issues.append(BlockIssue(line=line, severity="error", message=message))

    for i, line in enumerate(split_lines(text)):
        tag = recognize_tag(line)
        if tag is None:
            continue
        kind = tag.kind

        if kind in (TagKind.IF, TagKind.ELIF, TagKind.FOR) and not tag.condition:
            issues.append(BlockIssue(line=i, severity="warning",
                                     message=f"'{kind.value}' without condition"))

        if kind in (TagKind.IF, TagKind.FOR):
            stack.append(_OpenBlock(kind=kind, line=i, branch=kind))

        elif kind is TagKind.ELIF:
            if not stack:
                error(i, "'elif' without matching 'if'")
            elif stack[-1].kind is not TagKind.IF:
                error(i, f"'elif' inside 'for' opened at line {stack[-1].line + 1}")
            elif stack[-1].branch is TagKind.ELSE:
                error(i, "'elif' after 'else'")
            else:
                stack[-1].branch = TagKind.ELIF

        elif kind is TagKind.ELSE:
            # for ... else ... endfor: допустимая конструкция Jinja
            if not stack:
                error(i, "'else' without matching 'if' or 'for'")
            elif stack[-1].branch is TagKind.ELSE:
                error(i, "multiple 'else' in one block")
            else:
                stack[-1].branch = TagKind.ELSE

        elif kind is TagKind.ENDIF:
            if not stack:
                error(i, "'endif' without matching 'if'")
                continue
            top = stack.pop()
            if top.kind is not TagKind.IF:
                error(i, f"'endif' closes 'for' opened at line {top.line + 1}")

        elif kind is TagKind.ENDFOR:
            if not stack:
                error(i, "'endfor' without matching 'for'")
                continue
            top = stack.pop()
            if top.kind is not TagKind.FOR:
                error(i, f"'endfor' closes 'if' opened at line {top.line + 1}")

    # Оставшиеся открытые блоки
    for block in stack:
        error(block.line, f"unclosed '{block.kind.value}' block")

    issues.sort(key=lambda issue: issue.line)
    return issues


def has_errors(issues: List[BlockIssue]) -> bool:
    return any(issue.severity == "error" for issue in issues)


__all__ = ["BlockIssue", "Severity", "collect_issues", "has_errors"]
