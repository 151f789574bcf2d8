"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from JBVUserError.

Programming errors and bugs should NOT inherit from JBVUserError;
they will propagate with full tracebacks.

The block parser itself never raises: every failure category here belongs
to the host-interaction layer (CLI, session, export).
"""

from __future__ import annotations

from typing import Optional


class JBVUserError(Exception):
    """
    Base class for all user-facing errors in Jinja Block Visualizer.

    These errors indicate problems that the user can fix:
    missing documents, invalid configuration, unknown export formats, etc.
    """
    pass


class NoActiveDocument(JBVUserError):
    """Нечего парсить: документ не открыт, не найден или не загружен в сессию."""

    def __init__(self, message: str = "No active document"):
        super().__init__(message)


class SerializationFailure(JBVUserError):
    """
    Проекция дерева в формат экспорта не удалась.

    Дерево при этом остаётся валидным и может быть экспортировано повторно.
    """

    def __init__(self, fmt: str, message: str, cause: Optional[Exception] = None):
        super().__init__(f"Failed to export as {fmt}: {message}")
        self.fmt = fmt
        self.cause = cause


class ConfigError(JBVUserError):
    """Ошибка чтения или валидации файла конфигурации."""
    pass


__all__ = ["JBVUserError", "NoActiveDocument", "SerializationFailure", "ConfigError"]
