"""Исключения кодера."""

from __future__ import annotations

from typing import Optional


class HamcoderError(Exception):
    """Базовая ошибка кодера."""


class UsageError(HamcoderError):
    """Неверные аргументы командной строки."""


class InvalidInputError(HamcoderError, ValueError):
    """Во входной строке встретился символ, отличный от '0' и '1'."""

    def __init__(
        self,
        character: str,
        column: int,
        line_number: Optional[int] = None,
    ) -> None:
        self.character = character
        self.column = column
        self.line_number = line_number
        where = f"строка {line_number}, " if line_number is not None else ""
        super().__init__(
            f"Недопустимый символ {character!r} ({where}позиция {column}): "
            "ожидаются только '0' и '1'."
        )
