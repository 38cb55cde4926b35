"""Кодирование двоичных слов кодом Хэмминга."""

__version__ = "0.1.0"
