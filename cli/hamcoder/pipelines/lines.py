"""Построчное кодирование текстовых файлов."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Sequence, TextIO

from ..config import Settings, settings as default_settings
from ..errors import InvalidInputError
from .hamming import DataWord, HammingEncoder

logger = logging.getLogger(__name__)

_ZERO = ord("0")


def parse_word(line: str, line_number: Optional[int] = None) -> DataWord:
    """Превратить строку из '0' и '1' в слово данных."""

    text = line.rstrip("\r\n")
    for column, char in enumerate(text, start=1):
        if char not in "01":
            raise InvalidInputError(char, column, line_number)
    return tuple(ord(char) - _ZERO for char in text)


def format_codeword(codeword: Sequence[int]) -> str:
    return "".join(str(bit) for bit in codeword)


def encode_line(
    line: str,
    line_number: Optional[int] = None,
    encoder: Optional[HammingEncoder] = None,
) -> str:
    encoder = encoder or HammingEncoder()
    return format_codeword(encoder.encode(parse_word(line, line_number)))


def encode_lines(lines: Iterable[str]) -> Iterator[str]:
    """Закодировать строки по одной, сохраняя порядок."""

    encoder = HammingEncoder()
    for line_number, line in enumerate(lines, start=1):
        yield encode_line(line, line_number, encoder)


def encode_stream(
    source: Iterable[str],
    sink: TextIO,
    line_terminator: str = "\n",
) -> Dict[str, int]:
    """Прочитать строки из ``source`` и записать коды в ``sink``."""

    stats = {
        "lines": 0,
        "data_bits": 0,
        "parity_bits": 0,
        "code_bits": 0,
    }
    encoder = HammingEncoder()

    for line_number, line in enumerate(source, start=1):
        word = parse_word(line, line_number)
        codeword = encoder.encode(word)
        sink.write(format_codeword(codeword))
        sink.write(line_terminator)

        stats["lines"] += 1
        stats["data_bits"] += len(word)
        stats["code_bits"] += len(codeword)
        stats["parity_bits"] += len(codeword) - len(word)

    return stats


def encode_file(
    input_path: Path | str,
    output_path: Path | str,
    config: Optional[Settings] = None,
) -> Dict[str, int]:
    """Закодировать файл целиком. Ошибки ввода-вывода не перехватываются."""

    cfg = config or default_settings
    # newline="" отключает перевод "\n" в платформенный разделитель
    with open(input_path, "r", encoding=cfg.encoding) as source, open(
        output_path, "w", encoding=cfg.encoding, newline=""
    ) as sink:
        stats = encode_stream(source, sink, cfg.line_terminator)

    logger.info(
        f"Закодировано строк: {stats['lines']} ({input_path} -> {output_path}), "
        f"бит данных: {stats['data_bits']}, проверочных бит: {stats['parity_bits']}"
    )
    return stats
