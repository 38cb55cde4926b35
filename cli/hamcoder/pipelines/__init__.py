"""Вспомогательные экспорты модулей конвейера."""

from .hamming import (
    CodeWord,
    DataWord,
    HammingEncoder,
    assemble_codeword,
    code_length,
    parity_bit,
    parity_bit_count,
    syndrome,
)  # noqa: F401
from .lines import (
    encode_file,
    encode_line,
    encode_lines,
    encode_stream,
    format_codeword,
    parse_word,
)  # noqa: F401
