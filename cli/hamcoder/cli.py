"""Точка входа командной строки."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import settings
from .errors import InvalidInputError, UsageError
from .pipelines.lines import encode_file

logger = logging.getLogger(__name__)

USAGE = "Usage: hamcoder <input_file> <output_file>"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="hamcoder",
        usage=USAGE,
        description="Кодирует каждую строку из '0' и '1' кодом Хэмминга.",
    )
    ap.add_argument("input_file", help="входной файл, одно слово на строку")
    ap.add_argument("output_file", help="файл для закодированных слов")
    ap.add_argument("-v", "--verbose", action="store_true", help="печатать итоги прогона")
    return ap


def configure_logging(verbose: bool = False) -> None:
    level = logging.INFO if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="{levelname} in {module}: {message}",
        style="{",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return 1

    configure_logging(args.verbose)

    try:
        encode_file(args.input_file, args.output_file)
    except InvalidInputError as exc:
        logger.error(f"{args.input_file}: {exc}")
        return 1
    except UnicodeDecodeError as exc:
        logger.error(
            f"{args.input_file}: не удалось декодировать файл ({exc.encoding}): {exc.reason}"
        )
        return 1
    except OSError as exc:
        logger.error(f"Ошибка ввода-вывода: {exc}")
        return 1
    return 0
