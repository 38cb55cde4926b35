"""Построение кода Хэмминга для слов произвольной длины."""

from __future__ import annotations

from typing import List, Sequence, Tuple

DataWord = Tuple[int, ...]
CodeWord = List[int]


def _parity(*bits: int) -> int:
    acc = 0
    for bit in bits:
        acc ^= bit & 1
    return acc


def is_power_of_two(position: int) -> bool:
    return position > 0 and position & (position - 1) == 0


def parity_bit_count(data_length: int) -> int:
    """Число проверочных битов для слова из ``data_length`` битов.

    Наименьшее ``r``, для которого ``2 ** r >= data_length + r + 1``.
    Для пустого слова проверочные биты не нужны.
    """

    if data_length < 0:
        raise ValueError("Длина слова не может быть отрицательной.")
    if data_length == 0:
        return 0

    # bit_length() == ceil(log2(n + 1)); для коротких слов этого мало
    count = data_length.bit_length()
    while (1 << count) < data_length + count + 1:
        count += 1
    return count


def code_length(data_length: int) -> int:
    """Полная длина кодового слова: данные плюс проверочные биты."""

    return data_length + parity_bit_count(data_length)


def parity_bit(codeword: Sequence[int], position: int) -> int:
    """Значение проверочного бита в позиции ``position`` (нумерация с 1).

    Бит в позиции ``2 ** k`` покрывает все позиции, в двоичной записи
    которых установлен бит ``k``. Сама позиция в сумму не входит.
    """

    if not is_power_of_two(position) or position > len(codeword):
        raise ValueError(f"Позиция {position} не является проверочной.")

    return _parity(
        *(
            codeword[index - 1]
            for index in range(1, len(codeword) + 1)
            if index & position and index != position
        )
    )


def assemble_codeword(data: Sequence[int], length: int) -> CodeWord:
    """Разместить биты данных и вычислить проверочные биты."""

    codeword: CodeWord = [0] * length
    data_iter = iter(data)
    placed = 0

    for position in range(1, length + 1):
        if is_power_of_two(position):
            continue
        try:
            codeword[position - 1] = next(data_iter)
        except StopIteration:
            raise ValueError(
                f"Для длины кода {length} не хватает битов данных: {len(data)}."
            ) from None
        placed += 1

    if placed != len(data):
        raise ValueError(
            f"Длина кода {length} вмещает {placed} бит данных, получено {len(data)}."
        )

    # Проверочные позиции не пересекаются с покрытием друг друга,
    # поэтому порядок заполнения не влияет на результат.
    position = 1
    while position <= length:
        codeword[position - 1] = parity_bit(codeword, position)
        position <<= 1

    return codeword


def syndrome(codeword: Sequence[int]) -> int:
    """XOR номеров позиций всех единичных битов.

    Для корректного кодового слова равен нулю, после инверсии одного
    бита указывает на его позицию.
    """

    acc = 0
    for position, bit in enumerate(codeword, start=1):
        if bit & 1:
            acc ^= position
    return acc


class HammingEncoder:
    """Кодер Хэмминга для слов переменной длины."""

    def encode(self, data: Sequence[int]) -> CodeWord:
        return assemble_codeword(data, code_length(len(data)))

    def verify(self, codeword: Sequence[int]) -> bool:
        return syndrome(codeword) == 0
