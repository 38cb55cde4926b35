import pytest

from hamcoder.pipelines.hamming import (
    HammingEncoder,
    assemble_codeword,
    code_length,
    parity_bit,
    parity_bit_count,
    syndrome,
)


def _hamming_bound(data_length):
    r = 0
    while (1 << r) < data_length + r + 1:
        r += 1
    return r


@pytest.mark.parametrize("data_length", [0, 1, 2, 3, 4, 8, 11, 16, 17])
def test_parity_count_matches_hamming_bound(data_length):
    expected = 0 if data_length == 0 else _hamming_bound(data_length)
    assert parity_bit_count(data_length) == expected


def test_parity_count_known_values():
    assert [parity_bit_count(n) for n in (1, 2, 3, 4, 16)] == [2, 3, 3, 3, 5]
    assert code_length(16) == 21
    assert code_length(0) == 0

    with pytest.raises(ValueError):
        parity_bit_count(-1)


def test_hamming_74_example():
    # Позиции 1, 2, 4 проверочные, 3, 5, 6, 7 содержат данные 1, 0, 1, 1
    codeword = assemble_codeword([1, 0, 1, 1], 7)
    assert codeword == [0, 1, 1, 0, 0, 1, 1]
    assert [codeword[i - 1] for i in (3, 5, 6, 7)] == [1, 0, 1, 1]


def test_hamming_74_table():
    encoder = HammingEncoder()
    table = {
        (0, 0, 0, 0): "0000000",
        (0, 0, 0, 1): "1101001",
        (1, 0, 0, 0): "1110000",
        (1, 1, 1, 1): "1111111",
    }
    for data, expected in table.items():
        assert "".join(map(str, encoder.encode(data))) == expected


def test_parity_bits_are_fixed_point():
    encoder = HammingEncoder()
    for value in range(1 << 6):
        data = [(value >> i) & 1 for i in range(6)]
        codeword = encoder.encode(data)
        position = 1
        while position <= len(codeword):
            assert parity_bit(codeword, position) == codeword[position - 1]
            position <<= 1
        assert encoder.verify(codeword)


def test_single_bit_flip_locates_position():
    encoder = HammingEncoder()
    data = [1, 0, 1, 1, 0, 0, 1, 0, 1, 1, 1, 0, 1, 0, 0, 1, 1]
    codeword = encoder.encode(data)
    assert len(codeword) == 22
    assert syndrome(codeword) == 0

    for position in range(1, len(codeword) + 1):
        damaged = list(codeword)
        damaged[position - 1] ^= 1
        assert syndrome(damaged) == position
        assert not encoder.verify(damaged)


def test_lowest_parity_bit_covers_odd_positions():
    codeword = [0, 0, 1, 0, 1, 0, 1, 0, 1]
    assert parity_bit(codeword, 1) == 0
    codeword[8] = 0
    assert parity_bit(codeword, 1) == 1


def test_empty_word():
    assert HammingEncoder().encode([]) == []


def test_parity_bit_rejects_data_position():
    with pytest.raises(ValueError):
        parity_bit([0, 0, 1], 3)
    with pytest.raises(ValueError):
        parity_bit([0, 0, 1], 4)


def test_assemble_rejects_mismatched_length():
    with pytest.raises(ValueError):
        assemble_codeword([1, 0, 1, 1], 6)
    with pytest.raises(ValueError):
        assemble_codeword([1, 0, 1], 7)
