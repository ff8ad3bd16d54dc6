import pytest

from keygen_service.generators.encoder import ALPHABET, KeyEncoder, max_number_for_width


@pytest.fixture
def encoder():
    return KeyEncoder(8)


@pytest.mark.parametrize("number,expected", [
    (0, "00000000"),
    (1, "00000001"),
    (61, "0000000z"),
    (62, "00000010"),
    (63, "00000011"),
    (12345678, "0000pnfq"),
])
def test_encode_known_values(encoder, number, expected):
    assert encoder.encode(number) == expected


def test_max_number_for_width():
    assert max_number_for_width(8) == 62 ** 8 - 1
    assert max_number_for_width(1) == 61
    assert KeyEncoder(8).max_number == 62 ** 8 - 1


def test_max_number_encodes_to_all_z(encoder):
    assert encoder.encode(encoder.max_number) == "z" * 8


def test_alphabet_order():
    assert len(ALPHABET) == 62
    assert ALPHABET[:10] == "0123456789"
    assert ALPHABET[10] == "A"
    assert ALPHABET[36] == "a"


def test_encode_has_fixed_width_and_decodes_back():
    for digits in (1, 3, 8, 11):
        encoder = KeyEncoder(digits)
        for number in (0, 1, encoder.max_number // 7, encoder.max_number):
            key = encoder.encode(number)
            assert len(key) == digits
            assert encoder.decode(key) == number


def test_encode_truncates_high_order_digits():
    encoder = KeyEncoder(2)
    assert encoder.encode(62 ** 2) == "00"
    assert encoder.encode(62 ** 2 + 5) == "05"


def test_encode_rejects_negative(encoder):
    with pytest.raises(ValueError):
        encoder.encode(-1)


def test_width_must_be_positive():
    with pytest.raises(ValueError):
        KeyEncoder(0)


def test_decode_rejects_foreign_characters(encoder):
    with pytest.raises(ValueError):
        encoder.decode("0000-000")
