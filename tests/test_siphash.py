import pytest

from ttakit.siphash import DEFAULT_K0, DEFAULT_K1, MASK64, siphash24, siphash24_word


def test_reference_vector_empty_message():
    assert siphash24(b"", DEFAULT_K0, DEFAULT_K1) == 0x726FDB47DD0E0E31


def test_reference_vector_fifteen_bytes():
    assert siphash24(bytes(range(15)), DEFAULT_K0, DEFAULT_K1) == 0xA129CA6149BE45E5


def test_default_keys_match_explicit_keys():
    data = b"hello world"
    assert siphash24(data) == siphash24(data, DEFAULT_K0, DEFAULT_K1)


def test_bytes_like_inputs_agree():
    data = b"some payload bytes"
    assert siphash24(bytearray(data)) == siphash24(data)
    assert siphash24(memoryview(data)) == siphash24(data)


@pytest.mark.parametrize("length", [0, 1, 7, 8, 9, 16, 31])
def test_result_fits_64_bits(length):
    result = siphash24(bytes(length))
    assert 0 <= result <= MASK64


def test_length_is_part_of_hash():
    assert siphash24(b"\x00") != siphash24(b"\x00\x00")
    assert siphash24(b"") != siphash24(b"\x00")


def test_key_changes_hash():
    data = b"abcdefgh"
    assert siphash24(data, 1, 2) != siphash24(data, 2, 1)


def test_word_hash_deterministic_and_in_range():
    a = siphash24_word(12345)
    assert a == siphash24_word(12345)
    assert 0 <= a <= MASK64


def test_word_hash_masks_to_64_bits():
    assert siphash24_word((1 << 64) + 5) == siphash24_word(5)


def test_word_hash_distinguishes_keys():
    values = {siphash24_word(k) for k in range(1000)}
    assert len(values) == 1000