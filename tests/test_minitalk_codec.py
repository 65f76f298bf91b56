import pytest

from fortytools.minitalk_codec import (
    MessageDecoder,
    NumberDecoder,
    atoi,
    checksum,
    encode_message,
    encode_number,
    format_number,
    itoa,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("42", 42), ("  -42", -42), ("\t\n+17", 17), ("12abc", 12), ("abc", 0), ("", 0)],
)
def test_atoi_reads_leading_integer(text, expected):
    assert atoi(text) == expected


def test_atoi_minus_then_plus_gives_zero():
    assert atoi("-+5") == 0


def test_atoi_overflow_past_long_range():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("number", [0, 7, -7, 123456, 2**31 - 1, -(2**31)])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number
    assert format_number(number) == itoa(number)


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        format_number(-(2**31) - 1)


def test_checksum_of_empty_text_is_zero():
    assert checksum("") == 0


def test_checksum_counts_low_six_bits():
    assert checksum("?") == 6
    assert checksum("@") == 0


def test_checksum_is_additive():
    text = "hello world"
    assert checksum(text) == sum(checksum(char) for char in text)
    assert checksum(text.encode()) == checksum(text)


def test_encode_number_ends_with_terminator():
    bits = encode_number(4213)
    assert bits[-4:] == [1, 1, 1, 1]
    assert len(bits) == 4 * (len("4213") + 1)
    assert set(bits) <= {0, 1}


@pytest.mark.parametrize("number", [0, 5, 10, 9999, 32768, 2**31 - 1])
def test_number_round_trip(number):
    decoder = NumberDecoder()
    assert decoder.feed_all(encode_number(number)) == [number]


def test_number_decoder_handles_consecutive_numbers():
    decoder = NumberDecoder()
    assert decoder.feed_all(encode_number(12) + encode_number(345)) == [12, 345]


def test_number_decoder_waits_for_terminator():
    decoder = NumberDecoder()
    bits = encode_number(88)
    results = [decoder.feed(bit) for bit in bits[:-1]]
    assert results == [None] * (len(bits) - 1)
    assert decoder.feed(bits[-1]) == 88


def test_encode_message_uses_seven_bits_per_char():
    text = "Hi there"
    bits = encode_message(text)
    assert len(bits) == 7 * len(text)
    assert set(bits) <= {0, 1}


def test_encode_message_rejects_empty_and_non_ascii():
    with pytest.raises(ValueError):
        encode_message("")
    with pytest.raises(ValueError):
        encode_message("caf\u00e9")


@pytest.mark.parametrize("text", ["a", "Hello, world!", "\x00\x7f", "multi\nline"])
def test_message_round_trip(text):
    decoder = MessageDecoder(len(text))
    results = [decoder.feed(bit) for bit in encode_message(text)]
    assert results[-1] == text
    assert all(result is None for result in results[:-1])
    assert decoder.complete


def test_message_decoder_rejects_extra_bits():
    decoder = MessageDecoder(1)
    for bit in encode_message("z"):
        decoder.feed(bit)
    with pytest.raises(ValueError):
        decoder.feed(1)


def test_message_decoder_requires_positive_length():
    with pytest.raises(ValueError):
        MessageDecoder(0)