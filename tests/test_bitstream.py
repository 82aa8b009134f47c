import pytest

from fluentkit.bitstream import BitStream


def test_new_stream_is_empty():
    stream = BitStream()
    assert len(stream) == 0
    assert stream.to_bytes() == b""


def test_append_num_writes_msb_first():
    stream = BitStream()
    stream.append_num(4, 0b1010)
    assert list(stream) == [1, 0, 1, 0]


def test_append_num_keeps_only_low_bits():
    stream = BitStream()
    stream.append_num(3, 0b11101)
    assert list(stream) == [1, 0, 1]


def test_append_num_zero_bits_is_noop():
    stream = BitStream()
    stream.append_num(0, 12345)
    assert len(stream) == 0


def test_append_num_negative_count_raises():
    with pytest.raises(ValueError):
        BitStream().append_num(-1, 1)


def test_append_bytes_round_trip():
    data = b"\xa5\x00\xff\x3c"
    stream = BitStream()
    stream.append_bytes(data)
    assert len(stream) == 8 * len(data)
    assert stream.to_bytes() == data


def test_to_bytes_pads_odd_bits_with_zeros():
    stream = BitStream.from_bits([1, 1, 1])
    assert stream.to_bytes() == b"\xe0"


def test_append_concatenates_streams():
    first = BitStream.from_bits([1, 0])
    second = BitStream.from_bits([0, 1, 1])
    first.append(second)
    assert list(first) == [1, 0, 0, 1, 1]
    assert list(second) == [0, 1, 1]


def test_append_rejects_non_stream():
    with pytest.raises(TypeError):
        BitStream().append([1, 0])


def test_from_bits_rejects_non_binary():
    with pytest.raises(ValueError):
        BitStream.from_bits([0, 2])


def test_reset_clears():
    stream = BitStream.from_bits([1, 0, 1])
    stream.reset()
    assert len(stream) == 0
    assert stream == BitStream()


def test_num_and_bytes_agree():
    by_num = BitStream()
    by_num.append_num(8, 0x5A)
    by_bytes = BitStream()
    by_bytes.append_bytes(b"\x5a")
    assert by_num == by_bytes