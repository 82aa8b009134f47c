import pytest

from fluentkit import mqrspec
from fluentkit.mqrspec import ECLevel, EncodeMode


def test_widths_from_table():
    assert [mqrspec.get_width(v) for v in range(1, 5)] == [11, 13, 15, 17]
    assert mqrspec.get_width(mqrspec.VERSION_MAX) == mqrspec.WIDTH_MAX


def test_ecc_length_from_table():
    assert mqrspec.get_ecc_length(4, ECLevel.Q) == 14
    assert mqrspec.get_ecc_length(1, ECLevel.M) == 0


def test_unsupported_level_has_no_data():
    for version in range(1, 5):
        assert mqrspec.get_data_length_bit(version, ECLevel.H) == 0
    assert mqrspec.get_data_length_bit(1, ECLevel.M) == 0


@pytest.mark.parametrize("version", range(1, 5))
@pytest.mark.parametrize("level", [ECLevel.L, ECLevel.M, ECLevel.Q])
def test_data_length_bytes_covers_bits(version, level):
    bits = mqrspec.get_data_length_bit(version, level)
    length = mqrspec.get_data_length(version, level)
    assert length * 8 - 4 <= bits <= length * 8 + 3


def test_data_length_decreases_with_level():
    assert mqrspec.get_data_length_bit(4, ECLevel.L) > mqrspec.get_data_length_bit(4, ECLevel.M)
    assert mqrspec.get_data_length_bit(4, ECLevel.M) > mqrspec.get_data_length_bit(4, ECLevel.Q)


def test_length_indicator_grows_with_version():
    for mode in EncodeMode:
        sizes = [mqrspec.length_indicator(mode, v) for v in range(1, 5)]
        assert sizes == sorted(sizes)


def test_maximum_words_unsupported_mode_is_zero():
    assert mqrspec.maximum_words(EncodeMode.KANJI, 1) == 0
    assert mqrspec.maximum_words(EncodeMode.AN, 1) == 0


def test_format_info_known_values():
    assert mqrspec.get_format_info(0, 1, ECLevel.L) == 0x4445
    assert mqrspec.get_format_info(3, 4, ECLevel.Q) == 0x3BBA


@pytest.mark.parametrize(
    "mask,version,level",
    [(-1, 1, ECLevel.L), (4, 1, ECLevel.L), (0, 0, ECLevel.L), (0, 5, ECLevel.L),
     (0, 4, ECLevel.H), (0, 1, ECLevel.M), (0, 3, ECLevel.Q)],
)
def test_format_info_invalid_is_zero(mask, version, level):
    assert mqrspec.get_format_info(mask, version, level) == 0


def test_invalid_version_raises():
    with pytest.raises(ValueError):
        mqrspec.get_width(0)
    with pytest.raises(ValueError):
        mqrspec.new_frame(5)


@pytest.mark.parametrize("version", range(1, 5))
def test_frame_layout(version):
    width = mqrspec.get_width(version)
    frame = mqrspec.new_frame(version)
    assert len(frame) == width * width
    # finder corners and centre
    assert frame[0] == 0xC1
    assert frame[6 * width + 6] == 0xC1
    assert frame[3 * width + 3] == 0xC1
    assert frame[1 * width + 1] == 0xC0
    # separator
    assert frame[7] == 0xC0
    assert frame[7 * width] == 0xC0
    # format area
    assert frame[8 * width + 8] == 0x84
    assert frame[1 * width + 8] == 0x84
    # timing pattern is symmetric and alternates
    row = [frame[x] for x in range(8, width)]
    col = [frame[y * width] for y in range(8, width)]
    assert row == col
    for value, nxt in zip(row, row[1:]):
        assert value & 0xF0 == 0x90
        assert (value ^ nxt) & 1 == 1
    # bottom-right corner is data area
    assert frame[width * width - 1] == 0