import pytest

from fluentkit.mmask import (
    MASK_COUNT,
    evaluate_symbol,
    make_mask,
    make_masked_frame,
    select_mask,
    write_format_information,
)
from fluentkit.mqrspec import ECLevel, get_format_info, get_width, new_frame


def _read_format(width, frame):
    bits = [frame[width * (i + 1) + 8] & 1 for i in range(8)]
    bits += [frame[width * 8 + 7 - i] & 1 for i in range(7)]
    return sum(bit << i for i, bit in enumerate(bits))


def _transpose(width, frame):
    return bytearray(frame[x * width + y] for y in range(width) for x in range(width))


@pytest.mark.parametrize("version,level", [(1, ECLevel.L), (2, ECLevel.M), (4, ECLevel.Q)])
@pytest.mark.parametrize("mask", range(MASK_COUNT))
def test_format_information_round_trip(version, level, mask):
    width = get_width(version)
    frame = new_frame(version)
    write_format_information(version, width, frame, mask, level)
    assert _read_format(width, frame) == get_format_info(mask, version, level)


def test_format_cells_keep_function_marker():
    width = get_width(3)
    frame = new_frame(3)
    write_format_information(3, width, frame, 2, ECLevel.L)
    cells = [frame[width * (i + 1) + 8] for i in range(8)]
    cells += [frame[width * 8 + 7 - i] for i in range(7)]
    assert all(c & 0x84 == 0x84 for c in cells)


@pytest.mark.parametrize("mask", range(MASK_COUNT))
def test_masking_twice_restores_frame(mask):
    frame = new_frame(2)
    width = get_width(2)
    once = make_masked_frame(width, frame, mask)
    assert make_masked_frame(width, once, mask) == frame


def test_mask_zero_darkens_even_rows_of_empty_frame():
    masked = make_masked_frame(4, bytearray(16), 0)
    rows = [masked[y * 4:(y + 1) * 4] for y in range(4)]
    assert [all(c & 1 for c in row) for row in rows] == [True, False, True, False]


@pytest.mark.parametrize("mask", [-1, MASK_COUNT])
def test_invalid_mask_rejected(mask):
    with pytest.raises(ValueError):
        make_mask(1, new_frame(1), mask, ECLevel.L)
    with pytest.raises(ValueError):
        make_masked_frame(11, new_frame(1), mask)


def test_invalid_version_rejected():
    with pytest.raises(ValueError):
        make_mask(5, bytearray(19 * 19), 0, ECLevel.L)


@pytest.mark.parametrize("mask", range(MASK_COUNT))
def test_make_mask_combines_masking_and_format(mask):
    frame = new_frame(3)
    width = get_width(3)
    expected = make_masked_frame(width, frame, mask)
    write_format_information(3, width, expected, mask, ECLevel.M)
    result = make_mask(3, frame, mask, ECLevel.M)
    assert result == expected
    assert all(r & 0x80 for f, r in zip(frame, result) if f & 0x80)


def test_evaluate_symbol_bottom_row_dark():
    width = 5
    frame = bytearray(width * width)
    frame[width * (width - 1):] = b"\x01" * width
    assert evaluate_symbol(width, frame) == 20


def test_evaluate_symbol_transpose_invariant():
    width = get_width(4)
    frame = make_mask(4, new_frame(4), 1, ECLevel.L)
    assert evaluate_symbol(width, frame) == evaluate_symbol(width, _transpose(width, frame))


@pytest.mark.parametrize("version,level", [(1, ECLevel.L), (2, ECLevel.M), (4, ECLevel.Q)])
def test_select_mask_picks_first_best(version, level):
    width = get_width(version)
    frame = new_frame(version)
    candidates = [make_mask(version, frame, m, level) for m in range(MASK_COUNT)]
    scores = [evaluate_symbol(width, c) for c in candidates]
    best = select_mask(version, frame, level)
    assert evaluate_symbol(width, best) == max(scores)
    assert best == candidates[scores.index(max(scores))]


def test_select_mask_raises_when_nothing_scores():
    width = get_width(1)
    frame = bytearray([0x80] * (width * width))
    with pytest.raises(ValueError):
        select_mask(1, frame, ECLevel.L)