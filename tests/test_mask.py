import pytest

from fluentkit.mask import (
    MASK_COUNT,
    N1,
    N3,
    calc_n1n3,
    calc_n2,
    count_dark,
    evaluate_symbol,
    make_masked_frame,
    run_lengths,
)


def _sample_frame(width):
    return bytearray(((x * 7 + y * 3) % 5 == 0) | (0x80 if x == y else 0)
                     for y in range(width) for x in range(width))


def _transpose(width, frame):
    return bytearray(frame[x * width + y] for y in range(width) for x in range(width))


@pytest.mark.parametrize("mask", range(MASK_COUNT))
def test_masking_twice_restores_frame(mask):
    frame = _sample_frame(9)
    once = make_masked_frame(9, frame, mask)
    assert make_masked_frame(9, once, mask) == frame


@pytest.mark.parametrize("mask", range(MASK_COUNT))
def test_function_cells_are_untouched(mask):
    frame = _sample_frame(9)
    masked = make_masked_frame(9, frame, mask)
    for before, after in zip(frame, masked):
        if before & 0x80:
            assert after == before


def test_mask_one_darkens_even_rows_of_empty_frame():
    masked = make_masked_frame(3, bytearray(9), 1)
    rows = [masked[y * 3:(y + 1) * 3] for y in range(3)]
    assert [all(c & 1 for c in row) for row in rows] == [True, False, True]


@pytest.mark.parametrize("mask", [-1, MASK_COUNT])
def test_invalid_mask_rejected(mask):
    with pytest.raises(ValueError):
        make_masked_frame(3, bytearray(9), mask)


def test_wrong_frame_size_rejected():
    with pytest.raises(ValueError):
        make_masked_frame(3, bytearray(8), 0)
    with pytest.raises(ValueError):
        evaluate_symbol(3, bytearray(10))


def test_count_dark_uses_low_bit():
    frame = bytes([0x80, 0x81, 0x01, 0x00, 0xC1])
    assert count_dark(frame) == sum(1 for c in frame if c & 1)


def test_run_lengths_light_start():
    assert run_lengths([0, 0, 1, 1, 1, 0]) == [2, 3, 1]


def test_run_lengths_dark_start_has_placeholder():
    assert run_lengths([1, 1, 0]) == [-1, 2, 1]


@pytest.mark.parametrize("cells", [[0] * 6, [1, 0, 1, 0], [0x81, 0x80, 0x80, 1], [1]])
def test_run_lengths_cover_all_cells(cells):
    runs = run_lengths(cells)
    assert sum(r for r in runs if r > 0) == len(cells)
    assert (runs[0] == -1) == bool(cells[0] & 1)


def test_long_run_penalty_grows_by_one_per_cell():
    assert calc_n1n3([5]) == N1
    assert calc_n1n3([6]) - calc_n1n3([5]) == 1


def test_short_runs_have_no_penalty():
    assert calc_n1n3([1, 2, 3, 4, 1]) == calc_n1n3([])


def test_finder_like_pattern_is_penalised():
    assert calc_n1n3([4, 1, 1, 3, 1, 1, 4]) == N3


def test_calc_n2_same_for_all_light_and_all_dark():
    assert calc_n2(4, bytes(16)) == calc_n2(4, bytes([1] * 16))
    assert calc_n2(4, bytes(16)) > calc_n2(4, bytes((x + y) & 1 for y in range(4) for x in range(4)))


def test_calc_n2_ignores_checkerboard():
    checker = bytes((x + y) & 1 for y in range(5) for x in range(5))
    assert calc_n2(5, checker) == calc_n2(1, bytes(1))


def test_evaluate_symbol_is_transpose_invariant():
    frame = make_masked_frame(11, _sample_frame(11), 3)
    assert evaluate_symbol(11, frame) == evaluate_symbol(11, _transpose(11, frame))


def test_evaluate_symbol_includes_n2():
    frame = bytes(36)
    assert evaluate_symbol(6, frame) >= calc_n2(6, frame)