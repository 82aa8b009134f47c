"""Data masking and penalty evaluation for full-size QR Code symbols."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import groupby

__all__ = [
    "N1",
    "N2",
    "N3",
    "N4",
    "MASK_COUNT",
    "make_masked_frame",
    "count_dark",
    "run_lengths",
    "calc_n1n3",
    "calc_n2",
    "evaluate_symbol",
]

# Demerit coefficients (JIS X0510:2004, section 8.8.2).
N1 = 3
N2 = 3
N3 = 40
N4 = 10

_PATTERNS: tuple[Callable[[int, int], int], ...] = (
    lambda x, y: (x + y) & 1,
    lambda x, y: y & 1,
    lambda x, y: x % 3,
    lambda x, y: (x + y) % 3,
    lambda x, y: ((y // 2) + (x // 3)) & 1,
    lambda x, y: ((x * y) & 1) + (x * y) % 3,
    lambda x, y: (((x * y) & 1) + (x * y) % 3) & 1,
    lambda x, y: (((x * y) % 3) + ((x + y) & 1)) & 1,
)

MASK_COUNT = len(_PATTERNS)


def _check_frame(width: int, frame: Sequence[int]) -> None:
    if width < 0 or len(frame) != width * width:
        raise ValueError(f"frame must hold {width}x{width} cells, got {len(frame)}")


def make_masked_frame(width: int, frame: Sequence[int], mask: int) -> bytearray:
    """Apply mask pattern ``mask`` to every non-function cell of ``frame``."""
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"mask must be 0..{MASK_COUNT - 1}, got {mask}")
    _check_frame(width, frame)
    pattern = _PATTERNS[mask]
    masked = bytearray(len(frame))
    for index, cell in enumerate(frame):
        if cell & 0x80:
            masked[index] = cell
        else:
            y, x = divmod(index, width)
            masked[index] = cell ^ (pattern(x, y) == 0)
    return masked


def count_dark(frame: Iterable[int]) -> int:
    """Number of dark modules in a frame."""
    return sum(cell & 1 for cell in frame)


def run_lengths(cells: Iterable[int]) -> list[int]:
    """Lengths of alternating light/dark runs, starting with a light run.

    When the first cell is dark the list starts with -1 as a placeholder for
    the empty leading light run, so odd positions always hold dark runs.
    """
    cells = list(cells)
    runs = [len(list(group)) for _, group in groupby(cells, key=lambda c: c & 1)]
    if cells and cells[0] & 1:
        runs.insert(0, -1)
    return runs


def calc_n1n3(run_lengths: Sequence[int]) -> int:
    """Penalty for long runs (N1) and finder-like 1:1:3:1:1 patterns (N3)."""
    runs = list(run_lengths)
    length = len(runs)
    demerit = 0
    for i, run in enumerate(runs):
        if run >= 5:
            demerit += N1 + (run - 5)
        if i & 1 and 3 <= i < length - 2 and run % 3 == 0:
            fact = run // 3
            if runs[i - 2] == runs[i - 1] == runs[i + 1] == runs[i + 2] == fact:
                if i == 3 or runs[i - 3] >= 4 * fact:
                    demerit += N3
                elif i + 4 >= length or runs[i + 3] >= 4 * fact:
                    demerit += N3
    return demerit


def calc_n2(width: int, frame: Sequence[int]) -> int:
    """Penalty for every 2x2 block of a single colour."""
    _check_frame(width, frame)
    demerit = 0
    for y in range(1, width):
        for x in range(1, width):
            p = y * width + x
            block = (frame[p], frame[p - 1], frame[p - width], frame[p - width - 1])
            bits = {cell & 1 for cell in block}
            if len(bits) == 1:
                demerit += N2
    return demerit


def evaluate_symbol(width: int, frame: Sequence[int]) -> int:
    """Total N1, N2 and N3 penalty of a masked symbol."""
    _check_frame(width, frame)
    demerit = calc_n2(width, frame)
    for y in range(width):
        demerit += calc_n1n3(run_lengths(frame[y * width:(y + 1) * width]))
    for x in range(width):
        demerit += calc_n1n3(run_lengths(frame[x::width]))
    return demerit