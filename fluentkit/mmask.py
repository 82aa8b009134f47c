"""Data masking and mask selection for Micro QR Code symbols."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .mqrspec import ECLevel, get_format_info, get_width

__all__ = [
    "MASK_COUNT",
    "write_format_information",
    "make_masked_frame",
    "make_mask",
    "evaluate_symbol",
    "select_mask",
]

_PATTERNS: tuple[Callable[[int, int], int], ...] = (
    lambda x, y: y & 1,
    lambda x, y: ((y // 2) + (x // 3)) & 1,
    lambda x, y: (((x * y) & 1) + (x * y) % 3) & 1,
    lambda x, y: (((x + y) & 1) + ((x * y) % 3)) & 1,
)

MASK_COUNT = len(_PATTERNS)


def _check_frame(width: int, frame: Sequence[int]) -> None:
    if width < 0 or len(frame) != width * width:
        raise ValueError(f"frame must hold {width}x{width} cells, got {len(frame)}")


def _check_mask(mask: int) -> None:
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"mask must be 0..{MASK_COUNT - 1}, got {mask}")


def write_format_information(version: int, width: int, frame: bytearray,
                             mask: int, level: ECLevel) -> None:
    """Write the 15 format information bits into ``frame`` in place."""
    _check_frame(width, frame)
    fmt = get_format_info(mask, version, level)
    for i in range(8):
        frame[width * (i + 1) + 8] = 0x84 | (fmt & 1)
        fmt >>= 1
    for i in range(7):
        frame[width * 8 + 7 - i] = 0x84 | (fmt & 1)
        fmt >>= 1


def make_masked_frame(width: int, frame: Sequence[int], mask: int) -> bytearray:
    """Apply mask pattern ``mask`` to every non-function cell of ``frame``."""
    _check_mask(mask)
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


def make_mask(version: int, frame: Sequence[int], mask: int, level: ECLevel) -> bytearray:
    """Mask ``frame`` with pattern ``mask`` and write its format information."""
    _check_mask(mask)
    width = get_width(version)
    masked = make_masked_frame(width, frame, mask)
    write_format_information(version, width, masked, mask, level)
    return masked


def evaluate_symbol(width: int, frame: Sequence[int]) -> int:
    """Score of a masked symbol; a higher score is better."""
    _check_frame(width, frame)
    bottom = width * (width - 1)
    sum1 = sum(frame[bottom + x] & 1 for x in range(1, width))
    sum2 = sum(frame[y * width + width - 1] & 1 for y in range(1, width))
    low, high = sorted((sum1, sum2))
    return low * 16 + high


def select_mask(version: int, frame: Sequence[int], level: ECLevel) -> bytearray:
    """Return the masked frame with the highest score; the first one wins ties."""
    width = get_width(version)
    best: bytearray | None = None
    best_score = 0
    for mask in range(MASK_COUNT):
        candidate = make_mask(version, frame, mask, level)
        score = evaluate_symbol(width, candidate)
        if score > best_score:
            best_score = score
            best = candidate
    if best is None:
        raise ValueError("no mask pattern gives a positive score")
    return best