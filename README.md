# fluentkit

A small library with no dependencies, in two parts:

- **Fluent UI vocabulary**: the enumerations that controls share, such as
  `DarkMode`, `NavigationDisplayMode` and `ContentDialogButton` (in
  `fluentkit.enums`), and the `FluentIcon` enumeration (in `fluentkit.icons`).
  `FluentIcon` maps icon names to their Segoe Fluent Icons code points.
- **Micro QR Code building blocks**: the `BitStream` class for assembling data
  bits, the Micro QR symbol specification in `fluentkit.mqrspec`, and the mask
  patterns and scoring for full-size QR (`fluentkit.mask`) and Micro QR
  (`fluentkit.mmask`) symbols. The specification covers capacities, length
  indicators, format information and the empty function-pattern frame.

## Installation

```
pip install fluentkit
```

Python 3.10 or later is required.

## Enumerations

```python
from fluentkit.enums import ContentDialogButton, DarkMode, NavigationDisplayMode

DarkMode.DARK                 # value 2
NavigationDisplayMode.AUTO    # value 4
ContentDialogButton.NEUTRAL | ContentDialogButton.POSITIVE   # flags combine, value 5
```

The other enumerations are `SheetPosition`, `TimelineMode`, `PageLaunchMode`,
`WindowLaunchMode`, `TreeViewSelectionMode`, `StatusMode`, `HourFormat`,
`CalendarDisplayMode`, `TabWidthBehavior`, `CloseButtonVisibility` and
`NavigationPageMode`. All of them are `IntEnum`s, except `ContentDialogButton`,
which is an `IntFlag`.

## Icons

`FluentIcon` members keep the icon font's own names, for example
`FluentIcon.Settings` or `FluentIcon.ChevronDown`. Each member's value is the
icon's code point.

```python
from fluentkit.icons import FluentIcon, glyph

FluentIcon.Settings.value     # 0xE713
glyph(FluentIcon.Settings)    # "\ue713", the character to render in the icon font
glyph("Settings")             # the same, looked up by name
glyph(0xE713)                 # the same, looked up by code point
```

`glyph` raises `ValueError` for an unknown name or code point. It raises
`TypeError` for any other kind of argument.

## Bit streams

```python
from fluentkit.bitstream import BitStream

stream = BitStream()
stream.append_num(4, 0b0010)
stream.append_bytes(b"\xa5")
len(stream)          # 12
stream.to_bytes()    # b"\x2a\x50", packed most significant bit first
```

The other ways to build and change a stream are:

- `BitStream.from_bits([1, 0, 1])` builds a stream from 0/1 values.
- `append` adds another stream to the end.
- `reset` empties the stream.

You can iterate over a stream to get its bits, and two streams compare equal
when they hold the same bits.

## Micro QR specification

```python
from fluentkit.mqrspec import (
    ECLevel, EncodeMode, get_data_length, get_format_info,
    get_width, length_indicator, maximum_words, new_frame,
)

get_width(4)                          # 17
get_data_length(3, ECLevel.M)         # data capacity in bytes
length_indicator(EncodeMode.NUM, 1)   # 3 bits
maximum_words(EncodeMode.KANJI, 4)    # largest length, in bytes for Kanji
get_format_info(0, 1, ECLevel.L)      # 0x4445
frame = new_frame(2)                  # finder, separator, timing and format areas
```

Versions run from 1 to 4. Functions raise `ValueError` for a version outside
that range. `get_format_info` is the exception: it returns 0 for any
combination it does not support. `get_data_length_bit` also returns 0 for an
error correction level that the version does not offer.

Frame cells are byte values:

- When a cell has the high bit (`0x80`) set, it belongs to a function pattern, and masking never changes it.
- Bit 0 holds the module's colour.

## Masking

For Micro QR symbols, `fluentkit.mmask` has the following functions:

- `make_masked_frame` applies one of the four mask patterns.
- `make_mask` applies a pattern and also writes the format information.
- `write_format_information` writes the format bits into a frame in place.
- `evaluate_symbol` scores a masked symbol. A higher score is better.
- `select_mask` tries every pattern and returns the best masked frame. The first pattern wins a tie.

```python
from fluentkit import mmask
from fluentkit.mqrspec import ECLevel, get_width, new_frame

frame = new_frame(3)
best = mmask.select_mask(3, frame, ECLevel.L)
score = mmask.evaluate_symbol(get_width(3), best)
```

If no pattern scores above zero, `select_mask` raises `ValueError`.

For full-size symbols, `fluentkit.mask` has the following functions:

- `make_masked_frame` applies the eight mask patterns.
- `calc_n1n3`, `calc_n2` and `evaluate_symbol` compute the penalty rules. Here a lower total is better.
- `run_lengths` and `count_dark` are helpers.

The demerit weights are the constants `N1`, `N2`, `N3` and `N4`.

## What this package does not do

This package does not turn text into a QR Code. It has:

- no data segmentation
- no error correction (Reed–Solomon) coding
- no placement of data bits into a frame
- no full-size QR specification tables, function-pattern frame or format information

There is also no rendering to an image. The masking modules work on frames
that you have already filled.

## Running the tests

```
pip install "fluentkit[test]"
pytest
```