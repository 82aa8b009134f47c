"""Segoe Fluent icon names and the glyphs they stand for."""

from __future__ import annotations

from enum import IntEnum

from .icon_table_e import ICONS_E
from .icon_table_f import ICONS_F

__all__ = ["FluentIcon", "glyph"]

FluentIcon = IntEnum(
    "FluentIcon",
    {**ICONS_E, **ICONS_F},
    module=__name__,
    qualname="FluentIcon",
)
FluentIcon.__doc__ = "Segoe Fluent icon, valued by its code point."


def glyph(icon: FluentIcon | str | int) -> str:
    """Return the one-character string for an icon, its name or its code point.

    Raises ValueError when the name or code point is not a known icon.
    """
    if isinstance(icon, FluentIcon):
        member = icon
    elif isinstance(icon, str):
        try:
            member = FluentIcon[icon]
        except KeyError:
            raise ValueError(f"unknown icon name: {icon!r}") from None
    elif isinstance(icon, int):
        member = FluentIcon(icon)
    else:
        raise TypeError(f"expected an icon, name or code point, got {type(icon).__name__}")
    return chr(member.value)