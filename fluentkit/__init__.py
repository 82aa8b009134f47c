"""Fluent UI enumerations and icon glyphs, with Micro QR Code bit stream, specification and masking tools."""

__version__ = "1.0.0"

__all__ = ["bitstream", "enums", "icons", "mask", "mmask", "mqrspec"]