"""Conversion between RGB colors and the platform's packed integers.

The platform encodes colors as a single 24 bit integer: bits 16-23 hold
the red channel, bits 8-15 green and bits 0-7 blue.
"""

from __future__ import annotations

from typing import Final

import attrs
from attrs import validators

_CHANNEL = [validators.instance_of(int), validators.ge(0), validators.le(0xFF)]
_PACKED_MASK: Final = 0xFFFFFF


@attrs.define(frozen=True)
class Color:
    """An RGB color, each channel an 8 bit unsigned integer."""

    red: int = attrs.field(validator=_CHANNEL)
    green: int = attrs.field(validator=_CHANNEL)
    blue: int = attrs.field(validator=_CHANNEL)

    @classmethod
    def default(cls) -> Color:
        """Return the color used for embeds that do not set one."""
        return DEFAULT_COLOR

    @classmethod
    def from_packed(cls, value: int) -> Color:
        """Decode a packed integer. Bits above the lowest 24 are ignored."""
        return from_packed(value)

    def to_packed(self) -> int:
        """Encode this color as a packed integer."""
        return to_packed(self)

    def __int__(self) -> int:
        return to_packed(self)


def from_packed(value: int) -> Color:
    """Decode a packed 24 bit integer into a `Color`.

    :param value: The packed color; higher bits are discarded
    :return: The decoded color
    """
    value &= _PACKED_MASK
    return Color(red=(value >> 16) & 0xFF, green=(value >> 8) & 0xFF, blue=value & 0xFF)


def to_packed(color: Color) -> int:
    """Encode a `Color` as a packed 24 bit integer.

    :param color: The color to encode
    :return: The packed color
    """
    return (color.red << 16) | (color.green << 8) | color.blue


DEFAULT_COLOR: Final = Color(red=222, green=165, blue=132)
