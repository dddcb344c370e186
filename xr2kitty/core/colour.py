"""Hex colour decoding: '#RRGGBB' and the '#RGB' shorthand."""

import string

from xr2kitty.core.errors import InvalidFormatError
from xr2kitty.core.types import RGBColor

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgb(value: str) -> RGBColor:
    """Decode '#RRGGBB' or '#RGB' into an opaque RGBColor.

    Every digit is checked before any channel is computed, so a string with a
    single bad digit fails as a whole. Shorthand digits expand as d * 17
    ('#8a2' -> 136, 170, 34).
    """
    if not value or value[0] != '#':
        raise InvalidFormatError()

    digits = value[1:]
    if len(digits) not in (3, 6) or not all(c in _HEX_DIGITS for c in digits):
        raise InvalidFormatError()

    if len(digits) == 6:
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    else:
        r, g, b = (int(d, 16) * 17 for d in digits)
    return RGBColor(r=r, g=g, b=b)
