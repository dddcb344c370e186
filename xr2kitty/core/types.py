"""Shared types and constants for xr2kitty: RGBColor, OutputEntry, NAME_SLOTS."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

COLOUR_PREFIX = 'Colour'
REGISTRY_HEADER = 'Windows Registry Editor Version 5.00'
SESSIONS_PATH = 'HKEY_CURRENT_USER\\Software\\9bis.com\\KiTTY\\Sessions\\'

# X resources key -> KiTTY ColourN slots. KiTTY interleaves normal/bold
# variants, so color0 and color8 are neighbours (6, 7) and so on.
NAME_SLOTS: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        'foreground': (0, 1),
        'background': (2, 3),
        'cursorColor': (4, 5),
        'color0': (6,),
        'color8': (7,),
        'color1': (8,),
        'color9': (9,),
        'color2': (10,),
        'color10': (11,),
        'color3': (12,),
        'color11': (13,),
        'color4': (14,),
        'color12': (15,),
        'color5': (16,),
        'color13': (17,),
        'color6': (18,),
        'color14': (19,),
        'color7': (20,),
        'color15': (21,),
    }
)


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit-per-channel colour. Alpha is always opaque after decoding."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    def rgb_string(self) -> str:
        """KiTTY registry value form: 'R,G,B'."""
        return f'{self.r},{self.g},{self.b}'

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class OutputEntry:
    """One `"ColourN"="R,G,B"` line of the registry document."""

    name: str  # COLOUR_PREFIX + slot index
    color: RGBColor

    @classmethod
    def for_slot(cls, slot: int, color: RGBColor) -> OutputEntry:
        return cls(name=f'{COLOUR_PREFIX}{slot}', color=color)
