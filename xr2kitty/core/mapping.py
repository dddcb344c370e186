"""Resolve extracted X resources values into KiTTY ColourN entries."""

from collections.abc import Mapping

from xr2kitty.core.colour import hex_to_rgb
from xr2kitty.core.errors import InvalidFormatError, InvalidHexError, MissingKeysError
from xr2kitty.core.types import NAME_SLOTS, OutputEntry


def resolve_entries(values: Mapping[str, str]) -> list[OutputEntry]:
    """Build one OutputEntry per slot in NAME_SLOTS.

    All absent keys are collected before failing so the error lists every one
    of them. Entries come back in table order; the renderer sorts them.
    """
    missing: list[str] = []
    entries: list[OutputEntry] = []

    for key, slots in NAME_SLOTS.items():
        hex_value = values.get(key)
        if hex_value is None:
            missing.append(key)
            continue

        try:
            color = hex_to_rgb(hex_value)
        except InvalidFormatError as exc:
            raise InvalidHexError(hex_value, exc) from exc

        entries.extend(OutputEntry.for_slot(slot, color) for slot in slots)

    if missing:
        raise MissingKeysError(missing)
    return entries
