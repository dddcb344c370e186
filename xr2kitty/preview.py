"""PNG swatch preview of a resolved KiTTY palette.

Lays the entries out in name order, COLUMNS per row, one solid cell per
entry with its ColourN name drawn in black or white depending on luminance.

Example:
    xr2kitty ~/.Xresources solarized --preview /tmp/solarized.png
"""

import numpy as np
from PIL import Image, ImageDraw

from xr2kitty.core.errors import PreviewError
from xr2kitty.core.report import sort_entries
from xr2kitty.core.types import OutputEntry, RGBColor

COLUMNS = 6
CELL_W = 96
CELL_H = 64


def _label_fill(color: RGBColor) -> tuple[int, int, int]:
    # Rec. 601 luma
    luma = 0.299 * color.r + 0.587 * color.g + 0.114 * color.b
    return (0, 0, 0) if luma > 127 else (255, 255, 255)


def build_swatch(entries: list[OutputEntry], columns: int = COLUMNS) -> Image.Image:
    """Render entries as a grid of labelled colour cells."""
    ordered = sort_entries(entries)
    rows = max(1, -(-len(ordered) // columns))
    arr = np.zeros((rows * CELL_H, columns * CELL_W, 3), dtype=np.uint8)

    for i, entry in enumerate(ordered):
        y, x = divmod(i, columns)
        arr[y * CELL_H : (y + 1) * CELL_H, x * CELL_W : (x + 1) * CELL_W] = entry.color.rgb

    image = Image.fromarray(arr)
    draw = ImageDraw.Draw(image)
    for i, entry in enumerate(ordered):
        y, x = divmod(i, columns)
        draw.text((x * CELL_W + 4, y * CELL_H + 4), entry.name, fill=_label_fill(entry.color))
    return image


def write_swatch(entries: list[OutputEntry], path: str) -> None:
    """Write the swatch as PNG. Raises PreviewError on any I/O failure."""
    image = build_swatch(entries)
    try:
        image.save(path, format='PNG')
    except OSError as exc:
        raise PreviewError(path, exc) from exc
