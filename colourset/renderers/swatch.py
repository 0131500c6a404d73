"""Render the palette as a PNG swatch.

One row per colourset (base on top), one block per role in table order:
background, topshadow, bottomshadow, foreground, foreground_inactive.
Each background block carries a foreground bar so the contrast can be
judged at a glance.

Requires --output (the PNG path).

Example:
    uv run colourset swatch --hue 60 --shade 1 -n 3 -o swatch.png
"""

import os

import numpy as np
from PIL import Image

from colourset.core.types import ROLES, Colourset, ConfigError, Palette, Renderer

renderer = Renderer(
    name='swatch',
    help='PNG swatch: one row per colourset, one block per role. Needs --output.',
)

BLOCK_W = 64
BLOCK_H = 48
BAR_H = 8


def swatch_array(members: list[Colourset]) -> np.ndarray:
    """Build the swatch as a (rows*BLOCK_H, len(ROLES)*BLOCK_W, 3) uint8 array."""
    arr = np.zeros((len(members) * BLOCK_H, len(ROLES) * BLOCK_W, 3), dtype=np.uint8)
    for row, cs in enumerate(members):
        y = row * BLOCK_H
        for col, role in enumerate(ROLES):
            x = col * BLOCK_W
            arr[y : y + BLOCK_H, x : x + BLOCK_W] = cs.as_rgb(role)
        # foreground bar across the middle of the background block
        mid = y + (BLOCK_H - BAR_H) // 2
        arr[mid : mid + BAR_H, 8 : BLOCK_W - 8] = cs.as_rgb('foreground')
    return arr


@renderer.run
def run(palette: Palette, args) -> str:
    output = getattr(args, 'output', None)
    if not output:
        raise ConfigError('swatch: --output PNG path required')
    parent = os.path.dirname(output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image = Image.fromarray(swatch_array(palette.members))
    image.save(output)
    return f'swatch: wrote {output} ({image.width}×{image.height})\n'
