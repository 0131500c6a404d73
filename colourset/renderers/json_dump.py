"""Dump the palette as JSON: hue, shade and HSV/hex/rgb per role.

Example:
    uv run colourset json --hue 200 -n 2 --seed 7
"""

from colourset.core.report import format_json
from colourset.core.types import Palette, Renderer

renderer = Renderer(
    name='json',
    help='Palette as JSON (hue, shade, HSV/hex/rgb per role).',
)


@renderer.run
def run(palette: Palette, args) -> str:
    return format_json(palette)
