"""List every colourset with the hex and X colour string of each role.

cs0 is the base colourset, cs1 onwards the alternatives.

Example:
    uv run colourset list --hue 60 --shade 1 -n 3
"""

from colourset.core.report import format_text
from colourset.core.types import Palette, Renderer

renderer = Renderer(
    name='list',
    help='Human-readable table of every colourset and role.',
)


@renderer.run
def run(palette: Palette, args) -> str:
    return format_text(palette)
