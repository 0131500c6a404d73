"""X resources for window-manager themes, using rgb:RR/GG/BB colour strings.

Lines look like ``colourset.cs1.topshadow: rgb:CC/E6/80``, suitable for
xrdb -merge or for pasting into a window-manager resource file.

Example:
    uv run colourset xresources --hue 120 --shade 2 -n 4 | xrdb -merge
"""

from colourset.core.types import ROLES, Palette, Renderer

renderer = Renderer(
    name='xresources',
    help='X resource lines with rgb: colour strings.',
)


@renderer.run
def run(palette: Palette, args) -> str:
    lines = []
    for i, cs in enumerate(palette.members):
        lines.append(f'! cs{i}: hue {cs.hue} shade {cs.shade}')
        for role in ROLES:
            lines.append(f'colourset.cs{i}.{role}: {cs.as_rgb_string(role)}')
    return '\n'.join(lines) + '\n'
